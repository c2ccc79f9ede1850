# ==============================================
# Media Config Store
# ==============================================
#
# Package Structure:
#
# media_config/
# ├── hashing/          # Key → fixed-length filename token
# ├── persistence/      # VideoConfig records and the file-backed store
# ├── config.py         # Configuration management
# ├── logging_config.py # Root logger setup
# └── cli.py            # Command line entry point
#
# ==============================================

from media_config.hashing import key_digest
from media_config.persistence import ConfigStore, VideoConfig, LookupStatus, ReadResult, WriteResult

__version__ = "0.1.0"

__all__ = [
    "key_digest",
    "ConfigStore",
    "VideoConfig",
    "LookupStatus",
    "ReadResult",
    "WriteResult",
]
