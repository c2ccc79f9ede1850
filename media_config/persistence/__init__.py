# ==============================================
# PERSISTENCE: per-media display settings on disk
# ==============================================
#
# This package saves and loads the display settings of each media
# item so they survive app restarts.
#
# Modules:
# --------
# - record.py        → VideoConfig, line codec, read/write results
# - config_store.py  → ConfigStore: one file per key, get/put/update_scale
#
# ==============================================

from .record import (
    VideoConfig,
    LookupStatus,
    ReadResult,
    WriteResult,
    encode_record,
    decode_record,
)
from .config_store import ConfigStore, CONFIG_SUBDIR

__all__ = [
    "VideoConfig",
    "LookupStatus",
    "ReadResult",
    "WriteResult",
    "encode_record",
    "decode_record",
    "ConfigStore",
    "CONFIG_SUBDIR",
]
