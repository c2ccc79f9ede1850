# ==============================================
# HASHING: key → filename token
# ==============================================
#
# Modules:
# --------
# - key_digest.py  → SHA-256 digest of a key, record filename
#
# ==============================================

from .key_digest import key_digest, config_filename, DIGEST_LENGTH, CONFIG_FILE_SUFFIX

__all__ = ["key_digest", "config_filename", "DIGEST_LENGTH", "CONFIG_FILE_SUFFIX"]
