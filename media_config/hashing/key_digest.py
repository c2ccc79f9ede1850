# ==============================================
# KeyDigest
# ==============================================
#
# PURPOSE:
#   Turn an arbitrary string key (in practice a media URI) into a
#   fixed-length token that is safe to use as a filename.
#
# WHY THIS MODULE EXISTS:
#   URIs can contain path separators, query delimiters and arbitrary
#   Unicode, and can be longer than the filesystem allows for a name.
#   Hashing gives a bounded, deterministic name and keeps the URI itself
#   off the disk.
#
# FUNCTIONS:
# ----------
# - key_digest(key: str) -> str
#     SHA-256 of the UTF-8 bytes, as 64 lowercase hex characters.
#
# - config_filename(key: str) -> str
#     "<digest>_config.txt"
#
#   Each call builds a fresh hash object, so concurrent callers never
#   share hashing state and no lock is needed.
#
# ==============================================

import hashlib

DIGEST_LENGTH = 64
CONFIG_FILE_SUFFIX = "_config.txt"

# Fail at import time if the platform lacks SHA-256.
hashlib.new("sha256")


def key_digest(key: str) -> str:
    """
    Derive the filename token for a key.

    Args:
        key: Any string, including "" and non-ASCII content

    Returns:
        64 lowercase hexadecimal characters
    """
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


def config_filename(key: str) -> str:
    """Name of the record file that stores the config for ``key``."""
    return key_digest(key) + CONFIG_FILE_SUFFIX
