# ==============================================
# ConfigStore
# ==============================================
#
# PURPOSE:
#   Remember display settings (resize mode, aspect ratio, zoom) per
#   media item, one small text file per item, so a video reopens the
#   way the user left it.
#
# CLASS: ConfigStore
# ------------------
#   Stateful — holds the config directory and the per-key locks.
#
#   Constructor:
#   ------------
#   - __init__(base_dir, subdir="configs", lock_updates=True)
#       Create <base_dir>/<subdir> if missing. Never raises if that
#       fails; the first put() reports the failure instead.
#
#   - from_config(config: AppConfig) (classmethod)
#
#   Methods:
#   --------
#   - put(key, record) -> WriteResult
#       Overwrite the record file for key. Never raises on I/O errors.
#
#   - get(key) -> VideoConfig | None
#       None when the file is missing, unreadable or malformed.
#
#   - load(key) -> ReadResult
#       Same read as get(), but says WHY nothing came back.
#
#   - update_scale(key, scale) -> WriteResult | None
#       Rewrite an existing record with a new scale. Does nothing and
#       returns None when there is no record to update.
#
#   - path_for(key) -> Path
#   - exists(key) -> bool
#
# CONCURRENCY:
# ------------
#   With lock_updates=True, put() and the read-modify-write inside
#   update_scale() hold a per-key lock, so threads in this process
#   cannot lose each other's updates. Other processes are not
#   coordinated with. Each write goes to a temp file that is then
#   renamed over the record, so readers see either the old or the new
#   line, never a truncated one.
#
# FILE STRUCTURE:
# ---------------
#   <base_dir>/configs/
#   ├── 3f0c...e1_config.txt   → "1,1.78,16:9,1.25"
#   └── 9ab4...07_config.txt   → "0,0.0,,1.0"
#
# ==============================================

import logging
import os
import threading
import weakref
from contextlib import nullcontext
from pathlib import Path
from typing import ContextManager, Optional, Union

from media_config.config import AppConfig
from media_config.hashing import key_digest, CONFIG_FILE_SUFFIX
from media_config.persistence.record import (
    VideoConfig,
    LookupStatus,
    ReadResult,
    WriteResult,
    encode_record,
    decode_record,
)

logger = logging.getLogger(__name__)

CONFIG_SUBDIR = "configs"


class ConfigStore:
    """
    File-backed store of VideoConfig records keyed by media URI.

    Files created:
    - <base_dir>/configs/<sha256(key)>_config.txt → one record per key
    """

    def __init__(
        self,
        base_dir: Union[str, Path],
        subdir: Optional[str] = CONFIG_SUBDIR,
        lock_updates: bool = True,
    ):
        """
        Initialize the store.

        Args:
            base_dir: Writable directory provided by the host application
            subdir: Directory under base_dir holding the record files.
                    None or "" stores records directly in base_dir.
            lock_updates: Serialize writes per key within this process
        """
        base = Path(base_dir)
        self.config_dir = base / subdir if subdir else base
        self.lock_updates = lock_updates

        # Entries vanish once no thread holds or waits on the lock.
        self._locks: "weakref.WeakValueDictionary[str, ContextManager]" = weakref.WeakValueDictionary()
        self._locks_guard = threading.Lock()

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create config directory %s: %s", self.config_dir, e)

    @classmethod
    def from_config(cls, config: AppConfig) -> "ConfigStore":
        """Build a store from the application configuration."""
        return cls(
            base_dir=config.store.base_dir,
            subdir=config.store.subdir,
            lock_updates=config.store.lock_updates,
        )

    def path_for(self, key: str) -> Path:
        """Location of the record file for ``key``."""
        return self.config_dir / (key_digest(key) + CONFIG_FILE_SUFFIX)

    def exists(self, key: str) -> bool:
        try:
            return self.path_for(key).is_file()
        except OSError:
            return False

    # ----------------------------------------------
    # Writing
    # ----------------------------------------------

    def put(self, key: str, record: VideoConfig) -> WriteResult:
        """
        Save the record for a key, replacing any previous one.

        Args:
            key: Media URI (or any other string identifier)
            record: Settings to store

        Returns:
            WriteResult; ok is False if the file could not be written
        """
        path = self.path_for(key)
        with self._lock_for(path.name):
            return self._write(path, encode_record(record))

    def update_scale(self, key: str, scale: float) -> Optional[WriteResult]:
        """
        Change only the scale of an existing record.

        Args:
            key: Media URI
            scale: New zoom factor

        Returns:
            The WriteResult of the rewrite, or None if no record exists
        """
        path = self.path_for(key)
        with self._lock_for(path.name):
            current = self._read(path)
            if not current.found:
                logger.debug("No config to update for %s (%s)", path.name, current.status.value)
                return None
            return self._write(path, encode_record(current.record.with_scale(scale)))

    def _write(self, path: Path, line: str) -> WriteResult:
        tmp = path.with_name(f"{path.name}.{os.getpid()}.{threading.get_ident()}.tmp")
        try:
            tmp.write_text(line, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            logger.warning("Failed to save config %s: %s", path.name, e)
            try:
                tmp.unlink()
            except OSError:
                pass
            return WriteResult(ok=False, error=str(e))

        logger.debug("Saved config %s", path.name)
        return WriteResult(ok=True)

    # ----------------------------------------------
    # Reading
    # ----------------------------------------------

    def get(self, key: str) -> Optional[VideoConfig]:
        """
        Load the record for a key.

        Returns:
            The stored VideoConfig, or None if there is no usable record
        """
        return self.load(key).record

    def load(self, key: str) -> ReadResult:
        """
        Load the record for a key and report how the lookup went.

        Returns:
            ReadResult with status FOUND and the record, or one of
            NOT_FOUND / MALFORMED / READ_ERROR with no record
        """
        return self._read(self.path_for(key))

    def _read(self, path: Path) -> ReadResult:
        try:
            with open(path, "r", encoding="utf-8") as f:
                line = f.readline().rstrip("\n")
        except FileNotFoundError:
            return ReadResult(LookupStatus.NOT_FOUND)
        except UnicodeDecodeError:
            logger.debug("Config %s is not valid UTF-8", path.name)
            return ReadResult(LookupStatus.MALFORMED)
        except OSError as e:
            logger.warning("Failed to read config %s: %s", path.name, e)
            return ReadResult(LookupStatus.READ_ERROR)

        record = decode_record(line)
        if record is None:
            logger.debug("Config %s is malformed: %r", path.name, line)
            return ReadResult(LookupStatus.MALFORMED)
        return ReadResult(LookupStatus.FOUND, record)

    # ----------------------------------------------
    # Locking
    # ----------------------------------------------

    def _lock_for(self, name: str) -> ContextManager:
        if not self.lock_updates:
            return nullcontext()
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.RLock()
            return lock
