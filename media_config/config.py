# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file and
#   provide typed config objects to the store and the CLI.
#
# CLASSES:
# --------
# - StoreConfig (dataclass)
#     base_dir: str          (default "data/")
#     subdir: str            (default "configs")
#     lock_updates: bool     (default True)
#
# - AppConfig (dataclass)
#     store: StoreConfig
#     log_level: str         (default "INFO")
#     log_file: str | None   (default None)
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton so the next get_config() re-reads
#     the environment.
#
# ENVIRONMENT:
# ------------
#   MEDIA_CONFIG_BASE_DIR, MEDIA_CONFIG_SUBDIR,
#   MEDIA_CONFIG_LOCK_UPDATES, LOG_LEVEL, LOG_FILE_PATH
#
# USAGE:
# ------
#   from media_config.config import get_config
#   config = get_config()
#   print(config.store.base_dir)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class StoreConfig:
    """Where and how record files are kept."""
    base_dir: str = "data/"
    subdir: str = "configs"
    lock_updates: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    store: StoreConfig = field(default_factory=StoreConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUE_VALUES


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    store_config = StoreConfig(
        base_dir=os.getenv("MEDIA_CONFIG_BASE_DIR", "data/"),
        subdir=os.getenv("MEDIA_CONFIG_SUBDIR", "configs"),
        lock_updates=_env_flag("MEDIA_CONFIG_LOCK_UPDATES", True),
    )

    _config_instance = AppConfig(
        store=store_config,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE_PATH") or None,
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config_instance
    _config_instance = None
