# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - store            → ConfigStore rooted in tmp_path
# - sample_record    → A typical 16:9 record
# - clean_config     → Drops the cached AppConfig around a test
#
# ==============================================

import pytest

from media_config.config import reset_config
from media_config.persistence import ConfigStore, VideoConfig


@pytest.fixture
def store(tmp_path):
    """Provide a store writing into a temporary directory."""
    return ConfigStore(tmp_path)


@pytest.fixture
def sample_record():
    return VideoConfig(
        resize_mode=1,
        aspect_ratio=1.78,
        aspect_ratio_title="16:9",
        scale=1.25,
    )


@pytest.fixture
def clean_config(monkeypatch):
    """Isolate get_config() from the developer's environment."""
    for name in (
        "MEDIA_CONFIG_BASE_DIR",
        "MEDIA_CONFIG_SUBDIR",
        "MEDIA_CONFIG_LOCK_UPDATES",
        "LOG_LEVEL",
        "LOG_FILE_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("media_config.config.load_dotenv", lambda **kwargs: False)
    reset_config()
    yield
    reset_config()
