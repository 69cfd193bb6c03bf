from pathlib import Path

import pytest

from app.utils.config import StorageLayout, get_settings
from domains.file_ingest.storage import HOT_DIR_SENTINEL, TMP_DIR_SENTINEL

STORAGE_ENV_VARS = ("NODE_ENV", "COLLECTOR_ENV", "STORAGE_DIR", "DEV_ROOT", "HOT_DIR", "TMP_DIR")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep the host environment and the settings cache out of every test."""
    for name in STORAGE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """Production-style storage base with sentinels in place."""
    base = tmp_path / "storage"
    (base / "documents").mkdir(parents=True)
    (base / "hotdir").mkdir()
    (base / "tmp").mkdir()
    (base / "hotdir" / HOT_DIR_SENTINEL).write_text("# Hot directory\n")
    (base / "tmp" / TMP_DIR_SENTINEL).write_text("")
    return base


@pytest.fixture
def layout(storage_dir: Path) -> StorageLayout:
    return StorageLayout.from_base(storage_dir)
