from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the usermgr package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usermgr.core import config as core_config  # noqa: E402
from usermgr.repositories.json_storage import JsonUserStore  # noqa: E402


@pytest.fixture()
def settings_env(monkeypatch):
    for name in ("USERMGR_DATA_DIR", "USERMGR_DATA_FILE", "USERMGR_BACKUP_DIR", "USERMGR_LOG_LEVEL", "USERMGR_SEED_USERS", "USERMGR_PAUSE"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults_point_at_installation_root(settings_env):
    settings = core_config.get_settings()
    assert settings.data_dir == core_config.APP_ROOT
    assert settings.data_file == "users.json"
    assert settings.backup_dir == core_config.APP_ROOT / "backups"
    assert settings.seed_users == 20
    assert settings.pause is True


def test_environment_overrides(settings_env, tmp_path):
    settings_env.setenv("USERMGR_DATA_DIR", str(tmp_path))
    settings_env.setenv("USERMGR_DATA_FILE", "people.json")
    settings_env.setenv("USERMGR_SEED_USERS", "not-a-number")
    settings_env.setenv("USERMGR_PAUSE", "off")
    settings_env.setenv("USERMGR_LOG_LEVEL", "debug")
    settings = core_config.get_settings()
    assert settings.data_path == tmp_path / "people.json"
    assert settings.seed_users == 20
    assert settings.pause is False
    assert settings.log_level == "DEBUG"

    store = JsonUserStore.from_settings()
    assert store.path == tmp_path / "people.json"
    assert store.backup_dir == tmp_path / "backups"
