"""
Configuration helpers for usermgr.

Exposes a Settings object that reads environment variables (data file
location, backup directory, log level, seeding size) so that the store,
services and scripts do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

# Installation root: the directory holding the usermgr package.
APP_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DATA_FILE = "users.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_dir: Path
    data_file: str
    backup_dir: Path
    log_level: str
    seed_users: int
    pause: bool

    @property
    def data_path(self) -> Path:
        return self.data_dir / self.data_file


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    data_dir = Path(os.getenv("USERMGR_DATA_DIR") or APP_ROOT)
    backup_dir = os.getenv("USERMGR_BACKUP_DIR")
    return Settings(
        data_dir=data_dir,
        data_file=(os.getenv("USERMGR_DATA_FILE") or DEFAULT_DATA_FILE).strip(),
        backup_dir=Path(backup_dir) if backup_dir else data_dir / "backups",
        log_level=(os.getenv("USERMGR_LOG_LEVEL") or "WARNING").upper(),
        seed_users=max(1, _int(os.getenv("USERMGR_SEED_USERS", "20"), 20)),
        pause=_bool(os.getenv("USERMGR_PAUSE"), True),
    )
