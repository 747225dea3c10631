"""
JSON-file persistence for user records.

The whole collection lives in one file as a top-level array; every load reads
the full file and every save rewrites it. I/O and parse failures never escape
this module: they are logged and degraded to an empty view or a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional
import json
import logging
import time

from usermgr.core.config import APP_ROOT, DEFAULT_DATA_FILE, get_settings
from usermgr.domain.models import User

logger = logging.getLogger(__name__)


@dataclass
class LoadOutcome:
    """Result of reading the data file; `error` is set when the read failed."""

    users: list[User] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class StoreInfo:
    path: Path
    exists: bool
    user_count: int


class JsonUserStore:
    """Reads and writes the full user collection to a single JSON file."""

    def __init__(
        self,
        filename: str = DEFAULT_DATA_FILE,
        base_dir: Path | str | None = None,
        backup_dir: Path | str | None = None,
    ) -> None:
        root = Path(base_dir) if base_dir is not None else APP_ROOT
        self.path = root / filename
        self.backup_dir = Path(backup_dir) if backup_dir is not None else root / "backups"

    @classmethod
    def from_settings(cls) -> "JsonUserStore":
        settings = get_settings()
        return cls(settings.data_file, settings.data_dir, settings.backup_dir)

    def load_outcome(self) -> LoadOutcome:
        if not self.path.exists():
            logger.info("%s not found; creating an empty data file", self.path)
            self.save([])
            return LoadOutcome()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise ValueError("expected a top-level JSON array")
            users = [User.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.error("Error loading users from %s: %s", self.path, exc)
            return LoadOutcome(error=str(exc))
        logger.debug("Loaded %d users from %s", len(users), self.path)
        return LoadOutcome(users=users)

    def load(self) -> list[User]:
        return self.load_outcome().users

    def _write(self, path: Path, users: Iterable[User]) -> None:
        payload = [user.to_dict() for user in users]
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    def save(self, users: Iterable[User]) -> None:
        try:
            self._write(self.path, users)
        except OSError as exc:
            logger.error("Error saving users to %s: %s", self.path, exc)
            return
        logger.info("Data saved to %s", self.path)

    def file_info(self) -> StoreInfo:
        exists = self.path.exists()
        count = len(self.load()) if exists else 0
        return StoreInfo(path=self.path, exists=exists, user_count=count)

    def backup(self, name: str | None = None) -> Path | None:
        """Snapshot the current collection into the backup directory."""
        target = self.backup_dir / (name or f"backup-{int(time.time() * 1000)}.json")
        users = self.load()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            self._write(target, users)
        except OSError as exc:
            logger.error("Error writing backup %s: %s", target, exc)
            return None
        logger.info("Backup created: %s", target)
        return target
