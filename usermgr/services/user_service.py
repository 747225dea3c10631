"""User directory use cases layered over the JSON store."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Mapping, Optional
import logging
import random
import uuid

from usermgr.domain import lorem
from usermgr.domain.models import (
    EDITABLE_FIELDS,
    NEW_USER_PUBLISHER,
    Post,
    User,
    UserInput,
    UserStats,
    now_ms,
)
from usermgr.repositories.json_storage import JsonUserStore, StoreInfo

logger = logging.getLogger(__name__)

DEFAULT_POST_TAGS = ("general", "personal", "update")
MIN_DEFAULT_POSTS = 1
MAX_DEFAULT_POSTS = 3
RECENT_WINDOW = timedelta(days=7)


class UserServiceError(Exception):
    """Base exception for user directory workflow."""


class ValidationError(UserServiceError):
    """Raised when a required field is missing or blank."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


def _new_id() -> str:
    return str(uuid.uuid4())


class UserService:
    """Find/create/update/delete/search over users, reloading the store on every call."""

    def __init__(
        self,
        store: JsonUserStore | None = None,
        *,
        rng: random.Random | None = None,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = now_ms,
    ) -> None:
        self.store = store or JsonUserStore.from_settings()
        self.rng = rng or random.Random()
        self.id_factory = id_factory
        self.clock = clock

    # -------------------------------------- queries --------------------------------------
    def list_all(self) -> list[User]:
        return self.store.load()

    def find_by_id(self, user_id: str) -> Optional[User]:
        for user in self.store.load():
            if user.id == user_id:
                return user
        return None

    def search(self, query: str) -> list[User]:
        needle = (query or "").lower()
        return [
            user
            for user in self.store.load()
            if needle in user.username.lower() or needle in user.email.lower()
        ]

    def aggregate(self) -> UserStats:
        users = self.store.load()
        total_posts = sum(len(user.posts) for user in users)
        cutoff = self._now() - RECENT_WINDOW
        return UserStats(
            total_users=len(users),
            total_posts=total_posts,
            users_with_posts=sum(1 for user in users if user.posts),
            average_posts=(total_posts / len(users)) if users else 0.0,
            new_users_last_7_days=sum(1 for user in users if user.created_at > cutoff),
        )

    def users_with_post_count(self) -> list[tuple[User, int]]:
        return [(user, len(user.posts)) for user in self.store.load()]

    def file_info(self) -> StoreInfo:
        return self.store.file_info()

    # -------------------------------------- mutations --------------------------------------
    def create(self, data: UserInput) -> User:
        for name in EDITABLE_FIELDS:
            if not (getattr(data, name) or "").strip():
                raise ValidationError(f"{name} is required", field=name)
        users = self.store.load()
        user = User(
            id=self.id_factory(),
            username=data.username,
            email=data.email,
            password=data.password,
            created_at=self._now(),
            posts=self._default_posts(),
        )
        users.append(user)
        self.store.save(users)
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def update(self, user_id: str, changes: Mapping[str, Optional[str]]) -> Optional[User]:
        """Apply username/email/password changes; any other key is ignored."""
        fields = {
            name: value
            for name, value in changes.items()
            if name in EDITABLE_FIELDS and value is not None
        }
        for name, value in fields.items():
            if not value.strip():
                raise ValidationError(f"{name} cannot be blank", field=name)
        users = self.store.load()
        for index, current in enumerate(users):
            if current.id == user_id:
                break
        else:
            return None
        updated = replace(
            current,
            **fields,
            id=current.id,
            created_at=current.created_at,
            posts=current.posts,
        )
        users[index] = updated
        self.store.save(users)
        logger.info("Updated user %s", user_id)
        return updated

    def delete(self, user_id: str) -> bool:
        users = self.store.load()
        remaining = [user for user in users if user.id != user_id]
        if len(remaining) == len(users):
            return False
        self.store.save(remaining)
        logger.info("Deleted user %s", user_id)
        return True

    def backup(self, name: str | None = None) -> Path | None:
        return self.store.backup(name)

    # -------------------------------------- helpers --------------------------------------
    def _now(self) -> datetime:
        now = self.clock()
        # naive clock values are taken as UTC, matching how the store reads timestamps
        return now if now.tzinfo else now.replace(tzinfo=timezone.utc)

    def _default_posts(self) -> list[Post]:
        created = self._now()
        count = self.rng.randint(MIN_DEFAULT_POSTS, MAX_DEFAULT_POSTS)
        return [
            Post(
                id=self.id_factory(),
                title=f"Welcome post {index + 1}",
                tag=self.rng.choice(DEFAULT_POST_TAGS),
                content=lorem.paragraphs(self.rng, 2),
                created_at=created,
                published_by=NEW_USER_PUBLISHER,
            )
            for index in range(count)
        ]
