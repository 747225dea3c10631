"""User/post records and their on-disk representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

# publishedBy value for welcome posts generated for a brand-new account
NEW_USER_PUBLISHER = "new-user"
EDITABLE_FIELDS = ("username", "email", "password")


def now_ms() -> datetime:
    """Current UTC time truncated to the millisecond precision used on disk."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class Post:
    id: str
    title: str
    tag: str
    content: str
    created_at: datetime
    published_by: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "tag": self.tag,
            "content": self.content,
            "createdAt": format_timestamp(self.created_at),
            "publishedBy": self.published_by,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            tag=data.get("tag") or "",
            content=data.get("content") or "",
            created_at=parse_timestamp(data["createdAt"]),
            published_by=data.get("publishedBy") or "",
        )


@dataclass
class User:
    id: str
    username: str
    email: str
    password: str
    created_at: datetime
    posts: list[Post] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "password": self.password,
            "createdAt": format_timestamp(self.created_at),
            "posts": [post.to_dict() for post in self.posts],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            username=data.get("username") or "",
            email=data.get("email") or "",
            password=data.get("password") or "",
            created_at=parse_timestamp(data["createdAt"]),
            posts=[Post.from_dict(item) for item in data.get("posts") or []],
        )


@dataclass(frozen=True)
class UserInput:
    """Fields an operator supplies when creating an account."""

    username: str
    email: str
    password: str


@dataclass(frozen=True)
class UserStats:
    total_users: int
    total_posts: int
    users_with_posts: int
    average_posts: float
    new_users_last_7_days: int
