"""
Synthetic users and posts for seeding the data file.

Only the init/seed scripts call into this module; the interactive session
never generates sample data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
import json
import random
import re
import string
import uuid

from usermgr.domain import lorem
from usermgr.domain.models import Post, User, format_timestamp, now_ms

SEED_POST_TAGS = ("technology", "lifestyle", "travel", "food", "health", "education")
DOMAINS = ("example.com", "example.org", "mail.test", "inbox.dev", "demo.net")
NAME_PARTS = (
    "alex", "sam", "river", "kai", "jordan", "morgan", "quinn", "robin",
    "sky", "taylor", "casey", "drew", "emery", "harper", "jules", "lane",
)
_USERNAME_STRIP = re.compile(r"[^a-z0-9_]")


@dataclass
class Seeder:
    """Generates `count` users with 1-5 posts each."""

    count: int = 20
    rng: random.Random = field(default_factory=random.Random)
    users: list[User] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.users = [self._generate_user() for _ in range(self.count)]

    def _uuid(self) -> str:
        return str(uuid.UUID(int=self.rng.getrandbits(128), version=4))

    def _username(self) -> str:
        raw = f"{self.rng.choice(NAME_PARTS)}_{self.rng.choice(NAME_PARTS)}{self.rng.randint(1, 999)}"
        return _USERNAME_STRIP.sub("", raw.lower())

    def _password(self) -> str:
        alphabet = string.ascii_letters + string.digits
        return "".join(self.rng.choice(alphabet) for _ in range(12)) + "A1!"

    def _recent(self, now: datetime, days: int) -> datetime:
        moment = now - timedelta(seconds=self.rng.randint(0, days * 86400))
        return moment.replace(microsecond=self.rng.randint(0, 999) * 1000)

    def _generate_post(self, user_id: str, now: datetime) -> Post:
        return Post(
            id=self._uuid(),
            title=lorem.sentence(self.rng),
            tag=self.rng.choice(SEED_POST_TAGS),
            content=lorem.paragraphs(self.rng, 3),
            created_at=self._recent(now, 60),
            published_by=user_id,
        )

    def _generate_user(self) -> User:
        now = now_ms()
        user_id = self._uuid()
        username = self._username()
        return User(
            id=user_id,
            username=username,
            email=f"{username}@{self.rng.choice(DOMAINS)}",
            password=self._password(),
            created_at=self._recent(now, 365),
            posts=[self._generate_post(user_id, now) for _ in range(self.rng.randint(1, 5))],
        )

    @property
    def total_posts(self) -> int:
        return sum(len(user.posts) for user in self.users)

    def to_document(self) -> dict:
        """Seed file layout with summary metadata."""
        return {
            "generatedAt": format_timestamp(now_ms()),
            "totalUsers": len(self.users),
            "totalPosts": self.total_posts,
            "users": [user.to_dict() for user in self.users],
        }

    def save_document(self, path: Path) -> Path:
        path.write_text(json.dumps(self.to_document(), ensure_ascii=False, indent=2), encoding="utf-8")
        return path

    def summary_lines(self, preview: int = 5) -> list[str]:
        lines = [
            "SUMMARY DATA",
            "===================",
            f"Total users : {len(self.users)}",
            f"Total posts : {self.total_posts} posts",
            "",
            f"First {preview} users :",
        ]
        for index, user in enumerate(self.users[:preview], start=1):
            lines.append(f"{index}. {user.username} \t {user.email} \t {len(user.posts)} posts")
        if self.users and self.users[0].posts:
            post = self.users[0].posts[0]
            lines += ["", "Sample post :", f"Title : {post.title}", f"Tag : {post.tag}", f"Content : {post.content[:100]} ..."]
        return lines


def export_users_with_posts(users: list[User]) -> list[dict]:
    """Split each user into a {user, posts} pair (posts no longer nested in the user)."""
    exported = []
    for user in users:
        data = user.to_dict()
        posts = data.pop("posts")
        exported.append({"user": data, "posts": posts})
    return exported
