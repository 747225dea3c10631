from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Make the usermgr package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usermgr.domain.models import NEW_USER_PUBLISHER, UserInput, now_ms  # noqa: E402
from usermgr.repositories.json_storage import JsonUserStore  # noqa: E402
from usermgr.services import user_service  # noqa: E402
from usermgr.services.user_service import UserService, ValidationError  # noqa: E402


@pytest.fixture()
def store(tmp_path):
    return JsonUserStore("users.json", tmp_path)


@pytest.fixture()
def svc(store):
    return UserService(store, rng=random.Random(1234))


def _add(svc: UserService, name: str, email: str | None = None):
    return svc.create(UserInput(username=name, email=email or f"{name}@example.com", password="pw"))


def test_create_find_update_delete_scenario(svc):
    assert svc.list_all() == []

    before = now_ms()
    bob = svc.create(UserInput(username="bob", email="bob@x.com", password="p1"))
    assert bob.id
    assert before <= bob.created_at <= now_ms()
    assert 1 <= len(bob.posts) <= 3

    assert svc.find_by_id(bob.id) == bob

    updated = svc.update(bob.id, {"email": "bob2@x.com"})
    assert updated.email == "bob2@x.com"
    assert updated.username == "bob"
    assert updated.password == "p1"
    assert updated.posts == bob.posts
    assert svc.find_by_id(bob.id) == updated

    assert svc.delete(bob.id) is True
    assert svc.delete(bob.id) is False


def test_generated_ids_are_unique(svc):
    users = [_add(svc, f"user{i}") for i in range(10)]
    ids = [u.id for u in users]
    post_ids = [p.id for u in users for p in u.posts]
    assert len(set(ids)) == len(ids)
    assert len(set(post_ids)) == len(post_ids)


def test_update_never_changes_id_created_at_or_posts(svc):
    alice = _add(svc, "alice")
    updated = svc.update(
        alice.id,
        {
            "id": "hijacked",
            "created_at": "2000-01-01",
            "createdAt": "2000-01-01",
            "posts": [],
            "username": "alice2",
        },
    )
    assert updated.id == alice.id
    assert updated.created_at == alice.created_at
    assert updated.posts == alice.posts
    assert updated.username == "alice2"


def test_update_with_no_fields_persists_unchanged(svc):
    alice = _add(svc, "alice")
    assert svc.update(alice.id, {}) == alice
    assert svc.list_all() == [alice]


def test_update_missing_user_returns_none(svc):
    _add(svc, "alice")
    assert svc.update("nope", {"email": "x@y.z"}) is None


def test_update_rejects_blank_values(svc):
    alice = _add(svc, "alice")
    with pytest.raises(ValidationError):
        svc.update(alice.id, {"username": "   "})
    assert svc.find_by_id(alice.id).username == "alice"


def test_delete_miss_leaves_collection_unchanged(svc):
    _add(svc, "alice")
    before = svc.list_all()
    assert svc.delete("missing") is False
    assert svc.list_all() == before


def test_delete_removes_owned_posts(svc):
    alice = _add(svc, "alice")
    _add(svc, "carol")
    post_ids = {p.id for p in alice.posts}
    assert svc.delete(alice.id)
    remaining = {p.id for u in svc.list_all() for p in u.posts}
    assert remaining.isdisjoint(post_ids)
    assert svc.find_by_id(alice.id) is None


def test_search_is_case_insensitive_on_username_or_email(svc):
    alice = _add(svc, "Alice", "alice@example.com")
    bob = _add(svc, "bob", "bob@ALICE.org")
    _add(svc, "carol")
    upper = svc.search("Alice")
    lower = svc.search("alice")
    assert upper == lower
    assert [u.id for u in lower] == [alice.id, bob.id]
    assert svc.search("zzz") == []


def test_default_posts_follow_rules(store):
    svc = UserService(store, rng=random.Random(7))
    for i in range(20):
        user = _add(svc, f"u{i}")
        assert 1 <= len(user.posts) <= 3
        for index, post in enumerate(user.posts, start=1):
            assert post.tag in user_service.DEFAULT_POST_TAGS
            assert post.published_by == NEW_USER_PUBLISHER
            assert post.title == f"Welcome post {index}"
            assert post.created_at == user.created_at
            assert post.content


def test_seeded_random_source_is_deterministic(tmp_path):
    counter = iter(range(1000))

    def ids():
        return f"id-{next(counter)}"

    results = []
    for name in ("a", "b"):
        store = JsonUserStore("users.json", tmp_path / name)
        store.path.parent.mkdir()
        svc = UserService(store, rng=random.Random(99), id_factory=ids)
        user = _add(svc, "same")
        results.append([(p.tag, p.content) for p in user.posts])
    assert results[0] == results[1]


def test_create_requires_all_fields(svc):
    with pytest.raises(ValidationError) as excinfo:
        svc.create(UserInput(username="x", email="", password="p"))
    assert excinfo.value.field == "email"
    assert svc.list_all() == []


def test_operations_reflect_external_file_changes(store, svc):
    alice = _add(svc, "alice")
    other = UserService(store)
    other.delete(alice.id)
    assert svc.find_by_id(alice.id) is None
    assert svc.list_all() == []


def test_aggregate_counts(store):
    clock_now = now_ms()
    svc = UserService(store, rng=random.Random(3), clock=lambda: clock_now)
    empty = svc.aggregate()
    assert (empty.total_users, empty.total_posts, empty.users_with_posts) == (0, 0, 0)
    assert empty.average_posts == 0.0

    a = _add(svc, "a")
    b = _add(svc, "b")
    users = svc.list_all()
    users[1].posts = []
    users[1].created_at = clock_now - timedelta(days=30)
    store.save(users)

    stats = svc.aggregate()
    assert stats.total_users == 2
    assert stats.total_posts == len(a.posts)
    assert stats.users_with_posts == 1
    assert stats.average_posts == pytest.approx(len(a.posts) / 2)
    assert stats.new_users_last_7_days == 1
    assert [count for _, count in svc.users_with_post_count()] == [len(a.posts), 0]
    assert b.id == users[1].id


def test_naive_clock_is_treated_as_utc(store):
    naive_now = datetime(2024, 6, 1, 12, 0, 0)
    svc = UserService(store, rng=random.Random(11), clock=lambda: naive_now)
    user = _add(svc, "naive")
    assert user.created_at == naive_now.replace(tzinfo=timezone.utc)
    assert svc.find_by_id(user.id) == user

    stats = svc.aggregate()
    assert stats.total_users == 1
    assert stats.new_users_last_7_days == 1
