"""Tests for admin password login and session flags"""
import pytest
from fastapi import HTTPException

from core.auth import (
    AdminSession,
    InMemoryAdminSessionStore,
    RedisAdminSessionStore,
    check_password,
    verify_admin,
)


class TestCheckPassword:
    def test_match(self):
        assert check_password("s3cret", "s3cret") is True

    def test_mismatch(self):
        assert check_password("guess", "s3cret") is False

    def test_unset_password_never_matches(self):
        assert check_password("", "") is False
        assert check_password("anything", "") is False

    def test_empty_candidate(self):
        assert check_password("", "s3cret") is False


class TestAdminSession:
    @pytest.fixture
    def store(self):
        return InMemoryAdminSessionStore()

    def test_login_sets_flag_under_new_token(self, store):
        session = AdminSession(None, store, password="s3cret")

        assert session.login("s3cret") is True
        assert session.is_authenticated
        assert session.token in store.tokens
        assert len(session.token) >= 32

    def test_each_login_gets_fresh_token(self, store):
        first = AdminSession(None, store, password="s3cret")
        second = AdminSession(None, store, password="s3cret")
        first.login("s3cret")
        second.login("s3cret")

        assert first.token != second.token

    def test_wrong_password(self, store):
        session = AdminSession(None, store, password="s3cret")

        assert session.login("nope") is False
        assert not session.is_authenticated
        assert store.tokens == set()

    def test_load_existing_flag(self, store):
        store.set("tok")
        assert AdminSession("tok", store).load() is True

    def test_load_without_token(self, store):
        assert AdminSession(None, store).load() is False
        assert AdminSession("", store).load() is False

    def test_logout_clears_flag(self, store):
        session = AdminSession(None, store, password="s3cret")
        session.login("s3cret")
        token = session.token

        session.logout()

        assert not session.is_authenticated
        assert AdminSession(token, store).load() is False

    def test_store_failure_counts_as_logged_out(self):
        class BrokenStore(InMemoryAdminSessionStore):
            def exists(self, token):
                raise ConnectionError("redis down")

        assert AdminSession("tok", BrokenStore()).load() is False


class TestRedisAdminSessionStore:
    class _FakeRedis:
        def __init__(self):
            self.data = {}
            self.expiry = {}

        def set(self, key, value, ex=None):
            self.data[key] = value
            self.expiry[key] = ex

        def exists(self, *keys):
            return sum(1 for k in keys if k in self.data)

        def delete(self, *keys):
            for k in keys:
                self.data.pop(k, None)

    def test_flag_lifecycle(self):
        redis = self._FakeRedis()
        store = RedisAdminSessionStore(redis=redis, ttl=60)

        store.set("tok")
        assert redis.data == {"admin:session:tok": "1"}
        assert redis.expiry["admin:session:tok"] == 60
        assert store.exists("tok") is True

        store.delete("tok")
        assert store.exists("tok") is False


class TestVerifyAdmin:
    def test_rejects_missing_token(self, admin_store):
        with pytest.raises(HTTPException) as exc_info:
            verify_admin(None)
        assert exc_info.value.status_code == 401

    def test_accepts_flagged_token(self, admin_store):
        admin_store.set("tok")
        assert verify_admin("tok").is_authenticated
