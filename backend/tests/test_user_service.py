"""
NoteKeeper Backend — User Service and Auth Service Unit Tests
===============================================================

What:  Tests for user store operations, password hashing and the
       login / owner-resolution flow.
How:   Real SQLite session per test; failures injected with AsyncMock.
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from notekeeper.exceptions import DatabaseError, UnauthorizedError
from notekeeper.models.user import User
from notekeeper.security import hash_password, verify_password
from notekeeper.services.auth_service import AuthService
from notekeeper.services.user_service import UserService


class TestPasswordHashing:
    """Tests for the passlib-backed helpers."""

    def test_hash_is_salted(self):
        """Same password, different hashes."""
        assert hash_password("secret") != hash_password("secret")

    def test_verify_roundtrip(self):
        hashed = hash_password("secret")
        assert verify_password("secret", hashed)
        assert not verify_password("Secret", hashed)

    def test_verify_garbage_hash_is_mismatch(self):
        """A value that is not a known hash format counts as a mismatch."""
        assert verify_password("p", "plain-text-from-somewhere") is False


class TestUserService:
    """Tests for UserService."""

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_create_user_stores_hash_not_password(self, db_session):
        user_id = await self.service.create_user(db_session, "Ann", "a@x.com", "p")

        row = (await db_session.execute(select(User).where(User.id == user_id))).scalar_one()
        assert row.name == "Ann"
        assert row.email == "a@x.com"
        assert row.password_hash != "p"
        assert verify_password("p", row.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_email_allowed(self, db_session):
        """No uniqueness on email: both inserts succeed with distinct ids."""
        first = await self.service.create_user(db_session, "Ann", "a@x.com", "p1")
        second = await self.service.create_user(db_session, "Ann 2", "a@x.com", "p2")
        assert second > first

    @pytest.mark.asyncio
    async def test_find_by_email_and_password(self, db_session):
        user_id = await self.service.create_user(db_session, "Ann", "a@x.com", "p")

        found = await self.service.find_by_email_and_password(db_session, "a@x.com", "p")
        assert found is not None
        assert found.id == user_id

        assert await self.service.find_by_email_and_password(db_session, "a@x.com", "wrong") is None
        assert await self.service.find_by_email_and_password(db_session, "b@x.com", "p") is None

    @pytest.mark.asyncio
    async def test_find_by_email_and_password_with_duplicates(self, db_session):
        """With duplicate emails the password decides; ties go to the lowest id."""
        first = await self.service.create_user(db_session, "A", "dup@x.com", "one")
        second = await self.service.create_user(db_session, "B", "dup@x.com", "two")
        await self.service.create_user(db_session, "C", "dup@x.com", "one")

        assert (await self.service.find_by_email_and_password(db_session, "dup@x.com", "two")).id == second
        assert (await self.service.find_by_email_and_password(db_session, "dup@x.com", "one")).id == first

    @pytest.mark.asyncio
    async def test_find_by_email_first_match_wins(self, db_session):
        first = await self.service.create_user(db_session, "A", "dup@x.com", "one")
        await self.service.create_user(db_session, "B", "dup@x.com", "two")

        found = await self.service.find_by_email(db_session, "dup@x.com")
        assert found.id == first
        assert await self.service.find_by_email(db_session, "nobody@x.com") is None

    @pytest.mark.asyncio
    async def test_create_user_storage_failure(self, mock_db_session):
        mock_db_session.flush = AsyncMock(
            side_effect=OperationalError("INSERT INTO users", {}, Exception("database is locked"))
        )

        with pytest.raises(DatabaseError, match="Error creating user"):
            await self.service.create_user(mock_db_session, "Ann", "a@x.com", "p")


class TestAuthService:
    """Tests for login and per-request owner resolution."""

    def setup_method(self):
        self.auth = AuthService()
        self.users = UserService()

    @pytest.mark.asyncio
    async def test_login_issues_token_bound_to_email(self, db_session, registry):
        await self.users.create_user(db_session, "Ann", "a@x.com", "p")

        sid = await self.auth.login(db_session, registry, "a@x.com", "p")

        assert registry.resolve_session(sid) == "a@x.com"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, db_session, registry):
        await self.users.create_user(db_session, "Ann", "a@x.com", "p")

        with pytest.raises(UnauthorizedError) as exc_info:
            await self.auth.login(db_session, registry, "a@x.com", "nope")

        assert exc_info.value.reason == "bad_credentials"
        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_resolve_owner(self, db_session, registry):
        user_id = await self.users.create_user(db_session, "Ann", "a@x.com", "p")
        sid = await self.auth.login(db_session, registry, "a@x.com", "p")

        owner = await self.auth.resolve_owner(db_session, registry, sid)
        assert owner.id == user_id

    @pytest.mark.asyncio
    async def test_resolve_owner_unknown_token(self, db_session, registry):
        with pytest.raises(UnauthorizedError) as exc_info:
            await self.auth.resolve_owner(db_session, registry, "not-a-token")
        assert exc_info.value.reason == "invalid_session"

    @pytest.mark.asyncio
    async def test_resolve_owner_user_vanished(self, db_session, registry):
        """A token whose email no longer has a user row is rejected."""
        sid = registry.create_session("ghost@x.com")

        with pytest.raises(UnauthorizedError) as exc_info:
            await self.auth.resolve_owner(db_session, registry, sid)
        assert exc_info.value.reason == "user_not_found"
