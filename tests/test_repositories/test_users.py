"""Tests for admin users and credential checks."""

import pytest

from studyhub.db.models import UserRole
from studyhub.errors import UniquenessViolation
from studyhub.repositories import users
from studyhub.schemas.user import UserCreate, UserUpdate


@pytest.fixture
def make_user(session):
    async def _make(**overrides):
        values = {
            "username": "editor",
            "email": "editor@example.com",
            "password": "correct horse",
            "full_name": "Site Editor",
            "role": UserRole.EDITOR,
        }
        values.update(overrides)
        return await users.create_user(session, UserCreate(**values))

    return _make


class TestPasswordHashing:
    def test_hash_is_salted_and_verifiable(self):
        first = users.hash_password("secret-pass")
        second = users.hash_password("secret-pass")

        assert first != second
        assert users.verify_password("secret-pass", first)
        assert not users.verify_password("wrong-pass", first)

    def test_non_bcrypt_hash_never_matches(self):
        assert not users.verify_password("secret-pass", "plaintext")


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_password_is_not_stored_in_clear(self, make_user):
        user = await make_user()

        assert user.password_hash != "correct horse"
        assert user.is_active is True

    @pytest.mark.asyncio
    async def test_username_and_email_unique(self, make_user):
        await make_user()

        with pytest.raises(UniquenessViolation):
            await make_user(email="other@example.com")
        with pytest.raises(UniquenessViolation):
            await make_user(username="other")

    @pytest.mark.asyncio
    async def test_lookups(self, make_user, session):
        user = await make_user()

        assert (await users.get_user_by_username(session, "editor")).id == user.id
        assert (await users.get_user_by_email(session, "editor@example.com")).id == user.id
        assert [u.id for u in await users.get_users(session)] == [user.id]

    @pytest.mark.asyncio
    async def test_validate_credentials(self, make_user, session):
        user = await make_user()

        assert (await users.validate_user_credentials(session, "editor", "correct horse")).id == user.id
        assert await users.validate_user_credentials(session, "editor", "wrong horse") is None
        assert await users.validate_user_credentials(session, "nobody", "correct horse") is None

    @pytest.mark.asyncio
    async def test_password_change_rehashes(self, make_user, session):
        user = await make_user()

        await users.update_user(session, UserUpdate(id=user.id, password="new password"))

        assert await users.validate_user_credentials(session, "editor", "correct horse") is None
        assert await users.validate_user_credentials(session, "editor", "new password") is not None

    @pytest.mark.asyncio
    async def test_update_email_to_taken_value_rejected(self, make_user, session):
        await make_user()
        other = await make_user(username="admin", email="admin@example.com")

        with pytest.raises(UniquenessViolation):
            await users.update_user(session, UserUpdate(id=other.id, email="editor@example.com"))

    @pytest.mark.asyncio
    async def test_delete_deactivates(self, make_user, session):
        user = await make_user()

        assert await users.delete_user(session, user.id) is True

        kept = await users.get_user_by_id(session, user.id)
        assert kept is not None
        assert kept.is_active is False
        assert await users.validate_user_credentials(session, "editor", "correct horse") is None
        assert await users.delete_user(session, 999) is False

    @pytest.mark.asyncio
    async def test_last_login_stamp(self, make_user, session):
        user = await make_user()
        assert user.last_login is None

        stamped = await users.update_user_last_login(session, user.id)
        assert stamped.last_login is not None
        assert await users.update_user_last_login(session, 999) is None

    @pytest.mark.asyncio
    async def test_constraint_hit_on_username_is_uniqueness_violation(
        self, make_user, session, monkeypatch
    ):
        await make_user()

        async def already_checked(*args, **kwargs):
            return None

        monkeypatch.setattr(users, "ensure_unique", already_checked)

        with pytest.raises(UniquenessViolation):
            await make_user(email="second@example.com")

        assert len(await users.get_users(session)) == 1
