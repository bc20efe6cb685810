"""Admin user repository.

Passwords are stored as salted bcrypt hashes. Users are never physically
removed: ``delete_user`` only deactivates the account.
"""

import logging

import bcrypt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.config import settings
from studyhub.db.models import User, now
from studyhub.db.session import atomic
from studyhub.repositories.base import (
    apply_changes,
    ensure_unique,
    flush_unique,
    get_one,
    newest_first,
)
from studyhub.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


async def _flush_user(session: AsyncSession, user: User) -> None:
    await flush_unique(session, "User", "username/email", f"{user.username}/{user.email}")


async def get_users(session: AsyncSession) -> list[User]:
    result = await session.execute(select(User).order_by(*newest_first(User)))
    return list(result.scalars().all())


async def get_user_by_id(session: AsyncSession, user_id: int) -> User | None:
    return await get_one(session, User, User.id == user_id)


async def get_user_by_username(session: AsyncSession, username: str) -> User | None:
    return await get_one(session, User, User.username == username)


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    return await get_one(session, User, User.email == email)


async def create_user(session: AsyncSession, data: UserCreate) -> User:
    """Create an admin user.

    Raises:
        UniquenessViolation: If the username or email is already registered.
    """
    async with atomic(session):
        await ensure_unique(session, User, "username", data.username)
        await ensure_unique(session, User, "email", data.email)
        user = User(
            username=data.username,
            email=data.email,
            password_hash=hash_password(data.password),
            full_name=data.full_name,
            role=data.role,
            is_active=data.is_active,
        )
        session.add(user)
        await _flush_user(session, user)

    logger.info(f"Created user {user.id} ({user.username}, {user.role.value})")
    return user


async def update_user(session: AsyncSession, data: UserUpdate) -> User | None:
    changes = data.changes()
    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))

    async with atomic(session):
        user = await get_one(session, User, User.id == data.id)
        if not user:
            return None
        for field in ("username", "email"):
            if field in changes:
                await ensure_unique(session, User, field, changes[field], exclude_id=data.id)
        apply_changes(user, changes)
        await _flush_user(session, user)

    logger.info(f"Updated user {user.id}: {sorted(changes)}")
    return user


async def delete_user(session: AsyncSession, user_id: int) -> bool:
    """Soft delete: deactivate the account and keep the row."""
    async with atomic(session):
        user = await get_one(session, User, User.id == user_id)
        if not user:
            return False
        apply_changes(user, {"is_active": False})

    logger.info(f"Deactivated user {user_id}")
    return True


async def update_user_last_login(session: AsyncSession, user_id: int) -> User | None:
    async with atomic(session):
        user = await get_one(session, User, User.id == user_id)
        if not user:
            return None
        apply_changes(user, {"last_login": now()})
    return user


async def validate_user_credentials(
    session: AsyncSession, username: str, password: str
) -> User | None:
    """Return the user for a correct username/password pair.

    Unknown users, wrong passwords and deactivated accounts all yield None.
    """
    user = await get_user_by_username(session, username)
    if not user or not user.is_active:
        return None
    if not verify_password(password, user.password_hash):
        logger.warning(f"Failed login for user {user.id}")
        return None
    return user
