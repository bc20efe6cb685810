"""Admin user routes."""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.api.deps import deleted, found, patch_input
from studyhub.db.session import get_db
from studyhub.repositories import users
from studyhub.schemas.user import Credentials, UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await users.get_users(db)


@router.post("/login", response_model=UserResponse)
async def login(credentials: Credentials, db: AsyncSession = Depends(get_db)):
    """Check a username/password pair and stamp the login time.

    Issuing a session or token is left to whatever sits in front of this API.
    """
    user = await users.validate_user_credentials(db, credentials.username, credentials.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid username or password")
    return await users.update_user_last_login(db, user.id)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return found(await users.get_user_by_id(db, user_id), "User")


@router.post("/", response_model=UserResponse, status_code=201)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    return await users.create_user(db, data)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, body: dict = Body(...), db: AsyncSession = Depends(get_db)):
    data = patch_input(UserUpdate, body, id=user_id)
    return found(await users.update_user(db, data), "User")


@router.delete("/{user_id}")
async def deactivate_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return deleted(await users.delete_user(db, user_id), "User")
