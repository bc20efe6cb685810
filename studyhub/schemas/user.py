from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from studyhub.db.models import UserRole
from studyhub.schemas.common import PatchModel


class UserCreate(BaseModel):
    username: str
    email: EmailStr
    password: str = Field(min_length=8)
    full_name: str
    role: UserRole
    is_active: bool = True


class UserUpdate(PatchModel):
    non_nullable = frozenset(
        {"username", "email", "password", "full_name", "role", "is_active"}
    )

    id: int
    username: str | None = None
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8)
    full_name: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None


class UserResponse(BaseModel):
    """Admin user as exposed outside the service; no password hash."""

    id: int
    username: str
    email: str
    full_name: str
    role: UserRole
    is_active: bool
    last_login: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class Credentials(BaseModel):
    username: str
    password: str
