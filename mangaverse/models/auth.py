"""
Authentication and user schemas.

Dependencies: pydantic
System role: Auth and user administration API contracts
"""

import re
import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Role = Literal["user", "admin"]

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class RegisterRequest(BaseModel):
    """Request schema for creating an account."""

    username: str = Field(..., min_length=3, max_length=64)
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Username must be at least 3 characters")
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not _EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v


class LoginRequest(BaseModel):
    """Request schema for logging in."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Public user profile. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    email: str
    role: Role
    created_at: datetime


class AuthResponse(BaseModel):
    """Login/registration result."""

    user: UserResponse
    token: str


class UpdateRoleRequest(BaseModel):
    """Admin request to change a user's role."""

    role: Role


class TokenClaims(BaseModel):
    """Decoded access token payload."""

    user_id: uuid.UUID = Field(alias="userId")
    username: str
    email: str
    role: Role
