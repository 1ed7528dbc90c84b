"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["admin", "user", "moderator"]


class UserCreate(BaseModel):
    """Schema for creating a new user."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Jane Smith"])
    email: str = Field(..., min_length=3, max_length=255, examples=["jane.smith@example.com"])
    role: Role = "user"
    avatar: str | None = None


class UserUpdate(BaseModel):
    """Schema for updating an existing user: all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, min_length=3, max_length=255)
    role: Role | None = None
    avatar: str | None = None


class UserResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    email: str
    role: Role
    avatar: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
