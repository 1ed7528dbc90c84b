"""Domain entity: a registered user of the store."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal
from uuid import uuid4

UserRole = Literal["admin", "user", "moderator"]

USER_ROLES: tuple[str, ...] = ("admin", "user", "moderator")


@dataclass
class User:
    """Core domain entity for a store user."""

    name: str
    email: str
    role: UserRole = "user"
    avatar: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        name: str | None = None,
        email: str | None = None,
        role: UserRole | None = None,
        avatar: str | None = None,
    ) -> None:
        """Update the supplied fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if email is not None:
            self.email = email
        if role is not None:
            self.role = role
        if avatar is not None:
            self.avatar = avatar
        self.updated_at = datetime.now(timezone.utc)
