"""Domain models for dashboard users."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Role(StrEnum):
    """Roles stored in the users table."""

    ADMIN = "admin"
    READ_ONLY = "consulta"

    @classmethod
    def parse(cls, raw: object) -> "Role | None":
        """Return the role for a stored value, ignoring case."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class UserProfile:
    """User row holding the role claim."""

    id: str
    email: str | None
    role: Role | None
    created_at: datetime | None = None


@dataclass(frozen=True)
class Principal:
    """Authenticated caller with a resolved role."""

    user_id: str
    email: str | None
    role: Role

    @property
    def is_admin(self) -> bool:
        """Return True for administrators."""
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class AuthUser:
    """Identity returned by the auth service for a session token."""

    id: str
    email: str | None
