"""User provisioning and access control."""

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from fido_dashboard.domain.errors import (
    AccessDeniedError,
    AuthenticationError,
    FidoError,
    FilterValidationError,
)
from fido_dashboard.domain.users import AuthUser, Principal, Role, UserProfile

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class AuthClient(Protocol):
    """Interface for the authentication service."""

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user owning a session token, if valid."""

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind a token."""

    def create_user(self, email: str, password: str) -> AuthUser:
        """Create a principal without touching the caller's session."""

    def delete_user(self, user_id: str) -> None:
        """Remove a principal created by ``create_user``."""


class UserRepository(Protocol):
    """Persistence interface for user role records."""

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the role record for a user id, if present."""

    def create_profile(self, user_id: str, email: str, role: Role) -> UserProfile:
        """Create and return a role record."""


@dataclass
class AccessService:
    """Resolve session tokens into principals and gate actions by role."""

    auth_client: AuthClient
    repository: UserRepository

    def authenticate(self, access_token: str | None) -> Principal:
        """Return the caller for a token, or raise when access is denied."""
        if not access_token:
            raise AuthenticationError("Inicia sesión para continuar.")
        user = self.auth_client.get_user(access_token)
        if user is None:
            raise AuthenticationError(
                "La sesión no es válida. Inicia sesión de nuevo."
            )

        profile = self.repository.get_profile(user.id)
        if profile is None:
            self._revoke(access_token)
            raise AccessDeniedError(
                "Tu usuario no está registrado en el sistema. "
                "Contacta al administrador."
            )
        if profile.role is None:
            self._revoke(access_token)
            raise AccessDeniedError("Acceso denegado: rol no autorizado.")
        return Principal(user_id=user.id, email=user.email, role=profile.role)

    def require_admin(self, principal: Principal) -> None:
        """Raise unless the principal is an administrator."""
        if not principal.is_admin:
            raise AccessDeniedError(
                "Acceso denegado: solo administradores pueden realizar esta acción."
            )

    def sign_out(self, access_token: str) -> None:
        """End the caller's session."""
        self.auth_client.sign_out(access_token)

    def _revoke(self, access_token: str) -> None:
        try:
            self.auth_client.sign_out(access_token)
        except FidoError:
            logger.warning("Failed to revoke session after access denial")


@dataclass
class UserService:
    """Server-side user provisioning for administrators."""

    auth_client: AuthClient
    repository: UserRepository

    def register_user(self, email: str, password: str, role: str) -> UserProfile:
        """Create a principal and its role record."""
        email = email.strip()
        if not email or not password:
            raise FilterValidationError("Por favor completa todos los campos")
        if not _EMAIL_PATTERN.match(email):
            raise FilterValidationError("Correo electrónico inválido")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise FilterValidationError(
                "La contraseña debe tener al menos 6 caracteres"
            )
        parsed_role = Role.parse(role)
        if parsed_role is None:
            raise FilterValidationError(f"Rol no soportado: {role}")

        created = self.auth_client.create_user(email, password)
        try:
            profile = self.repository.create_profile(created.id, email, parsed_role)
        except FidoError:
            self._discard(created.id)
            raise
        logger.info(
            "Registered user", extra={"user_id": created.id, "role": parsed_role.value}
        )
        return profile

    def _discard(self, user_id: str) -> None:
        try:
            self.auth_client.delete_user(user_id)
        except FidoError:
            logger.error(
                "Failed to delete auth user after role record failure",
                extra={"user_id": user_id},
            )
            return
        logger.warning(
            "Deleted auth user after role record failure", extra={"user_id": user_id}
        )
