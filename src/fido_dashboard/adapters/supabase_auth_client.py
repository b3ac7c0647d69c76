"""Supabase Auth adapter."""

import logging
from dataclasses import dataclass

import httpx
from supabase import AuthApiError, AuthError, Client

from fido_dashboard.domain.errors import (
    AuthenticationError,
    StoreUnavailableError,
    UserRegistrationError,
)
from fido_dashboard.domain.users import AuthUser
from fido_dashboard.services.users import AuthClient

logger = logging.getLogger(__name__)

_REGISTRATION_MESSAGES = {
    "email_exists": "Este correo electrónico ya está registrado",
    "user_already_exists": "Este correo electrónico ya está registrado",
    "weak_password": "La contraseña es muy débil",
    "email_address_invalid": "Correo electrónico inválido",
    "validation_failed": "Correo electrónico inválido",
}


@dataclass
class SupabaseAuthClient(AuthClient):
    """Auth client backed by the Supabase admin API."""

    client: Client

    def get_user(self, access_token: str) -> AuthUser | None:
        """Resolve a session token through Supabase Auth."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthApiError:
            return None
        except httpx.TransportError as exc:
            raise StoreUnavailableError(
                "Servicio temporalmente no disponible. "
                "Inténtalo de nuevo en unos momentos."
            ) from exc
        if response is None or response.user is None:
            return None
        return AuthUser(id=str(response.user.id), email=response.user.email)

    def sign_out(self, access_token: str) -> None:
        """Revoke every session for the token's user."""
        try:
            self.client.auth.admin.sign_out(access_token)
        except AuthError as exc:
            raise AuthenticationError("La sesión ya no es válida.") from exc

    def create_user(self, email: str, password: str) -> AuthUser:
        """Create a confirmed user through the admin API."""
        try:
            response = self.client.auth.admin.create_user(
                {"email": email, "password": password, "email_confirm": True}
            )
        except AuthApiError as exc:
            code = getattr(exc, "code", None) or ""
            message = _REGISTRATION_MESSAGES.get(
                code, f"Error al registrar usuario: {exc.message}"
            )
            logger.warning("User creation rejected", extra={"auth_code": code})
            raise UserRegistrationError(message) from exc
        except httpx.TransportError as exc:
            raise StoreUnavailableError(
                "Servicio no disponible. Verifica tu conexión a internet."
            ) from exc
        return AuthUser(id=str(response.user.id), email=response.user.email)

    def delete_user(self, user_id: str) -> None:
        """Delete a user through the admin API."""
        try:
            self.client.auth.admin.delete_user(user_id)
        except AuthError as exc:
            raise UserRegistrationError(
                f"Error al eliminar usuario: {exc.message}"
            ) from exc
        except httpx.TransportError as exc:
            raise StoreUnavailableError(
                "Servicio no disponible. Verifica tu conexión a internet."
            ) from exc
