"""Error taxonomy shared by services, adapters and routes."""


class FidoError(Exception):
    """Base error carrying a user-facing message."""

    code = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FilterValidationError(FidoError):
    """Raised when user input is incomplete or inconsistent."""

    code = "validation"


class StoreUnavailableError(FidoError):
    """Raised when the record store cannot be reached."""

    code = "unavailable"


class StorePermissionError(FidoError):
    """Raised when the record store denies access."""

    code = "permission_denied"


class MissingIndexError(FidoError):
    """Raised when the store rejects an ordered range query."""

    code = "missing_index"


class ExportPreconditionError(FidoError):
    """Raised when there is nothing to export."""

    code = "no_data"


class AuthenticationError(FidoError):
    """Raised when the session token is missing or invalid."""

    code = "unauthenticated"


class AccessDeniedError(FidoError):
    """Raised when the caller's role does not allow the action."""

    code = "access_denied"


class UserRegistrationError(FidoError):
    """Raised when the auth service rejects a new user."""

    code = "registration_failed"
