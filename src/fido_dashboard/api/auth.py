"""Session handling and role gates for the HTTP API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse  # noqa: TC002

from fido_dashboard.api.responses import (
    error_response,
    http_error,
    serialize_principal,
)
from fido_dashboard.domain.errors import FidoError
from fido_dashboard.domain.users import Principal

if TYPE_CHECKING:
    from fido_dashboard.containers import AppContainer

router = APIRouter(tags=["auth"])


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the access token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_principal(
    request: Request, access_token: str | None = Depends(bearer_token)
) -> Principal:
    """Resolve the caller; role is checked on every request."""
    container: AppContainer = request.app.state.container
    try:
        return container.access_service.authenticate(access_token)
    except FidoError as exc:
        raise http_error(exc) from exc


async def require_admin(
    request: Request, principal: Principal = Depends(require_principal)
) -> Principal:
    """Ensure the caller holds the administrator role."""
    container: AppContainer = request.app.state.container
    try:
        container.access_service.require_admin(principal)
    except FidoError as exc:
        raise http_error(exc) from exc
    return principal


@router.get("/me")
async def me(principal: Principal = Depends(require_principal)) -> dict[str, object]:
    """Return the caller's role and the screens it may open."""
    return serialize_principal(principal)


@router.post("/auth/logout", status_code=status.HTTP_200_OK, response_model=None)
async def logout(
    request: Request,
    principal: Principal = Depends(require_principal),
    access_token: str | None = Depends(bearer_token),
) -> dict[str, str] | JSONResponse:
    """End the caller's session."""
    container: AppContainer = request.app.state.container
    try:
        container.access_service.sign_out(access_token or "")
    except FidoError as exc:
        return error_response(exc)
    return {"status": "signed_out", "user_id": principal.user_id}
