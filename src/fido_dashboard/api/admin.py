"""Administrator-only endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from fido_dashboard.api.auth import require_admin
from fido_dashboard.api.models import UserRequest
from fido_dashboard.api.responses import error_response, serialize_profile
from fido_dashboard.domain.errors import FidoError

if TYPE_CHECKING:
    from fido_dashboard.containers import AppContainer

router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.post("/users", status_code=status.HTTP_201_CREATED, response_model=None)
async def register_user(
    payload: UserRequest, request: Request
) -> dict[str, object] | JSONResponse:
    """Create a principal and its role record without a second session."""
    container: AppContainer = request.app.state.container
    try:
        profile = container.user_service.register_user(
            payload.email, payload.password, payload.role
        )
    except FidoError as exc:
        return error_response(exc)
    return {
        "user": serialize_profile(profile),
        "message": "Usuario registrado exitosamente.",
    }
