"""Feeding record endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from fido_dashboard.api.auth import require_admin, require_principal
from fido_dashboard.api.models import FeedingRequest
from fido_dashboard.api.responses import error_response, serialize_record
from fido_dashboard.domain.errors import FidoError
from fido_dashboard.domain.users import Principal

if TYPE_CHECKING:
    from fido_dashboard.containers import AppContainer

router = APIRouter(prefix="/feedings", tags=["feedings"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=None)
async def add_feeding(
    payload: FeedingRequest,
    request: Request,
    principal: Principal = Depends(require_admin),
) -> dict[str, object] | JSONResponse:
    """Register a manual feeding entered by an administrator."""
    container: AppContainer = request.app.state.container
    try:
        record = container.feeding_service.register(
            payload.date,
            payload.amount,
            payload.amount_unit,
            user_id=principal.user_id,
        )
    except FidoError as exc:
        return error_response(exc)
    return {"record": serialize_record(record)}


@router.get(
    "/latest", dependencies=[Depends(require_principal)], response_model=None
)
async def latest_feeding(request: Request) -> dict[str, object] | JSONResponse:
    """Return the most recently logged feeding, if any."""
    container: AppContainer = request.app.state.container
    try:
        record = container.feeding_service.latest()
    except FidoError as exc:
        return error_response(exc)
    return {"record": serialize_record(record) if record else None}
