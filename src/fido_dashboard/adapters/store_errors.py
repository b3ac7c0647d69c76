"""Translate Supabase client failures into the dashboard error taxonomy."""

import logging
from collections.abc import Callable
from typing import TypeVar

import httpx
from supabase import PostgrestAPIError

from fido_dashboard.domain.errors import (
    FidoError,
    MissingIndexError,
    StorePermissionError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

PERMISSION_CODES = {"42501", "PGRST301", "PGRST302"}
QUERY_CANCELED_CODE = "57014"


def translate_store_error(exc: Exception, collection: str) -> FidoError:
    """Map a client exception to the matching dashboard error."""
    if isinstance(exc, PostgrestAPIError):
        code = str(exc.code or "")
        if code in PERMISSION_CODES:
            return StorePermissionError(
                "Error de permisos: tu usuario no tiene acceso a la colección "
                f"{collection}. Contacta al administrador."
            )
        if code == QUERY_CANCELED_CODE:
            return MissingIndexError(
                "Error de índice: la consulta requiere un índice. "
                "Revisa los registros del servidor para más detalles."
            )
        return StoreUnavailableError(
            f"Error al consultar {collection}: {exc.message}"
        )
    return StoreUnavailableError(
        "Servicio temporalmente no disponible. Inténtalo de nuevo en unos momentos."
    )


def run_store_call(call: Callable[[], T], collection: str) -> T:
    """Run a store call, raising dashboard errors for known failures."""
    try:
        return call()
    except (PostgrestAPIError, httpx.HTTPError) as exc:
        error = translate_store_error(exc, collection)
        logger.warning(
            "Record store call failed",
            extra={"collection": collection, "error_code": error.code},
        )
        raise error from exc
