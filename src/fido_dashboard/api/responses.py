"""Serialisation helpers and error responses for the HTTP API."""

import logging
from urllib.parse import quote

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from fido_dashboard.domain.errors import FidoError
from fido_dashboard.domain.feeding import FeedingRecord
from fido_dashboard.domain.stats import StatsReport
from fido_dashboard.domain.users import Principal, UserProfile

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    "validation": status.HTTP_400_BAD_REQUEST,
    "no_data": status.HTTP_400_BAD_REQUEST,
    "registration_failed": status.HTTP_400_BAD_REQUEST,
    "unauthenticated": status.HTTP_401_UNAUTHORIZED,
    "access_denied": status.HTTP_403_FORBIDDEN,
    "permission_denied": status.HTTP_403_FORBIDDEN,
    "missing_index": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "unavailable": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: FidoError) -> int:
    """Return the HTTP status for a dashboard error."""
    return _STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_body(exc: FidoError) -> dict[str, object]:
    """Return the JSON body describing an error."""
    return {"error": exc.code, "message": exc.message}


def error_response(exc: FidoError, **extra: object) -> JSONResponse:
    """Log a handled error and return it as a JSON response."""
    logger.warning("Request failed: %s", exc.code, extra={"error_code": exc.code})
    return JSONResponse(
        status_code=status_for(exc), content={**error_body(exc), **extra}
    )


def http_error(exc: FidoError) -> HTTPException:
    """Convert a dashboard error into an HTTPException for dependencies."""
    return HTTPException(status_code=status_for(exc), detail=error_body(exc))


def content_disposition(filename: str) -> str:
    """Return an attachment header value with the filename safely encoded."""
    quoted = quote(filename)
    if quoted == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename*=utf-8''{quoted}"


def serialize_report(report: StatsReport) -> dict[str, object]:
    """Return the JSON view of a statistics report."""
    return {
        "filter": report.filter.model_dump() if report.filter else None,
        "series": {"labels": report.series.labels, "values": report.series.values},
        "day_dates": report.day_dates,
        "summary": {
            "total": report.summary.total,
            "average": round(report.summary.average, 2),
            "maximum": report.summary.maximum,
            "minimum": report.summary.minimum,
        },
        "details": {
            "total_feedings": report.details.total_feedings,
            "average_amount": report.details.average_amount,
            "categories": report.details.categories,
        },
        "notice": report.notice,
    }


def serialize_record(record: FeedingRecord) -> dict[str, object]:
    """Return the JSON view of a feeding record."""
    return {
        "id": record.id,
        "amount": record.amount,
        "amount_unit": record.amount_unit,
        "timestamp": record.timestamp,
        "type": record.type,
        "source": record.source,
        "status": record.status,
    }


def serialize_principal(principal: Principal) -> dict[str, object]:
    """Return the caller's identity and the screens it may open."""
    screens = ["statistics"]
    if principal.is_admin:
        screens = ["register_user", "register_feeding", "statistics"]
    return {
        "user_id": principal.user_id,
        "email": principal.email,
        "role": principal.role.value,
        "screens": screens,
    }


def serialize_profile(profile: UserProfile) -> dict[str, object]:
    """Return the JSON view of a user role record."""
    return {
        "id": profile.id,
        "email": profile.email,
        "role": profile.role.value if profile.role else None,
        "created_at": profile.created_at.isoformat() if profile.created_at else None,
    }
