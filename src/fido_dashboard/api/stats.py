"""Statistics, chart and PDF endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from fido_dashboard.api.auth import require_principal
from fido_dashboard.api.models import ChartRequest, ReportRequest
from fido_dashboard.api.responses import (
    content_disposition,
    error_response,
    serialize_record,
    serialize_report,
)
from fido_dashboard.domain.errors import FidoError
from fido_dashboard.domain.filters import TimeFilter
from fido_dashboard.services.stats import empty_report

if TYPE_CHECKING:
    from fido_dashboard.containers import AppContainer

router = APIRouter(
    prefix="/stats", tags=["stats"], dependencies=[Depends(require_principal)]
)


@router.get("", response_model=None)
async def query_stats(
    request: Request,
    mode: Literal["week", "range"] = "week",
    iso_week: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> dict[str, object] | JSONResponse:
    """Return the chart series, summary and details for a period."""
    container: AppContainer = request.app.state.container
    time_filter = TimeFilter(
        mode=mode, iso_week=iso_week, start_date=start_date, end_date=end_date
    )
    try:
        report = container.stats_service.query(time_filter)
    except FidoError as exc:
        fallback = empty_report(
            time_filter.active(), container.stats_service.profile
        )
        return error_response(exc, report=serialize_report(fallback))
    return serialize_report(report)


@router.post("/sample")
async def sample_stats(request: Request) -> dict[str, object]:
    """Return a report filled with sample data."""
    container: AppContainer = request.app.state.container
    return serialize_report(container.stats_service.sample())


@router.post("/chart", response_model=None)
async def render_chart(
    payload: ChartRequest, request: Request
) -> Response | JSONResponse:
    """Redraw an already computed series as a PNG chart."""
    container: AppContainer = request.app.state.container
    try:
        image = container.report_service.render_chart(
            payload.series.to_series(), payload.chart_type
        )
    except FidoError as exc:
        return error_response(exc)
    return Response(content=image, media_type="image/png")


@router.post("/pdf", response_model=None)
async def export_pdf(
    payload: ReportRequest, request: Request
) -> Response | JSONResponse:
    """Export the client's current report as a PDF download."""
    container: AppContainer = request.app.state.container
    try:
        export = container.report_service.export_pdf(
            payload.to_report(), today=payload.today
        )
    except FidoError as exc:
        return error_response(exc)
    return Response(
        content=export.content,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(export.filename)},
    )


@router.get("/diagnostics", response_model=None)
async def diagnostics(request: Request) -> dict[str, object] | JSONResponse:
    """Check connectivity to the feeding records collection."""
    container: AppContainer = request.app.state.container
    try:
        result = container.diagnostics_service.check_connection()
    except FidoError as exc:
        return error_response(exc)
    return {
        "total_records": result.total_records,
        "recent_records": result.recent_records,
        "since": result.since,
        "sample": [serialize_record(record) for record in result.sample],
        "message": result.message,
    }
