"""Chart and PDF report rendering."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from fido_dashboard.domain.errors import ExportPreconditionError, FilterValidationError
from fido_dashboard.domain.filters import TimeFilter
from fido_dashboard.domain.stats import ChartSeries, StatsReport

logger = logging.getLogger(__name__)

CHART_TYPES = ("bar", "line", "pie", "area")


class ChartRenderer(Protocol):
    """Renders a chart series as an image."""

    def render(self, series: ChartSeries, chart_type: str) -> bytes:
        """Return PNG bytes for the series."""


class PdfRenderer(Protocol):
    """Renders a statistics report as a PDF document."""

    def render(self, report: StatsReport, generated_on: date) -> bytes:
        """Return PDF bytes for the report."""


@dataclass(frozen=True)
class PdfExport:
    """Rendered PDF and the filename it should be saved under."""

    filename: str
    content: bytes


@dataclass
class ReportService:
    """Service for rendering reports from an already computed series."""

    chart_renderer: ChartRenderer
    pdf_renderer: PdfRenderer

    def render_chart(self, series: ChartSeries, chart_type: str = "bar") -> bytes:
        """Render the series without querying the store again."""
        if chart_type not in CHART_TYPES:
            raise FilterValidationError(f"Tipo de gráfica no soportado: {chart_type}")
        return self.chart_renderer.render(series, chart_type)

    def export_pdf(self, report: StatsReport, today: date | None = None) -> PdfExport:
        """Render the report as a PDF, failing fast when it has no data."""
        if report.series.is_empty():
            raise ExportPreconditionError(
                "Primero consulta los datos antes de descargar el PDF."
            )
        generated_on = today or date.today()
        content = self.pdf_renderer.render(report, generated_on)
        filename = pdf_filename(report.filter, generated_on)
        logger.info("Generated PDF report", extra={"report_filename": filename})
        return PdfExport(filename=filename, content=content)


def pdf_filename(time_filter: TimeFilter | None, today: date) -> str:
    """Return the download filename encoding the active filter."""
    base = "reporte-alimentacion-"
    if time_filter is not None:
        if time_filter.mode == "week" and time_filter.iso_week:
            return f"{base}semana-{time_filter.iso_week}.pdf"
        start, end = time_filter.start_date, time_filter.end_date
        if time_filter.mode == "range" and start and end:
            return f"{base}{start}-al-{end}.pdf"
    return f"{base}{today.isoformat()}.pdf"
