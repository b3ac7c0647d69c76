"""PDF report rendering with the reportlab canvas."""

from dataclasses import dataclass
from datetime import date
from io import BytesIO

from reportlab.lib.colors import Color, HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas

from fido_dashboard.domain.stats import StatsReport
from fido_dashboard.services.aggregation import summarize_series
from fido_dashboard.services.reports import PdfRenderer

TITLE = "Reporte de Alimentación de Mascotas"
SUBTITLE = "Sistema FIDO - Registros de Comida"
FOOTER = "SISTEMA FIDO TODOS LOS DERECHOS RESERVADOS"

HEADER_BG = HexColor("#C4B5FD")
HEADER_TEXT = HexColor("#4B006E")
TABLE_HEADER_BG = HexColor("#7C3AED")
ROW_BG = (HexColor("#F3F4F6"), HexColor("#E5E7EB"))
BORDER = HexColor("#000000")
TEXT = HexColor("#222222")
MUTED = HexColor("#666666")
WHITE = HexColor("#FFFFFF")

CATEGORY_LABELS = {
    "automatic": "Automáticas",
    "dispenser": "Dispensador",
    "scheduled": "Programadas",
    "completed": "Completadas",
    "manual": "Manuales",
    "pending": "Pendientes",
}

PAGE_WIDTH_MM = 210
PAGE_HEIGHT_MM = 297
TABLE_X = 15
TABLE_WIDTH = 180
ROW_HEIGHT = 12
TABLE_BOTTOM_LIMIT = 265


@dataclass
class _Page:
    """Draws on an A4 canvas using millimetres measured from the top-left."""

    canvas: Canvas

    def text(self, x: float, y: float, value: str, *, center: bool = False) -> None:
        y_pt = (PAGE_HEIGHT_MM - y) * mm
        if center:
            self.canvas.drawCentredString(x * mm, y_pt, value)
        else:
            self.canvas.drawString(x * mm, y_pt, value)

    def fill_rect(  # noqa: PLR0913
        self, x: float, y: float, width: float, height: float, color: Color
    ) -> None:
        self.canvas.setFillColor(color)
        self.canvas.rect(
            x * mm,
            (PAGE_HEIGHT_MM - y - height) * mm,
            width * mm,
            height * mm,
            stroke=0,
            fill=1,
        )

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.canvas.setStrokeColor(BORDER)
        self.canvas.rect(
            x * mm,
            (PAGE_HEIGHT_MM - y - height) * mm,
            width * mm,
            height * mm,
            stroke=1,
            fill=0,
        )

    def font(self, size: float, color: Color, bold: bool = False) -> None:
        self.canvas.setFont("Helvetica-Bold" if bold else "Helvetica", size)
        self.canvas.setFillColor(color)


@dataclass
class ReportlabPdfRenderer(PdfRenderer):
    """Render statistics reports to A4 PDF documents."""

    def render(self, report: StatsReport, generated_on: date) -> bytes:
        """Return the PDF bytes for a report with a non-empty series."""
        buffer = BytesIO()
        canvas = Canvas(buffer, pagesize=A4)
        canvas.setTitle(TITLE)
        page = _Page(canvas)
        week_mode = report.filter is None or report.filter.mode == "week"

        self._draw_header(page, report)
        y = self._draw_table_header(page, 45, week_mode)
        for idx, label in enumerate(report.series.labels):
            if y + ROW_HEIGHT > TABLE_BOTTOM_LIMIT:
                self._draw_footer(page, generated_on)
                canvas.showPage()
                y = self._draw_table_header(page, 20, week_mode)
            self._draw_row(page, y, idx, label, report, week_mode)
            y += ROW_HEIGHT

        if y + 45 > TABLE_BOTTOM_LIMIT:
            self._draw_footer(page, generated_on)
            canvas.showPage()
            y = 10
        self._draw_statistics(page, y + 15, report)
        self._draw_footer(page, generated_on)
        canvas.showPage()
        canvas.save()
        return buffer.getvalue()

    def _draw_header(self, page: _Page, report: StatsReport) -> None:
        page.fill_rect(0, 0, PAGE_WIDTH_MM, 35, HEADER_BG)
        page.font(20, HEADER_TEXT, bold=True)
        page.text(105, 18, TITLE, center=True)
        page.font(12, TEXT)
        page.text(105, 25, SUBTITLE, center=True)
        period = report.filter.period_label() if report.filter else None
        if period:
            page.font(11, TEXT)
            page.text(105, 32, period, center=True)

    def _draw_table_header(self, page: _Page, top: float, week_mode: bool) -> float:
        page.fill_rect(TABLE_X, top, TABLE_WIDTH, 10, TABLE_HEADER_BG)
        page.stroke_rect(TABLE_X, top, TABLE_WIDTH, 10)
        page.font(13, WHITE, bold=True)
        if week_mode:
            page.text(25, top + 7, "Día")
            page.text(80, top + 7, "Fecha")
            page.text(150, top + 7, "Cantidad (g)")
        else:
            page.text(25, top + 7, "Fecha")
            page.text(120, top + 7, "Cantidad (g)")
        return top + 10

    def _draw_row(  # noqa: PLR0913
        self,
        page: _Page,
        top: float,
        idx: int,
        label: str,
        report: StatsReport,
        week_mode: bool,
    ) -> None:
        page.fill_rect(TABLE_X, top, TABLE_WIDTH, ROW_HEIGHT, ROW_BG[idx % 2])
        page.stroke_rect(TABLE_X, top, TABLE_WIDTH, ROW_HEIGHT)
        page.font(11, TEXT)
        baseline = top + 7
        grams = f"{report.series.values[idx]}g"
        page.text(25, baseline, label)
        if week_mode:
            day_date = (
                report.day_dates[idx] if idx < len(report.day_dates) else "N/A"
            )
            page.text(80, baseline, day_date)
            page.text(150, baseline, grams)
        else:
            page.text(120, baseline, grams)

    def _draw_statistics(self, page: _Page, top: float, report: StatsReport) -> None:
        summary = summarize_series(report.series.values)
        page.font(14, HEADER_TEXT, bold=True)
        page.text(15, top, "Resumen Estadístico:")
        page.font(11, TEXT)
        y = top + 10
        page.text(15, y, f"Total: {summary.total}g")
        page.text(60, y, f"Promedio: {summary.average:.1f}g")
        page.text(110, y, f"Máximo: {summary.maximum}g")
        page.text(155, y, f"Mínimo: {summary.minimum}g")

        y += 15
        page.font(14, HEADER_TEXT, bold=True)
        page.text(15, y, "Detalles de Alimentación:")
        page.font(11, TEXT)
        y += 10
        details = report.details
        cells = [
            f"Total Alimentaciones: {details.total_feedings}",
            f"Promedio por Comida: {details.average_amount}g",
        ]
        cells.extend(
            f"{CATEGORY_LABELS.get(name, name.capitalize())}: {count}"
            for name, count in details.categories.items()
        )
        columns = (15, 80, 155)
        for idx, cell in enumerate(cells):
            if idx and idx % len(columns) == 0:
                y += 8
            page.text(columns[idx % len(columns)], y, cell)

    def _draw_footer(self, page: _Page, generated_on: date) -> None:
        page.font(10, MUTED)
        generated = generated_on.strftime("%d/%m/%Y")
        page.text(105, 280, f"Generado el: {generated}", center=True)
        page.text(105, 290, f"{FOOTER} {generated_on.year}", center=True)
