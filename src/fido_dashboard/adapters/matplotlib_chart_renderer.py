"""Chart rendering with matplotlib."""

from dataclasses import dataclass
from io import BytesIO

from matplotlib.figure import Figure

from fido_dashboard.domain.stats import ChartSeries
from fido_dashboard.services.reports import ChartRenderer

SERIES_LABEL = "Cantidad de Comida Servida (g)"
AREA_LABEL = "Volumen Acumulado (g)"
TEXT_COLOR = "#374151"
GRID_COLOR = "#D1D5DB"
BLUE = "#3B82F6"
VIOLET = "#8B5CF6"
PIE_COLORS = (
    "#EF4444",
    "#F97316",
    "#EAB308",
    "#22C55E",
    "#3B82F6",
    "#8B5CF6",
    "#EC4899",
)


@dataclass
class MatplotlibChartRenderer(ChartRenderer):
    """Render chart series to PNG using the object-oriented matplotlib API."""

    width_in: float = 8.0
    height_in: float = 4.5
    dpi: int = 100

    def render(self, series: ChartSeries, chart_type: str) -> bytes:
        """Return PNG bytes for a bar, line, area or pie chart."""
        figure = Figure(figsize=(self.width_in, self.height_in), dpi=self.dpi)
        axes = figure.add_subplot()
        positions = list(range(len(series.labels)))

        if chart_type == "pie":
            if any(value > 0 for value in series.values):
                colors = [PIE_COLORS[i % len(PIE_COLORS)] for i in positions]
                axes.pie(
                    series.values,
                    labels=series.labels,
                    colors=colors,
                    wedgeprops={"edgecolor": "#FFFFFF", "linewidth": 3},
                    textprops={"color": TEXT_COLOR},
                )
            axes.set_title(SERIES_LABEL, color=TEXT_COLOR)
        else:
            if chart_type == "line":
                axes.plot(
                    positions,
                    series.values,
                    color=BLUE,
                    linewidth=3,
                    marker="o",
                    markersize=8,
                    markeredgecolor="#FFFFFF",
                    label=SERIES_LABEL,
                )
                axes.fill_between(positions, series.values, color=BLUE, alpha=0.2)
            elif chart_type == "area":
                axes.plot(
                    positions,
                    series.values,
                    color=VIOLET,
                    linewidth=3,
                    marker="o",
                    label=AREA_LABEL,
                )
                axes.fill_between(positions, series.values, color=VIOLET, alpha=0.3)
            else:
                axes.bar(
                    positions,
                    series.values,
                    color=BLUE,
                    edgecolor="#2563EB",
                    label=SERIES_LABEL,
                )
            axes.set_xticks(positions, labels=series.labels)
            axes.tick_params(colors=TEXT_COLOR)
            axes.grid(color=GRID_COLOR, alpha=0.5)
            axes.legend(loc="upper center", labelcolor=TEXT_COLOR)

        figure.tight_layout()
        buffer = BytesIO()
        figure.savefig(buffer, format="png")
        return buffer.getvalue()
