"""Request models for the dashboard API."""

from datetime import date

from pydantic import BaseModel, Field

from fido_dashboard.domain.errors import FilterValidationError
from fido_dashboard.domain.filters import TimeFilter
from fido_dashboard.domain.stats import ChartSeries, DetailedStats, StatsReport
from fido_dashboard.services.aggregation import summarize_series


class SeriesPayload(BaseModel):
    labels: list[str] = Field(default_factory=list)
    values: list[int] = Field(default_factory=list)

    def to_series(self) -> ChartSeries:
        if len(self.labels) != len(self.values):
            raise FilterValidationError(
                "La serie de la gráfica no es válida: etiquetas y valores difieren."
            )
        return ChartSeries(labels=list(self.labels), values=list(self.values))


class ChartRequest(BaseModel):
    """Previously computed series to redraw as a chart."""

    series: SeriesPayload
    chart_type: str = "bar"


class DetailsPayload(BaseModel):
    total_feedings: int = 0
    average_amount: int = 0
    categories: dict[str, int] = Field(default_factory=dict)


class ReportRequest(BaseModel):
    """Report state held by the client, exported without re-querying."""

    filter: TimeFilter | None = None
    series: SeriesPayload = Field(default_factory=SeriesPayload)
    details: DetailsPayload = Field(default_factory=DetailsPayload)
    day_dates: list[str] = Field(default_factory=list)
    today: date | None = None

    def to_report(self) -> StatsReport:
        """Build the report, rejecting a filter the query path would reject."""
        active = None
        if self.filter is not None:
            active = self.filter.active()
            active.validate_complete()
        series = self.series.to_series()
        return StatsReport(
            filter=active,
            series=series,
            details=DetailedStats(
                total_feedings=self.details.total_feedings,
                average_amount=self.details.average_amount,
                categories=dict(self.details.categories),
            ),
            summary=summarize_series(series.values),
            day_dates=list(self.day_dates),
        )


class FeedingRequest(BaseModel):
    """Manual feeding entered from the dashboard."""

    date: str
    amount: float
    amount_unit: str = "g"


class UserRequest(BaseModel):
    """Administrator request to provision a principal."""

    email: str
    password: str
    role: str = "consulta"
