"""Domain models for statistics."""

from dataclasses import dataclass, field

from fido_dashboard.domain.filters import TimeFilter


@dataclass(frozen=True)
class ChartSeries:
    """Labels and gram totals, positionally aligned."""

    labels: list[str]
    values: list[int]

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.values):
            raise ValueError("labels and values must have the same length")

    @classmethod
    def empty(cls) -> "ChartSeries":
        """Return a series with no buckets."""
        return cls(labels=[], values=[])

    def is_empty(self) -> bool:
        """Return True when there is nothing to chart or export."""
        return not self.labels or not self.values


@dataclass(frozen=True)
class DetailedStats:
    """Record-level statistics for a query."""

    total_feedings: int
    average_amount: int
    categories: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class SeriesSummary:
    """Summary tiles computed from the positive chart values."""

    total: int
    average: float
    maximum: int
    minimum: int


@dataclass(frozen=True)
class RangeQuery:
    """Inclusive range query against the record store."""

    collection: str
    field: str
    lower: str
    upper: str
    order_by: str | None = None


@dataclass(frozen=True)
class StatsReport:
    """Everything a statistics screen renders for one query."""

    filter: TimeFilter | None
    series: ChartSeries
    details: DetailedStats
    summary: SeriesSummary
    day_dates: list[str] = field(default_factory=list)
    notice: str | None = None
