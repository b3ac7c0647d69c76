"""Statistics service for feeding records."""

import logging
import random
from dataclasses import dataclass, field

from fido_dashboard.domain.filters import TimeFilter
from fido_dashboard.domain.stats import ChartSeries, DetailedStats, StatsReport
from fido_dashboard.domain.units import round_half_up
from fido_dashboard.domain.weeks import dates_of_iso_week, day_names
from fido_dashboard.services.aggregation import (
    STANDARD_PROFILE,
    CategoryProfile,
    aggregate,
    detailed_stats,
    summarize_series,
)
from fido_dashboard.services.feedings import FeedingRecordRepository
from fido_dashboard.services.planner import plan_query

logger = logging.getLogger(__name__)

SAMPLE_VALUES = (450, 320, 580, 210, 390, 670, 520)
NO_RECORDS_NOTICE = (
    "No se encontraron registros de alimentación para el período seleccionado."
)


@dataclass
class StatsService:
    """Service that queries a period and builds its report."""

    repository: FeedingRecordRepository
    profile: CategoryProfile = STANDARD_PROFILE
    collection: str = "feeding_records"
    rng: random.Random = field(default_factory=random.Random)

    def query(self, time_filter: TimeFilter) -> StatsReport:
        """Validate, plan and run a query, then aggregate the result."""
        active = time_filter.active()
        active.validate_complete()
        week_dates: list[str] = []
        if active.mode == "week":
            week_dates = dates_of_iso_week(active.iso_week)

        plan = plan_query(active, self.collection)
        logger.info(
            "Querying feeding records",
            extra={"lower": plan.lower, "upper": plan.upper, "mode": active.mode},
        )
        records = self.repository.list_in_range(plan)

        if active.mode == "week":
            series, details = aggregate(
                records, week_dates, self.profile, labels=day_names()
            )
        else:
            series, details = aggregate(records, None, self.profile)

        if details.total_feedings == 0:
            notice = NO_RECORDS_NOTICE
        else:
            notice = (
                f"Se encontraron {details.total_feedings} registros de alimentación."
            )
        return StatsReport(
            filter=active,
            series=series,
            details=details,
            summary=summarize_series(series.values),
            day_dates=week_dates,
            notice=notice,
        )

    def sample(self) -> StatsReport:
        """Return a week-shaped report filled with sample values."""
        values = list(SAMPLE_VALUES)
        total_feedings = self.rng.randint(15, 34)
        details = DetailedStats(
            total_feedings=total_feedings,
            average_amount=round_half_up(sum(values) / len(values)),
            categories=_sample_categories(self.profile, total_feedings),
        )
        series = ChartSeries(labels=day_names(), values=values)
        return StatsReport(
            filter=None,
            series=series,
            details=details,
            summary=summarize_series(values),
            notice="Datos de prueba de alimentación generados exitosamente.",
        )


def empty_report(
    time_filter: TimeFilter | None,
    profile: CategoryProfile = STANDARD_PROFILE,
    notice: str | None = None,
) -> StatsReport:
    """Return the safe, empty state shown after a failed query."""
    series = ChartSeries.empty()
    return StatsReport(
        filter=time_filter,
        series=series,
        details=detailed_stats([], profile),
        summary=summarize_series(series.values),
        notice=notice,
    )


def _sample_categories(profile: CategoryProfile, total: int) -> dict[str, int]:
    if profile.name == "compact":
        manual = int(total * 0.1)
        pending = int(total * 0.7)
        return {
            "manual": manual,
            "dispenser": total - manual,
            "pending": pending,
            "completed": total - pending,
        }
    return {
        "automatic": int(total * 0.7),
        "dispenser": int(total * 0.6),
        "scheduled": int(total * 0.8),
        "completed": total - int(total * 0.1),
    }
