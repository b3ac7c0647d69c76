"""Translate a time filter into a record store range query."""

from fido_dashboard.domain.filters import TimeFilter
from fido_dashboard.domain.stats import RangeQuery
from fido_dashboard.domain.weeks import dates_of_iso_week

DAY_START = "T00:00:00.000Z"
DAY_END = "T23:59:59.999Z"
TIMESTAMP_FIELD = "timestamp"


def plan_query(
    time_filter: TimeFilter, collection: str = "feeding_records"
) -> RangeQuery:
    """Return the inclusive, ascending range query for a complete filter."""
    if time_filter.mode == "week":
        week_dates = dates_of_iso_week(time_filter.iso_week)
        first, last = week_dates[0], week_dates[-1]
    else:
        first, last = str(time_filter.start_date), str(time_filter.end_date)
    return RangeQuery(
        collection=collection,
        field=TIMESTAMP_FIELD,
        lower=first + DAY_START,
        upper=last + DAY_END,
        order_by=TIMESTAMP_FIELD,
    )
