"""Bucketing and summary statistics for feeding records."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from fido_dashboard.domain.feeding import FeedingRecord
from fido_dashboard.domain.stats import ChartSeries, DetailedStats, SeriesSummary
from fido_dashboard.domain.units import parse_amount, round_half_up, to_grams


@dataclass(frozen=True)
class CategoryRule:
    """Counts records whose ``field`` equals ``value`` under ``name``."""

    name: str
    field: str
    value: str

    def matches(self, record: FeedingRecord) -> bool:
        """Return True when the record falls in this category."""
        return getattr(record, self.field, None) == self.value


@dataclass(frozen=True)
class CategoryProfile:
    """Named mapping from raw tags to reported categories."""

    name: str
    rules: tuple[CategoryRule, ...]

    def count(self, records: Sequence[FeedingRecord]) -> dict[str, int]:
        """Count records per category; a record may match several or none."""
        counts = {rule.name: 0 for rule in self.rules}
        for record in records:
            for rule in self.rules:
                if rule.matches(record):
                    counts[rule.name] += 1
        return counts


STANDARD_PROFILE = CategoryProfile(
    name="standard",
    rules=(
        CategoryRule("automatic", "type", "automatic"),
        CategoryRule("dispenser", "source", "dispenser"),
        CategoryRule("scheduled", "status", "scheduled"),
        CategoryRule("completed", "status", "completed"),
    ),
)

COMPACT_PROFILE = CategoryProfile(
    name="compact",
    rules=(
        CategoryRule("manual", "type", "manual"),
        CategoryRule("dispenser", "type", "automatic"),
        CategoryRule("pending", "status", "scheduled"),
        CategoryRule("completed", "status", "completed"),
    ),
)

CATEGORY_PROFILES = {
    profile.name: profile for profile in (STANDARD_PROFILE, COMPACT_PROFILE)
}


def get_category_profile(name: str) -> CategoryProfile:
    """Return a category profile by name."""
    try:
        return CATEGORY_PROFILES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown category profile: {name}") from exc


def record_grams(record: FeedingRecord) -> float:
    """Return the record amount normalised to grams; overflow counts as 0."""
    grams = to_grams(parse_amount(record.amount), record.amount_unit)
    return grams if math.isfinite(grams) else 0.0


def aggregate(
    records: Sequence[FeedingRecord],
    bucket_keys: Sequence[str] | None,
    profile: CategoryProfile = STANDARD_PROFILE,
    labels: Sequence[str] | None = None,
) -> tuple[ChartSeries, DetailedStats]:
    """Bucket records by day and compute record-level statistics.

    With ``bucket_keys`` every key is seeded at zero and only matching
    records contribute (week mode). Without keys the buckets are the
    distinct record dates in ascending order (range mode). ``labels``
    replaces the bucket keys as chart labels when given.
    """
    fixed = bucket_keys is not None
    totals: dict[str, float] = {key: 0.0 for key in bucket_keys or []}
    for record in records:
        day = record.day
        if day is None:
            continue
        if fixed and day not in totals:
            continue
        totals[day] = totals.get(day, 0.0) + record_grams(record)

    keys = list(bucket_keys) if fixed else sorted(totals)
    values = [round_half_up(totals[key]) for key in keys]
    if labels is not None and len(labels) != len(keys):
        raise ValueError("labels must align with bucket keys")
    series = ChartSeries(labels=list(labels) if labels else keys, values=values)
    return series, detailed_stats(records, profile)


def detailed_stats(
    records: Sequence[FeedingRecord], profile: CategoryProfile = STANDARD_PROFILE
) -> DetailedStats:
    """Compute count, mean grams and category counts over all records."""
    count = len(records)
    if count == 0:
        return DetailedStats(
            total_feedings=0,
            average_amount=0,
            categories={rule.name: 0 for rule in profile.rules},
        )
    total_grams = sum(record_grams(record) for record in records)
    return DetailedStats(
        total_feedings=count,
        average_amount=round_half_up(total_grams / count),
        categories=profile.count(records),
    )


def summarize_series(values: Sequence[int]) -> SeriesSummary:
    """Summarise positive bucket values for the summary tiles."""
    positive = [value for value in values if value > 0]
    if not positive:
        return SeriesSummary(total=0, average=0.0, maximum=0, minimum=0)
    total = sum(positive)
    return SeriesSummary(
        total=total,
        average=total / len(positive),
        maximum=max(positive),
        minimum=min(positive),
    )
