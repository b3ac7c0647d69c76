"""Feeding record registration and lookup."""

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol

from fido_dashboard.domain.errors import FilterValidationError
from fido_dashboard.domain.feeding import FeedingRecord, NewFeedingEntry
from fido_dashboard.domain.stats import RangeQuery

ALLOWED_UNITS = {"g", "gramos", "kg", "pounds", "libras"}


class FeedingRecordRepository(Protocol):
    """Persistence interface for feeding records."""

    def list_in_range(self, query: RangeQuery) -> list[FeedingRecord]:
        """Return records whose field lies within the inclusive bounds."""

    def add_record(self, entry: NewFeedingEntry) -> FeedingRecord:
        """Persist a new feeding record and return it."""

    def get_latest(self) -> FeedingRecord | None:
        """Return the most recent record, if any."""

    def count_all(self) -> int:
        """Return the number of stored records."""

    def list_sample(self, limit: int) -> list[FeedingRecord]:
        """Return up to ``limit`` records in storage order."""

    def count_since(self, timestamp: str) -> int:
        """Return the number of records at or after ``timestamp``."""


@dataclass
class FeedingService:
    """Service for registering feeding entries."""

    repository: FeedingRecordRepository

    def register(
        self,
        feeding_date: str,
        amount: float | None,
        amount_unit: str = "g",
        user_id: str | None = None,
    ) -> FeedingRecord:
        """Validate and persist a feeding entry for a calendar date or instant."""
        if not feeding_date or amount is None:
            raise FilterValidationError(
                "Completa todos los campos de registro de alimento."
            )
        if not math.isfinite(amount) or amount <= 0:
            raise FilterValidationError("La cantidad debe ser mayor que cero.")
        if amount_unit not in ALLOWED_UNITS:
            raise FilterValidationError(f"Unidad no soportada: {amount_unit}")
        entry = NewFeedingEntry(
            amount=amount,
            amount_unit=amount_unit,
            timestamp=_to_timestamp(feeding_date),
            user_id=user_id,
        )
        return self.repository.add_record(entry)

    def latest(self) -> FeedingRecord | None:
        """Return the most recently logged feeding."""
        return self.repository.get_latest()


def _to_timestamp(raw: str) -> str:
    """Return an ISO timestamp for a ``YYYY-MM-DD`` date or an ISO instant."""
    try:
        if "T" not in raw:
            return date.fromisoformat(raw).isoformat() + "T00:00:00.000Z"
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as exc:
        raise FilterValidationError("Fecha de registro inválida.") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    parsed = parsed.astimezone(UTC)
    return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")
