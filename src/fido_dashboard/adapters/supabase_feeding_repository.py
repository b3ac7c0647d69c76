"""Supabase repository for feeding records."""

from dataclasses import dataclass

from supabase import Client

from fido_dashboard.adapters.store_errors import run_store_call
from fido_dashboard.domain.feeding import FeedingRecord, NewFeedingEntry
from fido_dashboard.domain.stats import RangeQuery
from fido_dashboard.services.feedings import FeedingRecordRepository

_COLUMNS = "id, amount, amount_unit, timestamp, type, source, status"


@dataclass
class SupabaseFeedingRepository(FeedingRecordRepository):
    """Supabase implementation for feeding record queries."""

    client: Client
    table: str = "feeding_records"

    def list_in_range(self, query: RangeQuery) -> list[FeedingRecord]:
        """Return records within the inclusive bounds of the query."""

        def call() -> list[dict[str, object]]:
            request = (
                self.client.table(query.collection)
                .select(_COLUMNS)
                .gte(query.field, query.lower)
                .lte(query.field, query.upper)
            )
            if query.order_by:
                request = request.order(query.order_by, desc=False)
            return request.execute().data or []

        rows = run_store_call(call, query.collection)
        return [_parse_row(row) for row in rows]

    def add_record(self, entry: NewFeedingEntry) -> FeedingRecord:
        """Insert a feeding record and return the stored row."""
        payload = {
            "amount": entry.amount,
            "amount_unit": entry.amount_unit,
            "timestamp": entry.timestamp,
            "type": entry.type,
            "source": entry.source,
            "status": entry.status,
            "user_id": entry.user_id,
        }
        response = run_store_call(
            lambda: self.client.table(self.table).insert(payload).execute(),
            self.table,
        )
        if not response.data:
            raise RuntimeError("Failed to create feeding record in Supabase")
        return _parse_row(response.data[0])

    def get_latest(self) -> FeedingRecord | None:
        """Return the record with the greatest timestamp."""
        response = run_store_call(
            lambda: self.client.table(self.table)
            .select(_COLUMNS)
            .order("timestamp", desc=True)
            .limit(1)
            .execute(),
            self.table,
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def count_all(self) -> int:
        """Return the exact number of feeding records."""
        response = run_store_call(
            lambda: self.client.table(self.table)
            .select("id", count="exact")
            .limit(1)
            .execute(),
            self.table,
        )
        return response.count or 0

    def list_sample(self, limit: int) -> list[FeedingRecord]:
        """Return the first records of the table."""
        response = run_store_call(
            lambda: self.client.table(self.table)
            .select(_COLUMNS)
            .limit(limit)
            .execute(),
            self.table,
        )
        return [_parse_row(row) for row in response.data or []]

    def count_since(self, timestamp: str) -> int:
        """Return the number of records at or after the timestamp."""
        response = run_store_call(
            lambda: self.client.table(self.table)
            .select("id", count="exact")
            .gte("timestamp", timestamp)
            .order("timestamp", desc=True)
            .limit(1)
            .execute(),
            self.table,
        )
        return response.count or 0


def _parse_row(row: dict[str, object]) -> FeedingRecord:
    timestamp = row.get("timestamp")
    record_id = row.get("id")
    return FeedingRecord(
        id=str(record_id) if record_id is not None else None,
        amount=row.get("amount"),
        amount_unit=_optional_str(row.get("amount_unit")),
        timestamp=timestamp if isinstance(timestamp, str) and timestamp else None,
        type=_optional_str(row.get("type")),
        source=_optional_str(row.get("source")),
        status=_optional_str(row.get("status")),
    )


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None
