"""Domain models for feeding records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeedingRecord:
    """Raw feeding record as stored; amount is in ``amount_unit``."""

    amount: object
    amount_unit: str | None
    timestamp: str | None
    type: str | None = None
    source: str | None = None
    status: str | None = None
    id: str | None = None

    @property
    def day(self) -> str | None:
        """Return the date portion of the timestamp, if any."""
        if not self.timestamp:
            return None
        return self.timestamp.split("T")[0]


@dataclass(frozen=True)
class NewFeedingEntry:
    """Feeding entry submitted by an administrator."""

    amount: float
    amount_unit: str
    timestamp: str
    type: str = "manual"
    source: str = "dashboard"
    status: str = "completed"
    user_id: str | None = None
