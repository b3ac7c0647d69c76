"""Record store connectivity check."""

import logging
from dataclasses import dataclass

from fido_dashboard.domain.feeding import FeedingRecord
from fido_dashboard.services.feedings import FeedingRecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionReport:
    """Result of probing the feeding records collection."""

    total_records: int
    recent_records: int
    since: str
    sample: list[FeedingRecord]

    @property
    def message(self) -> str:
        """Return the notice shown to the user."""
        if self.total_records == 0:
            return (
                "Conexión exitosa pero no hay registros de alimentación. "
                "Verifica que la colección existe y tiene datos."
            )
        return (
            f"Conexión exitosa. Total registros: {self.total_records}. "
            f"Registros recientes: {self.recent_records}."
        )


@dataclass
class DiagnosticsService:
    """Service for checking the record store from the dashboard."""

    repository: FeedingRecordRepository
    since: str = "2025-08-01T00:00:00.000Z"
    sample_size: int = 5

    def check_connection(self) -> ConnectionReport:
        """Count records, fetch a sample and count recent ones."""
        total = self.repository.count_all()
        if total == 0:
            return ConnectionReport(
                total_records=0, recent_records=0, since=self.since, sample=[]
            )
        sample = self.repository.list_sample(self.sample_size)
        recent = self.repository.count_since(self.since)
        logger.info(
            "Record store reachable",
            extra={"total_records": total, "recent_records": recent},
        )
        return ConnectionReport(
            total_records=total, recent_records=recent, since=self.since, sample=sample
        )
