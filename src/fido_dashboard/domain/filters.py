"""Time filter selected on the statistics screen."""

import re
from typing import Literal

from pydantic import BaseModel

from fido_dashboard.domain.errors import FilterValidationError
from fido_dashboard.domain.weeks import dates_of_iso_week, validate_range

_ISO_WEEK = re.compile(r"[0-9]{4}-W[0-9]{2}")


class TimeFilter(BaseModel):
    """Week or date-range filter; only the active mode's fields are used."""

    mode: Literal["week", "range"] = "week"
    iso_week: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    @classmethod
    def week(cls, iso_week: str) -> "TimeFilter":
        """Build a week-mode filter."""
        return cls(mode="week", iso_week=iso_week)

    @classmethod
    def date_range(cls, start_date: str, end_date: str) -> "TimeFilter":
        """Build a range-mode filter."""
        return cls(mode="range", start_date=start_date, end_date=end_date)

    def active(self) -> "TimeFilter":
        """Return a copy holding only the active mode's fields."""
        if self.mode == "week":
            return TimeFilter(mode="week", iso_week=self.iso_week)
        return TimeFilter(
            mode="range", start_date=self.start_date, end_date=self.end_date
        )

    def validate_complete(self) -> None:
        """Raise when the active mode is not fully specified."""
        if self.mode == "week":
            if not self.iso_week:
                raise FilterValidationError(
                    "Por favor, selecciona una semana para consultar los datos."
                )
            if not _ISO_WEEK.fullmatch(self.iso_week) or not dates_of_iso_week(
                self.iso_week
            ):
                raise FilterValidationError(
                    "La semana seleccionada no es válida (formato AAAA-Wss)."
                )
            return
        if not self.start_date or not self.end_date:
            raise FilterValidationError(
                "Por favor, selecciona ambas fechas para consultar los datos."
            )
        validate_range(self.start_date, self.end_date)

    def period_label(self) -> str | None:
        """Return the human-readable period, if the filter is set."""
        if self.mode == "week" and self.iso_week:
            return f"Semana: {self.iso_week}"
        if self.mode == "range" and self.start_date and self.end_date:
            return f"Período: {self.start_date} al {self.end_date}"
        return None
