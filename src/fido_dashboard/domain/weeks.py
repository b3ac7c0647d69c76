"""Calendar helpers for ISO weeks and date ranges."""

import logging
import re
from datetime import date, timedelta

from fido_dashboard.domain.errors import FilterValidationError

logger = logging.getLogger(__name__)

DAY_NAMES_ES = (
    "Lunes",
    "Martes",
    "Miércoles",
    "Jueves",
    "Viernes",
    "Sábado",
    "Domingo",
)
THURSDAY = 4
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def day_names() -> list[str]:
    """Return the Spanish weekday names, Monday first."""
    return list(DAY_NAMES_ES)


def dates_of_iso_week(week_string: str | None) -> list[str]:
    """Return the seven dates (Monday to Sunday) of a ``YYYY-Www`` week.

    Week 1 is the week holding Jan 1 when Jan 1 falls Monday to Thursday,
    otherwise it starts on the following Monday. The week number is not
    bounds-checked. Unparseable input yields an empty list.
    """
    if not week_string:
        return []
    try:
        year_part, week_part = week_string.split("-W")
        year = int(year_part)
        week = int(week_part)
        first_day = date(year, 1, 1)
        # Sunday-based weekday index, 0 = Sunday.
        dow = (first_day.weekday() + 1) % 7
        shift = 1 - dow if dow <= THURSDAY else 8 - dow
        start = first_day + timedelta(days=(week - 1) * 7 + shift)
        return [(start + timedelta(days=offset)).isoformat() for offset in range(7)]
    except (ValueError, OverflowError):
        logger.warning("Could not resolve ISO week", extra={"week": week_string})
        return []


def validate_range(start_date: str, end_date: str) -> tuple[date, date]:
    """Parse a ``YYYY-MM-DD`` range and reject inverted bounds."""
    if not (_ISO_DATE.fullmatch(start_date) and _ISO_DATE.fullmatch(end_date)):
        raise FilterValidationError("Las fechas deben tener el formato AAAA-MM-DD.")
    try:
        start = date.fromisoformat(start_date)
        end = date.fromisoformat(end_date)
    except ValueError as exc:
        raise FilterValidationError(
            "Las fechas deben tener el formato AAAA-MM-DD."
        ) from exc
    if start > end:
        raise FilterValidationError(
            "La fecha de inicio debe ser anterior o igual a la fecha de fin."
        )
    return start, end
