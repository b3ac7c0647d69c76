"""Mass unit normalisation."""

import math

GRAMS_PER_KILOGRAM = 1000
GRAMS_PER_POUND = 453.592

_POUND_UNITS = {"pounds", "libras"}


def to_grams(amount: float, unit: str | None) -> float:
    """Convert an amount to grams; unknown units are assumed to be grams."""
    if unit == "kg":
        return amount * GRAMS_PER_KILOGRAM
    if unit in _POUND_UNITS:
        return amount * GRAMS_PER_POUND
    return amount


def parse_amount(raw: object) -> float:
    """Return a stored amount as float, or 0 when absent or not a finite number."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up; non-finite is 0."""
    if not math.isfinite(value):
        return 0
    return math.floor(value + 0.5)
