"""Calendar helpers: dates and month keys (``YYYY-MM``)."""

import re
from datetime import date, datetime

from shopledger.core.exceptions import ValidationError

_MONTH_KEY_RE = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")


def coerce_date(value: date | str | None, field: str = "date") -> date:
    """Return *value* as a date; ``None`` means today."""
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        raise ValidationError(field, "expected an ISO date (YYYY-MM-DD)", value) from None


def month_key(value: date) -> str:
    """Month key of a date, e.g. ``2024-01``."""
    return f"{value.year:04d}-{value.month:02d}"


def current_month() -> str:
    return month_key(date.today())


def parse_month(value: str | None, field: str = "month") -> str:
    """Validate a month key; ``None`` means the current month."""
    if value is None:
        return current_month()
    if not isinstance(value, str) or not _MONTH_KEY_RE.match(value.strip()):
        raise ValidationError(field, "expected a month key (YYYY-MM)", value)
    return value.strip()


def months_of_year(year: int) -> list[str]:
    """The twelve month keys of *year*, January first."""
    if isinstance(year, bool) or not isinstance(year, int) or not 1 <= year <= 9999:
        raise ValidationError("year", "expected a calendar year", year)
    return [f"{year:04d}-{m:02d}" for m in range(1, 13)]
