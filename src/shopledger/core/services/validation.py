"""Input checks shared by the ledgers.

Every check raises ValidationError before any state is touched.
"""

import math
from typing import Any

from shopledger.core.exceptions import ValidationError


def require_text(field: str, value: Any) -> str:
    """Non-empty string, returned trimmed."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, "is required", value)
    return value.strip()


def require_amount(field: str, value: Any, allow_negative: bool = False) -> float:
    """Finite number; non-negative unless *allow_negative*."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field, "must be a number", value)
    if not math.isfinite(value):
        raise ValidationError(field, "must be a finite number", value)
    if not allow_negative and value < 0:
        raise ValidationError(field, "must not be negative", value)
    return float(value)


def require_positive_int(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(field, "must be a positive integer", value)
    return value


def require_int(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "must be an integer", value)
    return value
