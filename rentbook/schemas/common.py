import re
from decimal import Decimal
from typing import Optional

MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def require_text(v: Optional[str]) -> str:
    """Required text fields are trimmed and must not end up empty."""
    if v is None:
        raise ValueError("field is required")
    v = v.strip()
    if not v:
        raise ValueError("field cannot be empty")
    return v


def optional_text(v: Optional[str]) -> Optional[str]:
    """Blank optional text is stored as NULL."""
    if v is None:
        return None
    v = v.strip()
    return v or None


def require_positive(v: Optional[Decimal]) -> Decimal:
    if v is None:
        raise ValueError("amount is required")
    if v <= 0:
        raise ValueError("amount must be positive")
    return v


def require_month(v: Optional[str]) -> str:
    """Month identifiers are "YYYY-MM"."""
    if v is None or not MONTH_PATTERN.match(v.strip()):
        raise ValueError("month must be formatted YYYY-MM")
    return v.strip()


def require_value(v):
    """Columns that cannot be NULL: an update may leave them out, not send null."""
    if v is None:
        raise ValueError("field cannot be null")
    return v
