# -*- coding: utf-8 -*-
"""
DateTime Utilities - أدوات التاريخ والوقت

Day-granularity date handling for validation rules and payload
serialization.
"""

from datetime import datetime, date
from typing import Union, Optional


DateLike = Union[datetime, date, str, None]


def to_date(value: DateLike) -> Optional[date]:
    """
    Convert any date-like value to a calendar date (time of day dropped).

    Args:
        value: datetime, date, ISO string, or None

    Returns:
        date object, or None when the value is empty or unparseable

    Examples:
        >>> to_date(datetime(2024, 1, 15, 10, 30))
        date(2024, 1, 15)
        >>> to_date('2024-01-15T23:59:00')
        date(2024, 1, 15)
        >>> to_date('not a date')
        None
    """
    if value is None:
        return None

    # datetime is a date subclass -> check it first
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            if 'T' in value or ' ' in value:
                # fromisoformat() only accepts a "Z" suffix from Python 3.11
                if value[-1] in ('Z', 'z'):
                    value = value[:-1] + '+00:00'
                return datetime.fromisoformat(value).date()
            return date.fromisoformat(value)
        except ValueError:
            return None

    return None


def is_date_like(value) -> bool:
    """Check whether a value can be interpreted as a calendar date."""
    return to_date(value) is not None


def to_date_isoformat(value: DateLike) -> Optional[str]:
    """
    Convert any date-like value to date-only ISO format (YYYY-MM-DD).

    Used when serializing date fields (payment_date, due_date, etc.)
    into an outbound payload.

    Examples:
        >>> to_date_isoformat(datetime(2024, 1, 15, 10, 30))
        '2024-01-15'
        >>> to_date_isoformat(None)
        None
    """
    parsed = to_date(value)
    return parsed.isoformat() if parsed else None


def today() -> date:
    """Current calendar date (wall clock)."""
    return datetime.now().date()
