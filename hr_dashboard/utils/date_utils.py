"""
Date helpers shared by the models, service and stats layers.
"""
from datetime import date, datetime
from typing import Any, Optional


def parse_date(value: Any) -> Optional[date]:
    """
    Best-effort conversion of a stored value to a date.
    Accepts date, datetime, or an ISO string ("1990-05-18", optionally
    followed by a "T" or space separated time). Returns None for anything else.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def calculate_age(birth_date: Optional[date], today: date) -> int:
    """Completed years between birth_date and today (0 when unknown)."""
    if birth_date is None:
        return 0
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return max(age, 0)
