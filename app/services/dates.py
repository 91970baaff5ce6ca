"""Date resolution for SECOP queries.

Requests either name a publication date explicitly (``fecha=YYYY-MM-DD``) or
fall back to the previous business day.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Optional

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# date.weekday(): Monday == 0, Sunday == 6
_DAYS_BACK = {0: 3, 6: 2}


class InvalidDateError(ValueError):
    """Raised when a date parameter is not a real YYYY-MM-DD calendar date."""

    pass


def previous_business_day(today: Optional[date] = None) -> date:
    """Return the most recent weekday before ``today``.

    Monday maps to the previous Friday, Sunday to Friday, any other day to
    the day before.
    """
    today = today or date.today()
    return today - timedelta(days=_DAYS_BACK.get(today.weekday(), 1))


def is_valid_date(value: str) -> bool:
    """Check that ``value`` is YYYY-MM-DD and names a real calendar date."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def resolve_date(value: Optional[str], today: Optional[date] = None) -> date:
    """Resolve the date a request should query from.

    Args:
        value: Raw ``fecha`` parameter, or None/empty to use the default.
        today: Reference date for the business-day fallback (for testing).

    Returns:
        The parsed date, or the previous business day.

    Raises:
        InvalidDateError: ``value`` is given but not a valid date.
    """
    if value is None or value == "":
        return previous_business_day(today)
    if not is_valid_date(value):
        raise InvalidDateError(f"invalid date: {value!r}")
    return date.fromisoformat(value)
