"""Date manipulation utilities"""

import math
from datetime import date, datetime
from typing import Union

DAYS_PER_YEAR = 365.25


def parse_date(value: Union[date, str]) -> date:
    """Coerce a date, datetime or ISO-8601 string to a date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        # Form payloads may carry a full timestamp ("1990-01-15T00:00:00.000Z")
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported date value: {value!r}")


def age_in_years(date_of_birth: date, as_of: date) -> int:
    """Whole years between date_of_birth and as_of, using 365.25-day years"""
    return math.floor((as_of - date_of_birth).days / DAYS_PER_YEAR)
