"""Pure parsing helpers that report failure as None instead of raising."""

import calendar
import re
from datetime import datetime, timedelta
from typing import Optional

# User-facing pattern, e.g. "2019-10-15 1800"
DATE_TIME_PATTERN = "yyyy-MM-dd HHmm"

# Zero-padded fields only: year, month, day, hour, minute
_DATE_TIME_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2}) ([0-9]{2})([0-9]{2})"
)
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_date_time(text: str) -> Optional[datetime]:
    """Parse text in the fixed yyyy-MM-dd HHmm pattern.

    Fields are range-checked one by one. A day of 29-31 that does not
    exist in the month is moved back to the month's last day, and 2400
    means 00:00 on the following day.

    Returns:
        The parsed datetime, or None if the text does not match the pattern
        or a field is out of range.
    """
    match = _DATE_TIME_RE.fullmatch(text)
    if not match:
        return None

    year, month, day, hour, minute = (int(group) for group in match.groups())
    if year < 1 or not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    if hour > 24 or minute > 59 or (hour == 24 and minute != 0):
        return None

    day = min(day, calendar.monthrange(year, month)[1])
    if hour == 24:
        try:
            return datetime(year, month, day) + timedelta(days=1)
        except OverflowError:
            return None
    return datetime(year, month, day, hour, minute)


def parse_int(text: str) -> Optional[int]:
    """Parse an optionally signed decimal integer, or return None."""
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)
