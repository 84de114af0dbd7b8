"""
Date parsing and the display format used for stored entries.

Entries store their date as a descriptive string such as
``"Mon Jan 01 2024"``.  Incoming dates (entry dates as well as the
``from``/``to`` log bounds) may be written in any form
``dateutil.parser`` understands; only the calendar day is kept.
"""

from datetime import date, datetime
from typing import Any, Optional

from dateutil import parser as date_parser

DISPLAY_FORMAT = "%a %b %d %Y"


def format_date(value: Any) -> Optional[date]:
    """Parse ``value`` into a calendar date.

    Parts the text leaves out resolve to January 1st of the current
    year, so ``"2024"`` means 2024-01-01 whatever day it is today.
    Returns ``None`` for missing, blank or unparsable input instead of
    raising, callers treat that as "not given".
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    default = datetime(date.today().year, 1, 1)
    try:
        return date_parser.parse(text, default=default).date()
    except (ValueError, OverflowError):
        return None


def to_display(day: date) -> str:
    # strftime leaves years below 1000 unpadded on some platforms.
    return f"{day:%a %b %d} {day.year:04d}"


def parse_display(text: str) -> date:
    """Inverse of ``to_display``; also reads years stored without padding."""
    head, _, year = text.strip().rpartition(" ")
    return datetime.strptime(f"{head} {int(year):04d}", DISPLAY_FORMAT).date()


def display_today() -> str:
    return to_display(date.today())


def display_or_today(value: Any) -> str:
    """Normalise an entry date, falling back to today when it is unusable."""
    day = format_date(value)
    return to_display(day) if day is not None else display_today()
