# src/gedcom_importer/dates/parser.py

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional

from dateutil import parser as dateutil_parser

from gedcom_importer.logging import get_logger

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Month helpers
# ---------------------------------------------------------------------------

MONTHS = {
    # English (GEDCOM standard)
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
    # French exports
    "JANV": 1,
    "FEVR": 2,
    "MARS": 3,
    "AVR": 4,
    "MAI": 5,
    "JUIN": 6,
    "JUIL": 7,
    "AOUT": 8,
    "SEPT": 9,
}

APPROXIMATE_QUALIFIERS = ("ABT", "EST", "CAL")


def month_number(abbrev: str) -> int:
    """Map a 3-4 letter month abbreviation to 1-12; unknown abbreviations map to January."""
    return MONTHS.get(abbrev.upper(), 1)


# ---------------------------------------------------------------------------
# Pattern rules, tried in order
# ---------------------------------------------------------------------------

_DAY_MONTH_YEAR = re.compile(r"^(\d{1,2})\s+([A-Z]{3,4})\s+(\d{4})$", re.IGNORECASE)
_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_YEAR_ONLY = re.compile(r"^(\d{4})$")
_MONTH_YEAR = re.compile(r"^([A-Z]{3,4})\s+(\d{4})$", re.IGNORECASE)
_APPROXIMATE = re.compile(
    r"^(?:%s)\s+(.*)$" % "|".join(APPROXIMATE_QUALIFIERS), re.IGNORECASE
)

# "14:30", "14:30:15.250", "2:30 PM", "9 AM"; a bare number is not a time
_TIME_SHAPE = re.compile(
    r"^\d{1,2}(?::\d{2}){1,2}(?:\.\d+)?(?:\s*[AP]\.?M\.?)?$"
    r"|^\d{1,2}\s*[AP]\.?M\.?$",
    re.IGNORECASE,
)


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        # e.g. "31 FEB 1900" or year 0000
        return None


def parse_date(text: Optional[str]) -> Optional[date]:
    """
    Parse a GEDCOM date string into a calendar date.

    Rules, first match wins:
        1. "11 JUN 2025"  (day, 3-4 letter EN/FR month, year)
        2. "2025-06-11"   (ISO)
        3. "1990"         -> 1 Jan 1990
        4. "JUN 2025"     -> 1 Jun 2025
        5. "ABT 1850" / "EST ..." / "CAL ..." -> qualifier dropped, rest re-parsed

    Returns None when nothing matches; callers treat that as "field absent".
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None

    m = _DAY_MONTH_YEAR.match(text)
    if m:
        return _safe_date(int(m.group(3)), month_number(m.group(2)), int(m.group(1)))

    m = _ISO_DATE.match(text)
    if m:
        return _safe_date(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    m = _YEAR_ONLY.match(text)
    if m:
        return _safe_date(int(m.group(1)), 1, 1)

    m = _MONTH_YEAR.match(text)
    if m:
        return _safe_date(int(m.group(2)), month_number(m.group(1)), 1)

    m = _APPROXIMATE.match(text)
    if m:
        return parse_date(m.group(1))

    log.debug("Unrecognised date: %r", text)
    return None


def parse_time(text: Optional[str]) -> Optional[time]:
    """
    Parse a GEDCOM TIME value ("14:30", "14:30:15", "2:30 PM", ...).

    Returns None if the value cannot be read as a time of day.
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None
    if not _TIME_SHAPE.match(text):
        log.debug("Unrecognised time: %r", text)
        return None

    try:
        parsed = dateutil_parser.parse(text)
    except (ValueError, OverflowError):
        log.debug("Unrecognised time: %r", text)
        return None

    return parsed.time()


def combine(day: Optional[date], moment: Optional[time]) -> Optional[datetime]:
    """Merge a date and optional time into one timestamp (midnight if no time)."""
    if day is None:
        return None
    return datetime.combine(day, moment or time(0, 0, 0))


def parse_timestamp(date_text: Optional[str], time_text: Optional[str]) -> Optional[datetime]:
    """Parse a DATE + TIME pair (as found under CHAN / _CREA) into one timestamp."""
    return combine(parse_date(date_text), parse_time(time_text))
