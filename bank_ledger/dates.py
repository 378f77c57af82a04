"""
Calendar Date Helpers

Ledger dates are canonical 8-digit YYYYMMDD strings. Zero padding makes
lexicographic order identical to chronological order, so dates are compared
as plain strings throughout the ledger.
"""

import calendar
import re
from datetime import date
from typing import Optional, Tuple, Union

from .errors import InvalidDateFormat, InvalidDate

_NON_DIGITS = re.compile(r'\D')


def normalize_date(value: str) -> str:
    """
    Strip everything but digits from a date input

    Args:
        value: Date text such as "2023-01-01", "2023/01/01" or "20230101"

    Returns:
        The 8-digit canonical form

    Raises:
        InvalidDateFormat: If the input does not reduce to exactly 8 digits
    """
    digits = _NON_DIGITS.sub('', str(value) if value is not None else '')
    if len(digits) != 8:
        raise InvalidDateFormat()
    return digits


def to_calendar_date(canonical: str) -> date:
    """Convert a canonical date string to a date, rejecting impossible days"""
    try:
        return date(int(canonical[:4]), int(canonical[4:6]), int(canonical[6:8]))
    except ValueError:
        raise InvalidDate(f"Invalid date: {canonical}")


def parse_date(value: str) -> str:
    """Normalize a date input and check it names a real calendar day"""
    canonical = normalize_date(value)
    to_calendar_date(canonical)
    return canonical


def format_date(value: date) -> str:
    return value.strftime('%Y%m%d')


def today() -> str:
    return format_date(date.today())


def coerce_year_month(year: Union[int, str], month: Union[int, str]) -> Tuple[int, int]:
    """
    Accept year and month as ints or numeric strings ("2023", "06")

    Raises:
        InvalidDate: If either is not numeric or month is outside 1..12
    """
    try:
        year_value = int(year)
        month_value = int(month)
    except (TypeError, ValueError):
        raise InvalidDate(f"Invalid year/month: {year}/{month}")

    if not 1 <= year_value <= 9999 or not 1 <= month_value <= 12:
        raise InvalidDate(f"Invalid year/month: {year}/{month}")

    return year_value, month_value


def parse_year_month(value: str) -> Tuple[int, int]:
    """Parse a YYYYMM statement period"""
    digits = _NON_DIGITS.sub('', str(value) if value is not None else '')
    if len(digits) != 6:
        raise InvalidDateFormat("Statement period should be in YYYYMM format")
    return coerce_year_month(digits[:4], digits[4:])


def month_prefix(year: int, month: int) -> str:
    return f"{year:04d}{month:02d}"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def day_in_month(year: int, month: int, day: int) -> str:
    return f"{month_prefix(year, month)}{day:02d}"


def last_day_of_month(year: int, month: int) -> str:
    return day_in_month(year, month, days_in_month(year, month))


def before_month(year: int, month: int) -> str:
    """
    Boundary for "balance before any of this month's activity"

    Day "00" sorts after every day of earlier months and before day 1.
    """
    return day_in_month(year, month, 0)


def is_in_month(canonical: str, year: int, month: int) -> bool:
    return canonical.startswith(month_prefix(year, month))


def resolve_as_of(as_of: Optional[Union[str, date]]) -> str:
    """Turn an optional as-of argument into a canonical date, defaulting to today"""
    if as_of is None:
        return today()
    if isinstance(as_of, date):
        return format_date(as_of)
    return normalize_date(as_of)
