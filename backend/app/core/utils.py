"""
Utility functions for the application.
"""
import calendar
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def round_money(value) -> Decimal:
    """Round an amount to cents."""
    return Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def month_key(day: date) -> str:
    """Return the YYYY-MM key of a date."""
    return day.strftime("%Y-%m")


def parse_month(month: str) -> tuple:
    """Parse a YYYY-MM string into (year, month)."""
    parsed = datetime.strptime(month, "%Y-%m")
    return parsed.year, parsed.month


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, delta: int) -> tuple:
    """Move (year, month) by `delta` months, returning the new pair."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
