"""
Display formatting shared by the table and overview payloads (en-US).
"""
from datetime import datetime, date
from typing import Optional, Union

NOT_AVAILABLE = "N/A"

DateLike = Union[datetime, date]


def format_currency(amount: Optional[float], currency: str = "USD", whole: bool = False) -> str:
    """$1,234.00 (or $1,234 with whole=True). Non-USD amounts get a code prefix."""
    if amount is None:
        return NOT_AVAILABLE
    sign = "-" if amount < 0 else ""
    number = f"{abs(amount):,.0f}" if whole else f"{abs(amount):,.2f}"
    if currency == "USD":
        return f"{sign}${number}"
    return f"{sign}{currency} {number}"


def format_date(value: Optional[DateLike]) -> str:
    """MM/DD/YYYY, or N/A."""
    if value is None:
        return NOT_AVAILABLE
    return value.strftime("%m/%d/%Y")


def format_long_date(value: DateLike) -> str:
    """June 5, 2025"""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_date_range(start: DateLike, end: Optional[DateLike]) -> str:
    if end is None:
        return f"{format_long_date(start)} - ongoing"
    return f"{format_long_date(start)} - {format_long_date(end)}"


def format_duration(start: DateLike, end: Optional[DateLike]) -> str:
    """Inclusive day count, e.g. '30 days'."""
    if end is None:
        return NOT_AVAILABLE
    start_day = start.date() if isinstance(start, datetime) else start
    end_day = end.date() if isinstance(end, datetime) else end
    days = (end_day - start_day).days + 1
    return f"{days} day" if days == 1 else f"{days} days"


def format_change(value: Optional[float]) -> str:
    """Signed period-over-period change with one decimal, e.g. '+12.5%'."""
    if value is None:
        return NOT_AVAILABLE
    sign = "+" if value >= 0 else "-"
    return f"{sign}{abs(value):.1f}%"
