"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a user-supplied date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_calendar_date(date_str: str) -> date:
    """Parse a canonical YYYY-MM-DD string into a naive calendar date.

    Time-of-day and timezone never enter the result, so day differences
    are not affected by daylight-saving transitions.

    Raises:
        ValueError: If the string is not an ISO calendar date
    """
    try:
        return date_parser.isoparse(date_str.strip()).date()
    except (ValueError, TypeError, OverflowError, AttributeError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def format_date(value: date) -> str:
    """Return the canonical sortable form of a date."""
    return value.isoformat()
