"""Utility functions for ecomcalc."""

from ecomcalc.utils.date_parser import parse_date, parse_calendar_date, format_date
from ecomcalc.utils.amount_parser import parse_amount, parse_count, coerce_non_negative

__all__ = [
    "parse_date",
    "parse_calendar_date",
    "format_date",
    "parse_amount",
    "parse_count",
    "coerce_non_negative",
]
