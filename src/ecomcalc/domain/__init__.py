"""Domain layer for ecomcalc application."""

from ecomcalc.domain.aggregation import aggregate, count_days
from ecomcalc.domain.calculator import CalculatorSession
from ecomcalc.domain.metrics import DEFAULT_VAT_RATE, cost_breakdown, derive
from ecomcalc.domain.record_import import RecordImportService
from ecomcalc.domain.record_parser import parse_export, parse_lines, parse_records

__all__ = [
    "aggregate",
    "count_days",
    "CalculatorSession",
    "DEFAULT_VAT_RATE",
    "cost_breakdown",
    "derive",
    "RecordImportService",
    "parse_export",
    "parse_lines",
    "parse_records",
]
