"""Parser for tab-delimited daily sales exports.

The export format is inconsistently quoted: whole lines may be wrapped in
double quotes and individual fields in doubled quotes, e.g.::

    Data	Comenzi	Valoare Neta	Cost Livrare	Valoare Totala
    "2025-12-13""	""15""	""1878,79""	""95,00""	""1973,79"

Parsing never fails on row-level data. Lines with too few fields are
skipped, and numeric fields that cannot be read are zero-filled.
"""

import logging
from typing import Iterable, Iterator

from ecomcalc.domain.entities import DailyRecord, ImportResult, ParsedLine
from ecomcalc.utils.amount_parser import parse_amount, parse_count

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "\t"
MIN_FIELDS = 5


def _strip_line_quotes(line: str) -> str:
    line = line.strip()
    if line.startswith('"') and line.endswith('"'):
        line = line[1:-1]
    return line


def _clean_field(field: str) -> str:
    if field.startswith('""'):
        field = field[2:]
    if field.endswith('""'):
        field = field[:-2]
    return field.replace('"', "")


def split_fields(line: str) -> list[str]:
    """Split one export line into unquoted fields."""
    return [_clean_field(part) for part in _strip_line_quotes(line).split(FIELD_DELIMITER)]


def parse_line(line: str, line_number: int = 0) -> ParsedLine:
    """Parse a single data line into a record or a skip result."""
    values = split_fields(line)
    if len(values) < MIN_FIELDS:
        return ParsedLine(
            line_number=line_number,
            raw=line,
            reason=f"expected at least {MIN_FIELDS} fields, found {len(values)}",
        )

    record = DailyRecord(
        date=values[0].strip(),
        orders=parse_count(values[1]),
        net_value=parse_amount(values[2]),
        shipping_cost=parse_amount(values[3]),
        total_value=parse_amount(values[4]),
    )
    return ParsedLine(line_number=line_number, raw=line, record=record)


def parse_lines(text: str) -> Iterator[ParsedLine]:
    """Yield one result per data line of an export.

    The first line is treated as a header. Text with fewer than two lines
    yields nothing. Line numbers are 1-based, so the first data line is 2.
    """
    lines = text.strip().split("\n")
    if len(lines) < 2:
        return

    for line_number, line in enumerate(lines[1:], start=2):
        result = parse_line(line, line_number)
        if result.is_skipped:
            logger.debug("Skipping line %d: %s", line_number, result.reason)
        yield result


def parse_records(text: str) -> list[DailyRecord]:
    """Parse an export into records, in input order.

    Skipped lines are dropped silently. Callers that need chronological
    order should pass the result through sort_records().
    """
    return [result.record for result in parse_lines(text) if result.record is not None]


def sort_records(records: Iterable[DailyRecord]) -> list[DailyRecord]:
    """Return records sorted ascending by their canonical date string."""
    return sorted(records, key=lambda record: record.date)


def parse_export(text: str) -> ImportResult:
    """Parse an export and keep an audit trail of skipped lines.

    Returns:
        ImportResult with records sorted by date and the skipped lines in
        input order
    """
    records = []
    skipped = []
    for result in parse_lines(text):
        if result.record is None:
            skipped.append(result)
        else:
            records.append(result.record)

    return ImportResult(records=tuple(sort_records(records)), skipped=tuple(skipped))
