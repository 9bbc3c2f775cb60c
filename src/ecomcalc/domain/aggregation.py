"""Range aggregation of imported daily records."""

import logging
from typing import Sequence

from ecomcalc.domain.entities import DailyRecord, RangeAggregate
from ecomcalc.utils.date_parser import parse_calendar_date

logger = logging.getLogger(__name__)


def count_days(start: str, end: str) -> int:
    """Return the inclusive number of calendar days between two dates.

    The order of the bounds does not matter. Bounds that are not calendar
    dates count as a single day.
    """
    try:
        start_date = parse_calendar_date(start)
        end_date = parse_calendar_date(end)
    except ValueError:
        logger.debug("Cannot count days between %r and %r", start, end)
        return 1
    return abs((end_date - start_date).days) + 1


def filter_records(
    records: Sequence[DailyRecord], start: str, end: str
) -> list[DailyRecord]:
    """Select records dated within [start, end], inclusive.

    Canonical date strings sort chronologically, so plain string
    comparison is enough.
    """
    return [record for record in records if start <= record.date <= end]


def aggregate(records: Sequence[DailyRecord], start: str, end: str) -> RangeAggregate:
    """Sum imported records over an inclusive date window.

    The window is always recomputed from the full record sequence, and
    records are selected by comparing date strings as imported. An
    inverted window (start after end) or one with an empty bound selects
    nothing, giving zero sums. The day count is derived from the bounds
    and never drops below 1; bounds that are not calendar dates count as
    a single day.

    Args:
        records: Records sorted ascending by date
        start: Inclusive lower bound, YYYY-MM-DD
        end: Inclusive upper bound, YYYY-MM-DD

    Returns:
        RangeAggregate with the four summed fields and the day count
    """
    days_count = count_days(start, end)

    if not start or not end or start > end:
        selected: list[DailyRecord] = []
    else:
        selected = filter_records(records, start, end)

    logger.debug(
        "Aggregated %d of %d records between %s and %s over %d days",
        len(selected),
        len(records),
        start,
        end,
        days_count,
    )

    return RangeAggregate(
        orders_count=sum(record.orders for record in selected),
        net_value_with_vat=sum((record.net_value for record in selected), 0.0),
        shipping_cost=sum((record.shipping_cost for record in selected), 0.0),
        total_value_with_shipping=sum((record.total_value for record in selected), 0.0),
        days_count=days_count,
    )
