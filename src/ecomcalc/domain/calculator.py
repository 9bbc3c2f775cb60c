"""Calculator session domain service.

Holds the one piece of mutable state in the application: the current
aggregate input, together with the imported records and the selected date
window. Every change recomputes the derived metrics and notifies
subscribers synchronously.
"""

import logging
from dataclasses import asdict, replace
from typing import Any, Callable, Iterable

from ecomcalc.domain.aggregation import aggregate
from ecomcalc.domain.entities import (
    INPUT_FIELDS,
    INTEGER_FIELDS,
    AggregateInput,
    DailyRecord,
    DateRange,
    DerivedMetrics,
    ImportResult,
)
from ecomcalc.domain.errors import ValidationError, unknown_input_field
from ecomcalc.domain.metrics import DEFAULT_VAT_RATE, derive
from ecomcalc.domain.record_parser import parse_export, sort_records
from ecomcalc.utils.amount_parser import coerce_non_negative

logger = logging.getLogger(__name__)

Listener = Callable[[AggregateInput, DerivedMetrics], None]


class CalculatorSession:
    """Service for driving the calculator from user actions."""

    def __init__(
        self,
        vat_rate: float = DEFAULT_VAT_RATE,
        inputs: AggregateInput | None = None,
    ):
        """Initialize calculator session.

        Args:
            vat_rate: VAT rate used for every derivation
            inputs: Starting input figures (defaults to all zero, one day)
        """
        self.vat_rate = vat_rate
        self._inputs = inputs or AggregateInput()
        self._records: tuple[DailyRecord, ...] = ()
        self._date_range = DateRange()
        self._metrics = derive(self._inputs, self.vat_rate)
        self._listeners: list[Listener] = []

    @property
    def inputs(self) -> AggregateInput:
        return self._inputs

    @property
    def metrics(self) -> DerivedMetrics:
        return self._metrics

    @property
    def records(self) -> tuple[DailyRecord, ...]:
        return self._records

    @property
    def date_range(self) -> DateRange:
        return self._date_range

    @property
    def has_import(self) -> bool:
        return bool(self._records)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every state change.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_field(self, name: str, value: Any) -> AggregateInput:
        """Set one input field from a form entry.

        Entries are coerced to non-negative numbers. Order and day counts
        are truncated to integers, and the day count never goes below 1.

        Raises:
            ValidationError: If the field name is unknown
        """
        if name not in INPUT_FIELDS:
            raise ValidationError(unknown_input_field(name))

        number: float | int = coerce_non_negative(value)
        if name in INTEGER_FIELDS:
            number = int(number)
        if name == "days_count":
            number = max(1, number)

        self._update(replace(self._inputs, **{name: number}))
        return self._inputs

    def load_records(self, records: Iterable[DailyRecord]) -> bool:
        """Replace the imported records and select their full date span.

        An empty sequence leaves the session untouched.

        Returns:
            True if records were loaded
        """
        ordered = tuple(sort_records(records))
        if not ordered:
            logger.info("No records to load; keeping current inputs")
            return False

        self._records = ordered
        self._date_range = DateRange(start=ordered[0].date, end=ordered[-1].date)
        logger.info(
            "Loaded %d records from %s to %s",
            len(ordered),
            self._date_range.start,
            self._date_range.end,
        )
        self._apply_range()
        return True

    def import_text(self, text: str) -> ImportResult:
        """Parse an export and load its records."""
        result = parse_export(text)
        self.load_records(result.records)
        return result

    def set_date_range(self, start: str, end: str) -> AggregateInput:
        """Select a new inclusive date window and re-aggregate."""
        self._date_range = DateRange(start=start, end=end)
        self._apply_range()
        return self._inputs

    def set_start(self, start: str) -> AggregateInput:
        return self.set_date_range(start, self._date_range.end)

    def set_end(self, end: str) -> AggregateInput:
        return self.set_date_range(self._date_range.start, end)

    def clear_import(self) -> AggregateInput:
        """Discard imported records and reset the window and day count.

        Other input fields keep their current values.
        """
        self._records = ()
        self._date_range = DateRange()
        self._update(replace(self._inputs, days_count=1))
        return self._inputs

    def snapshot(self) -> dict[str, Any]:
        """Return a plain read-only view of the current state."""
        return {
            "inputs": asdict(self._inputs),
            "metrics": asdict(self._metrics),
            "date_range": asdict(self._date_range),
            "record_count": len(self._records),
            "vat_rate": self.vat_rate,
        }

    def _apply_range(self) -> None:
        if not self._records or not self._date_range.is_set:
            return
        totals = aggregate(self._records, self._date_range.start, self._date_range.end)
        self._update(totals.apply_to(self._inputs))

    def _update(self, inputs: AggregateInput) -> None:
        self._inputs = inputs
        self._metrics = derive(inputs, self.vat_rate)
        for listener in list(self._listeners):
            listener(self._inputs, self._metrics)
