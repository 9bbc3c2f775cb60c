"""Domain model entities for ecomcalc.

These are pure data classes representing the figures the calculator works
with. Imported daily records are never mutated; the aggregate input is
replaced wholesale on every edit, and derived metrics are recomputed from it.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class DailyRecord:
    """One calendar day of sales activity from an import file."""

    date: str
    orders: int
    net_value: float
    shipping_cost: float
    total_value: float


@dataclass(frozen=True)
class AggregateInput:
    """Rolled-up figures for a single period, entered by hand or imported."""

    orders_count: int = 0
    net_value_with_vat: float = 0.0
    shipping_cost: float = 0.0
    total_value_with_shipping: float = 0.0
    marketing_cost: float = 0.0
    daily_fixed_expenses: float = 0.0
    days_count: int = 1


INPUT_FIELDS = (
    "orders_count",
    "net_value_with_vat",
    "shipping_cost",
    "total_value_with_shipping",
    "marketing_cost",
    "daily_fixed_expenses",
    "days_count",
)

INTEGER_FIELDS = frozenset({"orders_count", "days_count"})


@dataclass(frozen=True)
class DerivedMetrics:
    """Financial metrics derived from an AggregateInput."""

    net_value_ex_vat: float
    product_cost: float
    total_fixed_costs: float
    gross_profit: float
    vat_amount: float
    profit_margin: float
    average_order_value: float


@dataclass(frozen=True)
class RangeAggregate:
    """Sums of imported records over an inclusive date window."""

    orders_count: int
    net_value_with_vat: float
    shipping_cost: float
    total_value_with_shipping: float
    days_count: int

    def apply_to(self, inputs: AggregateInput) -> AggregateInput:
        """Merge into an existing input, keeping the manually entered costs."""
        return replace(
            inputs,
            orders_count=self.orders_count,
            net_value_with_vat=self.net_value_with_vat,
            shipping_cost=self.shipping_cost,
            total_value_with_shipping=self.total_value_with_shipping,
            days_count=self.days_count,
        )


@dataclass(frozen=True)
class DateRange:
    """Inclusive date window in canonical YYYY-MM-DD form."""

    start: str = ""
    end: str = ""

    @property
    def is_set(self) -> bool:
        return bool(self.start) and bool(self.end)


@dataclass(frozen=True)
class ParsedLine:
    """Outcome of parsing one data line: a record, or the reason it was skipped."""

    line_number: int
    raw: str
    record: Optional[DailyRecord] = None
    reason: Optional[str] = None

    @property
    def is_skipped(self) -> bool:
        return self.record is None


@dataclass(frozen=True)
class ImportResult:
    """Records accepted from an export, sorted by date, plus skipped lines."""

    records: tuple[DailyRecord, ...] = ()
    skipped: tuple[ParsedLine, ...] = ()

    @property
    def imported(self) -> int:
        return len(self.records)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def first_date(self) -> Optional[str]:
        return self.records[0].date if self.records else None

    @property
    def last_date(self) -> Optional[str]:
        return self.records[-1].date if self.records else None


@dataclass(frozen=True)
class CostSlice:
    """A named share of net revenue used by breakdown displays."""

    name: str
    value: float


@dataclass(frozen=True)
class CostBreakdown:
    """Chart-ready view of where net revenue goes."""

    slices: tuple[CostSlice, ...]
    bars: tuple[CostSlice, ...]
    profit_share: Optional[float] = None
