"""Text rendering helpers for CLI output."""

from typing import Sequence

import click

from ecomcalc.domain.entities import (
    AggregateInput,
    CostBreakdown,
    DailyRecord,
    DerivedMetrics,
)

CURRENCY = "RON"
LABEL_WIDTH = 32
VALUE_WIDTH = 20


def format_currency(value: float) -> str:
    """Format a monetary amount, e.g. "1,234.56 RON"."""
    return f"{value:,.2f} {CURRENCY}"


def format_percent(value: float, digits: int = 1) -> str:
    return f"{value:.{digits}f}%"


def _echo_row(label: str, value: str, indent: int = 2) -> None:
    click.echo(f"{' ' * indent}{label:<{LABEL_WIDTH}} {value:>{VALUE_WIDTH}}")


def echo_inputs(inputs: AggregateInput) -> None:
    """Display the input figures the metrics were derived from."""
    click.echo("Inputs")
    _echo_row("Orders", str(inputs.orders_count))
    _echo_row("Net value (incl. VAT)", format_currency(inputs.net_value_with_vat))
    _echo_row("Shipping cost", format_currency(inputs.shipping_cost))
    _echo_row("Total value (incl. shipping)", format_currency(inputs.total_value_with_shipping))
    _echo_row("Marketing cost", format_currency(inputs.marketing_cost))
    _echo_row("Daily fixed expenses", format_currency(inputs.daily_fixed_expenses))
    _echo_row("Days", str(inputs.days_count))


def echo_metrics(metrics: DerivedMetrics, vat_rate: float) -> None:
    """Display derived metrics; a negative gross profit is labelled as a loss."""
    click.echo("Results")
    _echo_row("Net value (ex VAT)", format_currency(metrics.net_value_ex_vat))
    _echo_row(f"VAT ({vat_rate * 100:g}%)", format_currency(metrics.vat_amount))
    _echo_row("Product cost (50% of net)", format_currency(metrics.product_cost))
    _echo_row("Total fixed costs", format_currency(metrics.total_fixed_costs))
    label = "Gross profit" if metrics.gross_profit >= 0 else "Gross loss"
    _echo_row(label, format_currency(metrics.gross_profit))
    _echo_row("Profit margin", format_percent(metrics.profit_margin))
    _echo_row("Average order value", format_currency(metrics.average_order_value))


def echo_breakdown(breakdown: CostBreakdown) -> None:
    """Display the share of net revenue taken by each cost.

    Without net revenue there is nothing to share out, so only a notice
    is shown.
    """
    click.echo("Cost distribution")
    if breakdown.profit_share is None:
        click.echo("  No net revenue to distribute.")
        return
    total = sum(item.value for item in breakdown.slices)
    for item in breakdown.slices:
        share = item.value / total * 100 if total > 0 else 0.0
        _echo_row(item.name, f"{format_currency(item.value)} {share:5.1f}%")
    if breakdown.profit_share is not None:
        _echo_row("Profit share of net revenue", format_percent(breakdown.profit_share, 0))


def echo_records(records: Sequence[DailyRecord]) -> None:
    """Display imported daily records as a table with a totals line."""
    header = f"{'Date':<12} {'Orders':>8} {'Net value':>16} {'Shipping':>14} {'Total':>16}"
    click.echo(header)
    click.echo("-" * len(header))
    for record in records:
        click.echo(
            f"{record.date:<12} {record.orders:>8} {record.net_value:>16,.2f} "
            f"{record.shipping_cost:>14,.2f} {record.total_value:>16,.2f}"
        )
    click.echo("-" * len(header))
    click.echo(
        f"{'Total':<12} {sum(r.orders for r in records):>8} "
        f"{sum(r.net_value for r in records):>16,.2f} "
        f"{sum(r.shipping_cost for r in records):>14,.2f} "
        f"{sum(r.total_value for r in records):>16,.2f}"
    )
