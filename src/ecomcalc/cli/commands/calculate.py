"""Manual entry calculation command."""

import click

from ecomcalc.cli.formatting import echo_breakdown, echo_inputs, echo_metrics
from ecomcalc.domain.calculator import CalculatorSession
from ecomcalc.domain.metrics import cost_breakdown


@click.command("calculate")
@click.option("--orders", type=float, default=0, help="Number of orders")
@click.option("--net-value", type=float, default=0, help="Net value of goods, VAT included, without shipping")
@click.option("--shipping", type=float, default=0, help="Total shipping cost")
@click.option("--total-value", type=float, default=0, help="Total collected, goods plus shipping")
@click.option("--marketing", type=float, default=0, help="Marketing cost for the period")
@click.option("--daily-fixed", type=float, default=0, help="Fixed expenses per day (rent, salaries, utilities)")
@click.option("--days", type=float, default=1, help="Number of days for the fixed expenses")
@click.option("--breakdown", is_flag=True, help="Show how net revenue splits into costs and profit")
@click.pass_context
def calculate(
    ctx,
    orders: float,
    net_value: float,
    shipping: float,
    total_value: float,
    marketing: float,
    daily_fixed: float,
    days: float,
    breakdown: bool,
):
    """Calculate profitability from manually entered figures.

    Negative entries are treated as zero.
    """
    session = CalculatorSession(vat_rate=ctx.obj["vat_rate"])

    session.set_field("orders_count", orders)
    session.set_field("net_value_with_vat", net_value)
    session.set_field("shipping_cost", shipping)
    session.set_field("total_value_with_shipping", total_value)
    session.set_field("marketing_cost", marketing)
    session.set_field("daily_fixed_expenses", daily_fixed)
    session.set_field("days_count", days)

    echo_inputs(session.inputs)
    click.echo()
    echo_metrics(session.metrics, session.vat_rate)
    if breakdown:
        click.echo()
        echo_breakdown(cost_breakdown(session.inputs, session.metrics))


def register_commands(cli):
    """Register calculate command with main CLI."""
    cli.add_command(calculate)
