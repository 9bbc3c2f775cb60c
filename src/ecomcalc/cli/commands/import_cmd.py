"""Sales export import command."""

import click

from ecomcalc.cli.date_filters import resolve_cli_date_range
from ecomcalc.cli.error_handling import handle_domain_error
from ecomcalc.cli.formatting import echo_breakdown, echo_inputs, echo_metrics
from ecomcalc.domain.calculator import CalculatorSession
from ecomcalc.domain.errors import ValidationError
from ecomcalc.domain.metrics import cost_breakdown
from ecomcalc.domain.record_import import RecordImportService


@click.command("import")
@click.argument("export_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--start-date", help="First day to include (YYYY-MM-DD, 'today' or 'yesterday')")
@click.option("--end-date", help="Last day to include (YYYY-MM-DD, 'today' or 'yesterday')")
@click.option("--marketing", type=float, default=0, help="Marketing cost for the selected period")
@click.option("--daily-fixed", type=float, default=0, help="Fixed expenses per day")
@click.option("--show-skipped", is_flag=True, help="List lines that could not be read")
@click.option("--breakdown", is_flag=True, help="Show how net revenue splits into costs and profit")
@click.pass_context
def import_export(
    ctx,
    export_file: str,
    start_date: str | None,
    end_date: str | None,
    marketing: float,
    daily_fixed: float,
    show_skipped: bool,
    breakdown: bool,
):
    """Import a daily sales export and calculate profitability.

    The export is tab-delimited with a header line; each row holds the
    date, order count, net value, shipping cost and total value. Without
    date options the whole imported period is used.
    """
    service = RecordImportService()

    try:
        result = service.import_file(export_file)
    except (ValidationError, OSError) as e:
        handle_domain_error(ctx, e)

    click.echo("Import complete:")
    click.echo(f"  Imported: {result.imported} days")
    click.echo(f"  Skipped: {result.skipped_count} lines")
    if show_skipped:
        for line in result.skipped:
            click.echo(f"    Line {line.line_number}: {line.reason}", err=True)

    if result.is_empty:
        click.echo("No records found.")
        return

    click.echo(f"  Period: {result.first_date} to {result.last_date}")

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        default_range=(result.first_date, result.last_date),
    )

    session = CalculatorSession(vat_rate=ctx.obj["vat_rate"])
    session.load_records(result.records)
    session.set_date_range(start, end)
    session.set_field("marketing_cost", marketing)
    session.set_field("daily_fixed_expenses", daily_fixed)

    click.echo(f"  Selected: {start} to {end}")
    click.echo()
    echo_inputs(session.inputs)
    click.echo()
    echo_metrics(session.metrics, session.vat_rate)
    if breakdown:
        click.echo()
        echo_breakdown(cost_breakdown(session.inputs, session.metrics))


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_export)
