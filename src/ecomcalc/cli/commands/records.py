"""Imported records listing command."""

import click

from ecomcalc.cli.date_filters import resolve_cli_date_range
from ecomcalc.cli.error_handling import handle_domain_error
from ecomcalc.cli.formatting import echo_records
from ecomcalc.domain.aggregation import filter_records
from ecomcalc.domain.errors import ValidationError
from ecomcalc.domain.record_import import RecordImportService


@click.command("records")
@click.argument("export_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--start-date", help="First day to list (YYYY-MM-DD, 'today' or 'yesterday')")
@click.option("--end-date", help="Last day to list (YYYY-MM-DD, 'today' or 'yesterday')")
@click.pass_context
def list_records(ctx, export_file: str, start_date: str | None, end_date: str | None):
    """List the daily records read from a sales export."""
    service = RecordImportService()

    try:
        result = service.import_file(export_file)
    except (ValidationError, OSError) as e:
        handle_domain_error(ctx, e)

    if result.is_empty:
        click.echo("No records found.")
        return

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        default_range=(result.first_date, result.last_date),
    )
    selected = filter_records(result.records, start, end)

    if not selected:
        click.echo(f"No records between {start} and {end}.")
        return

    echo_records(selected)


def register_commands(cli):
    """Register records command with main CLI."""
    cli.add_command(list_records)
