"""CLI helpers for date range resolution."""

import click

from ecomcalc.domain.errors import invalid_date_range
from ecomcalc.utils.date_parser import format_date, parse_date


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    default_range: tuple[str, str] | None = None,
) -> tuple[str, str]:
    """Resolve CLI date options to canonical YYYY-MM-DD bounds.

    A missing bound falls back to the matching side of default_range, or
    to an empty string when there is no default.
    """
    default_start, default_end = default_range or ("", "")
    start = default_start
    end = default_end

    if start_date:
        try:
            start = format_date(parse_date(start_date))
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = format_date(parse_date(end_date))
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start and end and start > end:
        click.echo(f"Error: {invalid_date_range(start, end)}", err=True)
        ctx.exit(1)

    return start, end
