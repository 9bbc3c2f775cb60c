"""Main CLI entry point."""

import click

from ecomcalc.cli.error_handling import handle_domain_error
from ecomcalc.config import (
    LOG_LEVEL_ENV,
    VAT_RATE_ENV,
    configure_logging,
    resolve_vat_rate,
)
from ecomcalc.domain.errors import ConfigurationError

# Import and register all commands at module level
from ecomcalc.cli.commands import calculate, import_cmd, records


@click.group()
@click.option(
    "--vat-rate",
    help=f"VAT rate as a fraction, e.g. 0.21 (overrides {VAT_RATE_ENV} environment variable)",
    envvar=VAT_RATE_ENV,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help=f"Logging level (overrides {LOG_LEVEL_ENV} environment variable)",
    envvar=LOG_LEVEL_ENV,
)
@click.pass_context
def cli(ctx, vat_rate: str | None, log_level: str | None):
    """Ecomcalc - E-commerce profitability calculator.

    Derive net revenue, VAT, product cost, gross profit and average order
    value from figures entered by hand or imported from a daily sales export.
    """
    ctx.ensure_object(dict)

    # Resolve configuration only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            configure_logging(log_level)
            ctx.obj["vat_rate"] = resolve_vat_rate(vat_rate)
        except ConfigurationError as e:
            handle_domain_error(ctx, e)


# Register all commands
calculate.register_commands(cli)
import_cmd.register_commands(cli)
records.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
