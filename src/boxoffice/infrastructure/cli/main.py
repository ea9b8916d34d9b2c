import click

from boxoffice.infrastructure.cli.purchase_commands import prices, purchase
from boxoffice.infrastructure.logger_config import DEFAULT_LEVEL, configure_logging


@click.group()
@click.option(
    "--log-level",
    envvar="BOXOFFICE_LOG_LEVEL",
    default=DEFAULT_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Minimum level of log messages written to stderr.",
)
def cli(log_level: str) -> None:
    """Box office — cinema ticket purchases"""
    configure_logging(log_level)


# Register subcommands
cli.add_command(prices)
cli.add_command(purchase)
