import logging

import rich_click as click

from .settings import CONTEXT_SETTINGS
from .ls import ls
from .values import values
from .convert import convert


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Log level of the enumkit library.",
)
def cli(log_level):
    """Inspect the enum registry of a Python application"""
    logging.basicConfig(format='%(asctime)s [%(levelname)s] [%(name)s] %(message)s')
    logging.getLogger("enumkit").setLevel(log_level.upper())


cli.add_command(ls)
cli.add_command(values)
cli.add_command(convert)

if __name__ == "__main__":
    cli()
