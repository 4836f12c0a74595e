"""scss-dts CLI entry point: Click group with subcommands."""

import logging

import click

from scss_dts import __version__

LOG_LEVELS = ("debug", "info", "warning", "error")


def configure_logging(level: str) -> None:
    """Send scss_dts log records to stderr at the requested level."""
    logging.basicConfig(format="[%(levelname)s] %(message)s")
    logging.getLogger("scss_dts").setLevel(level.upper())


@click.group()
@click.version_option(version=__version__, prog_name="scss-dts")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="info",
    envvar="SCSS_DTS_LOG_LEVEL",
    show_default=True,
    help="Logging level",
)
def cli(log_level: str) -> None:
    """scss-dts - generate TypeScript declarations for SCSS module classes."""
    configure_logging(log_level)


# Import and register subcommands
from scss_dts.cli.generate import generate  # noqa: E402
from scss_dts.cli.inspect import classes, tokens  # noqa: E402

cli.add_command(generate)
cli.add_command(tokens)
cli.add_command(classes)
