"""CLI command: scss-dts generate -- write a .d.ts next to every stylesheet."""

from __future__ import annotations

import sys

import click

from scss_dts.config import GeneratorConfig
from scss_dts.errors import ScssDtsError
from scss_dts.events.bus import EventBus
from scss_dts.events.types import FileProcessed
from scss_dts.extract import FIELD_ORDERS
from scss_dts.model.outcome import FileStatus
from scss_dts.processor import generate_declarations


def _report(event: FileProcessed) -> None:
    outcome = event.outcome
    if outcome.status is FileStatus.FAILED:
        click.echo(f"Error generating declaration for {outcome.path}: {outcome.error}", err=True)
    elif outcome.status is FileStatus.WRITTEN:
        click.echo(f"  wrote {outcome.output_path}")


@click.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option("--threads", "-t", default=4, show_default=True, type=click.IntRange(min=1), help="Number of worker threads")
@click.option("--template", "template_path", type=click.Path(exists=True, dir_okay=False), default=None, help="Custom Jinja2 declaration template")
@click.option("--suffix", default=None, help="Declaration file suffix (default: .d.ts)")
@click.option("--order", "field_order", type=click.Choice(FIELD_ORDERS), default=None, help="Field order in the declaration")
@click.option("--extension", default=None, help="Stylesheet extension to look for (default: scss)")
@click.option("--include-hidden", is_flag=True, help="Descend into hidden directories")
def generate(
    path: str,
    threads: int,
    template_path: str | None,
    suffix: str | None,
    field_order: str | None,
    extension: str | None,
    include_hidden: bool,
) -> None:
    """Generate declaration files for every stylesheet under PATH.

    Exits with code 1 if any file failed.
    """
    try:
        config = GeneratorConfig().with_overrides(
            threads=threads,
            template_path=template_path,
            suffix=suffix,
            field_order=field_order,
            extension=extension,
            include_hidden=include_hidden or None,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    bus = EventBus()
    bus.subscribe(FileProcessed, _report)

    try:
        summary = generate_declarations(path, config, bus=bus)
    except ScssDtsError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo()
    click.echo(
        f"Summary: {summary.total} file(s), {summary.written} written, "
        f"{summary.unchanged} unchanged, {summary.skipped} without classes, "
        f"{summary.failed} failed"
    )
    sys.exit(0 if summary.ok else 1)
