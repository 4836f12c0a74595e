"""CLI commands: scss-dts tokens / classes -- look inside one stylesheet."""

from __future__ import annotations

import sys

import click

from scss_dts.errors import ScssDtsError
from scss_dts.extract import FIELD_ORDERS, ordered_class_names, resolve_nesting
from scss_dts.lexer.scanner import tokenize
from scss_dts.lexer.tokens import Token
from scss_dts.loader import read_source


def _load_tokens(stylesheet: str) -> list[Token]:
    try:
        return tokenize(read_source(stylesheet), path=stylesheet)
    except ScssDtsError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option("--trivia/--no-trivia", default=False, help="Include whitespace, newline and comment tokens")
def tokens(stylesheet: str, trivia: bool) -> None:
    """Print the token stream of STYLESHEET, one token per line."""
    for token in _load_tokens(stylesheet):
        if token.is_trivia and not trivia:
            continue
        click.echo(str(token))


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option("--order", "field_order", type=click.Choice(FIELD_ORDERS), default="source", show_default=True)
@click.option("--nested", is_flag=True, help="Show classes qualified by their enclosing selector")
def classes(stylesheet: str, field_order: str, nested: bool) -> None:
    """Print the class names declared in STYLESHEET."""
    stream = _load_tokens(stylesheet)
    if nested:
        for selector in resolve_nesting(stream):
            marker = "&" if selector.nested else " "
            click.echo(f"{'  ' * selector.depth}{marker} {selector.qualified}")
        return
    for name in ordered_class_names(stream, field_order):
        click.echo(name)
