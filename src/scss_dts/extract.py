"""Reduce a token stream to the class names it declares."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from scss_dts.lexer.tokens import Operator, Token, TokenKind

__all__ = [
    "FIELD_ORDERS",
    "ClassSelector",
    "extract_class_names",
    "ordered_class_names",
    "resolve_nesting",
]

FIELD_ORDERS = ("source", "sorted")


def _class_values(tokens: Iterable[Token]) -> Iterable[str]:
    for token in tokens:
        if token.kind is TokenKind.CLASS and token.value:
            yield token.value


def extract_class_names(tokens: Iterable[Token]) -> set[str]:
    """Return every unique class name, nested and top-level alike."""
    return set(_class_values(tokens))


def ordered_class_names(tokens: Iterable[Token], order: str = "source") -> list[str]:
    """Return the unique class names in a reproducible order.

    ``source`` keeps the order of first appearance; ``sorted`` sorts them.
    """
    if order not in FIELD_ORDERS:
        raise ValueError(f"Unknown field order {order!r}; expected one of {FIELD_ORDERS}")
    names = list(dict.fromkeys(_class_values(tokens)))
    if order == "sorted":
        names.sort()
    return names


@dataclass(frozen=True)
class ClassSelector:
    """A class together with the selector of the block it was written in."""

    name: str
    parent: str = ""
    nested: bool = False
    depth: int = 0

    @property
    def qualified(self) -> str:
        if self.parent:
            return f"{self.parent}.{self.name}"
        return self.name


def resolve_nesting(tokens: Iterable[Token]) -> list[ClassSelector]:
    """Attach each class to its enclosing block by tracking brace depth.

    Each ``{`` opens a block owned by the last class seen since the previous
    ``{``, ``}`` or ``;`` (or inherits the enclosing owner when the rule has
    no class, e.g. ``div {``). An ``@media`` line swallows its own ``{``, so the
    MEDIA token opens a block that inherits the enclosing owner. Unbalanced
    closing braces are ignored.
    """
    owners: list[str] = []
    pending: list[str] = []
    selectors: list[ClassSelector] = []

    for token in tokens:
        if token.kind is TokenKind.MEDIA:
            owners.append(owners[-1] if owners else "")
            pending.clear()
            continue

        if token.kind is TokenKind.OPERATOR:
            if token.operator is Operator.LBRACE:
                if pending:
                    owners.append(pending[-1])
                else:
                    owners.append(owners[-1] if owners else "")
                pending.clear()
            elif token.operator is Operator.RBRACE:
                if owners:
                    owners.pop()
                pending.clear()
            elif token.operator is Operator.SEMICOLON:
                pending.clear()
            continue

        if token.kind is not TokenKind.CLASS or not token.value:
            continue

        parent = owners[-1] if owners else ""
        selector = ClassSelector(
            name=token.value,
            parent=parent,
            nested=token.nested,
            depth=len(owners),
        )
        selectors.append(selector)
        pending.append(selector.qualified)

    return selectors
