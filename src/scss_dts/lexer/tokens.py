"""Token model: the closed vocabulary emitted by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kinds of token the scanner can produce."""

    ELEMENT = "element"
    IMPORT = "import"
    INCLUDE = "include"
    CLASS = "class"
    MIXIN = "mixin"
    VARIABLE = "variable"
    CSS_VARIABLE = "css_variable"
    MEDIA = "media"
    PROPERTY = "property"
    COMMENT = "comment"
    OPERATOR = "operator"
    INDENT = "indent"
    END_OF_INPUT = "end_of_input"


class Operator(Enum):
    """Single-character punctuation, plus line breaks."""

    LBRACE = "{"
    RBRACE = "}"
    LPAREN = "("
    RPAREN = ")"
    COLON = ":"
    SEMICOLON = ";"
    NEWLINE = "\n"
    PLUS = "+"


OPERATOR_CHARS: dict[str, Operator] = {
    "{": Operator.LBRACE,
    "}": Operator.RBRACE,
    "(": Operator.LPAREN,
    ")": Operator.RPAREN,
    ":": Operator.COLON,
    ";": Operator.SEMICOLON,
    "+": Operator.PLUS,
}


@dataclass(frozen=True)
class Token:
    """A single scanner output: a kind and the raw lexeme.

    The kind-specific parameters live beside ``value``:

    - ``nested`` for CLASS (``&.child`` versus ``.child``)
    - ``name`` for PROPERTY (``value`` then holds the property value)
    - ``operator`` for OPERATOR
    - ``level`` for INDENT (the number of merged whitespace characters)
    """

    kind: TokenKind
    value: str = ""
    nested: bool = False
    name: str = ""
    operator: Operator | None = None
    level: int = 0

    @property
    def is_class(self) -> bool:
        return self.kind is TokenKind.CLASS

    @property
    def is_trivia(self) -> bool:
        """True for tokens that never carry selector information."""
        if self.kind in (TokenKind.INDENT, TokenKind.COMMENT):
            return True
        return self.kind is TokenKind.OPERATOR and self.operator is Operator.NEWLINE

    def __str__(self) -> str:
        if self.kind is TokenKind.CLASS:
            return f"Class(nested={self.nested}, {self.value!r})"
        if self.kind is TokenKind.PROPERTY:
            return f"Property({self.name!r}) = {self.value!r}"
        if self.kind is TokenKind.OPERATOR and self.operator is not None:
            return f"Operator({self.operator.name})"
        if self.kind is TokenKind.INDENT:
            return f"Indent({self.level})"
        if self.kind is TokenKind.END_OF_INPUT:
            return "EndOfInput"
        return f"{self.kind.name.title().replace('_', '')}({self.value!r})"


# -- constructors -------------------------------------------------------------


def operator(op: Operator) -> Token:
    return Token(kind=TokenKind.OPERATOR, operator=op)


def class_token(name: str, nested: bool = False) -> Token:
    return Token(kind=TokenKind.CLASS, value=name, nested=nested)


def property_token(name: str, value: str = "") -> Token:
    return Token(kind=TokenKind.PROPERTY, value=value, name=name)


def indent(level: int) -> Token:
    return Token(kind=TokenKind.INDENT, level=level)


END_OF_INPUT = Token(kind=TokenKind.END_OF_INPUT)
