"""Single-pass SCSS scanner.

Turns stylesheet text into a token stream precise enough to find class
selectors. Dispatch looks at the current character plus one character of
lookahead and hands the cursor to a scanning rule; each rule consumes at
least one character and returns exactly one token.

Example:
    .card { color: $primary; }
    &.active { }
    &:hover { color: red; }
"""

from __future__ import annotations

import string
from typing import Callable, Iterator

from scss_dts.errors import LexicalError
from scss_dts.lexer.cursor import Cursor
from scss_dts.lexer.tokens import (
    END_OF_INPUT,
    OPERATOR_CHARS,
    Operator,
    Token,
    TokenKind,
    class_token,
    indent,
    operator,
    property_token,
)

__all__ = ["Scanner", "tokenize"]

Rule = Callable[[Cursor], Token]

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)

# Class names and CSS custom property names.
NAME_CHARS = _ASCII_ALNUM | frozenset("-_")
# $variables do not take dashes.
VARIABLE_CHARS = _ASCII_ALNUM | frozenset("_")
# Body of @import / @include / @use.
DIRECTIVE_CHARS = _ASCII_ALNUM | frozenset("_-/.\"',() ")
# Punctuation allowed inside a property value, besides alphanumerics.
VALUE_CHARS = frozenset(" -_\"$%(),!+*.\n\t/#")

_LINE_BREAKS = ("\n", "\r")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _take_while(cursor: Cursor, allowed: frozenset[str]) -> str:
    chars: list[str] = []
    while cursor.current is not None and cursor.current in allowed:
        chars.append(cursor.advance())  # type: ignore[arg-type]
    return "".join(chars)


def _unexpected(cursor: Cursor, where: str) -> LexicalError:
    char = cursor.current or ""
    return LexicalError(
        f"Unexpected character {char!r} {where} at line {cursor.line}, column {cursor.column}",
        char=char,
        position=cursor.position,
        line=cursor.line,
        column=cursor.column,
    )


def _is_horizontal_space(char: str) -> bool:
    return char.isspace() and char not in _LINE_BREAKS


def _is_element_char(char: str) -> bool:
    return char.isalnum() or char in "-_ "


def _is_value_char(char: str) -> bool:
    return char.isalnum() or char in VALUE_CHARS


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def scan_newline(cursor: Cursor) -> Token:
    cursor.advance()
    return operator(Operator.NEWLINE)


def scan_indent(cursor: Cursor) -> Token:
    level = 0
    while cursor.current is not None and _is_horizontal_space(cursor.current):
        cursor.advance()
        level += 1
    return indent(level)


def scan_line_comment(cursor: Cursor) -> Token:
    cursor.advance()  # /
    cursor.advance()  # /
    chars: list[str] = []
    while cursor.current is not None and cursor.current not in _LINE_BREAKS:
        chars.append(cursor.advance())  # type: ignore[arg-type]
    return Token(kind=TokenKind.COMMENT, value="".join(chars))


def scan_block_comment(cursor: Cursor) -> Token:
    """Consume ``/* ... */``; an unterminated comment runs to end of input."""
    cursor.advance()  # /
    cursor.advance()  # *
    chars: list[str] = []
    while cursor.current is not None:
        if cursor.current == "*" and cursor.peek() == "/":
            cursor.advance()
            cursor.advance()
            break
        chars.append(cursor.advance())  # type: ignore[arg-type]
    return Token(kind=TokenKind.COMMENT, value="".join(chars))


def scan_operator(cursor: Cursor) -> Token:
    return operator(OPERATOR_CHARS[cursor.advance()])  # type: ignore[index]


def scan_css_variable(cursor: Cursor) -> Token:
    cursor.advance()  # -
    cursor.advance()  # -
    name = _take_while(cursor, NAME_CHARS)
    _skip_assignment(cursor)
    return Token(kind=TokenKind.CSS_VARIABLE, value=name)


def scan_variable(cursor: Cursor) -> Token:
    cursor.advance()  # $
    name = _take_while(cursor, VARIABLE_CHARS)
    _skip_assignment(cursor)
    return Token(kind=TokenKind.VARIABLE, value=name)


def _skip_assignment(cursor: Cursor) -> None:
    # `$name: value;` and `--name: value;` declare a value, not a selector.
    if cursor.current != ":":
        return
    cursor.advance()
    scan_property_value(cursor)


def scan_class(cursor: Cursor) -> Token:
    cursor.advance()  # .
    return class_token(_take_while(cursor, NAME_CHARS))


def scan_nested_class(cursor: Cursor) -> Token:
    """Consume ``&.name`` or ``& .name``.

    The parent selector is not resolved here; see
    :func:`scss_dts.extract.resolve_nesting`.
    """
    cursor.advance()  # &
    if cursor.current == " ":
        cursor.advance()
    if cursor.current != ".":
        # `& span`, `& > a`: a parent reference without a class.
        return Token(kind=TokenKind.ELEMENT, value="&")
    cursor.advance()
    return class_token(_take_while(cursor, NAME_CHARS), nested=True)


def scan_pseudo_class(cursor: Cursor) -> Token:
    cursor.advance()  # &
    cursor.advance()  # :
    return property_token(_take_while(cursor, NAME_CHARS))


def scan_import_or_include(cursor: Cursor) -> Token:
    cursor.advance()  # @
    kind = TokenKind.IMPORT
    if cursor.current == "i" and cursor.peek() == "n":
        kind = TokenKind.INCLUDE
    return Token(kind=kind, value=_take_while(cursor, DIRECTIVE_CHARS).rstrip())


def scan_use(cursor: Cursor) -> Token:
    cursor.advance()  # @
    return Token(kind=TokenKind.INCLUDE, value=_take_while(cursor, DIRECTIVE_CHARS).rstrip())


def scan_mixin_or_media(cursor: Cursor) -> Token:
    cursor.advance()  # @
    if cursor.current == "m" and cursor.peek() == "e":
        while cursor.current is not None and cursor.current not in _LINE_BREAKS:
            cursor.advance()
        return Token(kind=TokenKind.MEDIA, value="media")

    keyword = _take_while(cursor, NAME_CHARS)
    name = ""
    if cursor.current == " ":
        while cursor.current is not None and _is_horizontal_space(cursor.current):
            cursor.advance()
        name = _take_while(cursor, NAME_CHARS)
    return Token(kind=TokenKind.MIXIN, value=name or keyword)


def scan_element_or_property(cursor: Cursor) -> Token:
    """Consume a bare element selector or a ``name: value;`` declaration.

    A colon followed by a space turns the run into a property. A colon
    directly followed by anything else (``a:hover``) stays part of the
    element text.
    """
    chars: list[str] = []
    while cursor.current is not None and _is_element_char(cursor.current):
        chars.append(cursor.current)
        if cursor.peek() == ":":
            cursor.advance()
            cursor.advance()  # :
            if cursor.current == " ":
                cursor.advance()
                name = "".join(chars).strip()
                return property_token(name, scan_property_value(cursor))
            chars.append(":")
            continue
        cursor.advance()
    return Token(kind=TokenKind.ELEMENT, value="".join(chars))


def scan_property_value(cursor: Cursor) -> str:
    """Consume a property value up to and including the terminating ``;``.

    Returns the value without the semicolon, stripped of surrounding
    whitespace. A backslash escapes the character after it.
    """
    chars: list[str] = []
    while cursor.current is not None:
        char = cursor.current
        if char == ";":
            cursor.advance()
            break
        if char == "\\" and cursor.peek() is not None:
            chars.append(cursor.advance())  # type: ignore[arg-type]
            chars.append(cursor.advance())  # type: ignore[arg-type]
            continue
        if not _is_value_char(char):
            raise _unexpected(cursor, "in property value")
        chars.append(cursor.advance())  # type: ignore[arg-type]
    return "".join(chars).strip()


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def select_rule(current: str, nxt: str | None) -> Rule | None:
    """Pick the scanning rule for ``current`` given one character of lookahead.

    Returns None when no rule applies.
    """
    if current in _LINE_BREAKS:
        return scan_newline
    if current.isspace():
        return scan_indent
    if current == "/" and nxt == "/":
        return scan_line_comment
    if current == "/" and nxt == "*":
        return scan_block_comment
    if current in OPERATOR_CHARS:
        return scan_operator
    if current == "-" and nxt == "-":
        return scan_css_variable
    if current == "$":
        return scan_variable
    if current == ".":
        return scan_class
    if current == "&" and nxt in (" ", "."):
        return scan_nested_class
    if current == "&" and nxt == ":":
        return scan_pseudo_class
    if current == "@" and nxt == "i":
        return scan_import_or_include
    if current == "@" and nxt == "u":
        return scan_use
    if current == "@" and nxt == "m":
        return scan_mixin_or_media
    if current.isalpha() or current in "_-":
        return scan_element_or_property
    return None


class Scanner:
    """Produces tokens from one source text, one call at a time.

    Iterating a scanner yields every token up to and including the single
    END_OF_INPUT token.
    """

    def __init__(self, text: str, *, path: str | None = None) -> None:
        self._cursor = Cursor(text)
        self._path = path

    @property
    def position(self) -> int:
        return self._cursor.position

    def next_token(self) -> Token:
        """Scan and return the next token; END_OF_INPUT once exhausted."""
        current = self._cursor.current
        if current is None:
            return END_OF_INPUT

        rule = select_rule(current, self._cursor.peek())
        try:
            if rule is None:
                raise _unexpected(self._cursor, "in selector position")
            return rule(self._cursor)
        except LexicalError as exc:
            if exc.path is None:
                exc.path = self._path
            raise

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END_OF_INPUT:
                return


def tokenize(text: str, *, path: str | None = None) -> list[Token]:
    """Scan ``text`` completely and return its tokens, END_OF_INPUT last."""
    return list(Scanner(text, path=path))
