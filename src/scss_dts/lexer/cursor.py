"""Cursor: the scanner's owned, forward-only view over one source text."""

from __future__ import annotations


class Cursor:
    """Read-only position over an immutable source string.

    Holds the current character, offers exactly one character of
    lookahead, and only ever moves forward.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0
        self._line = 1
        self._column = 1

    @property
    def position(self) -> int:
        return self._position

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def current(self) -> str | None:
        """The character under the cursor, or None at end of input."""
        if self._position < len(self._text):
            return self._text[self._position]
        return None

    def peek(self) -> str | None:
        """The character after the current one, or None."""
        nxt = self._position + 1
        if nxt < len(self._text):
            return self._text[nxt]
        return None

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._text)

    def advance(self) -> str | None:
        """Consume the current character and return it."""
        char = self.current
        if char is None:
            return None
        self._position += 1
        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, current={self.current!r})"
