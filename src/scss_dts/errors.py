"""Error hierarchy for scss-dts.

Every error raised while processing one stylesheet is file-scoped: the
processor catches it at the file boundary and turns it into a failed
outcome, so sibling files keep going.
"""
from __future__ import annotations


class ScssDtsError(Exception):
    """Base error for all scss_dts errors."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class InputError(ScssDtsError):
    """A source file could not be read or decoded."""


class LexicalError(ScssDtsError):
    """The scanner met a character it has no rule for."""

    def __init__(
        self,
        message: str,
        *,
        char: str = "",
        position: int = 0,
        line: int = 1,
        column: int = 1,
        path: str | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.char = char
        self.position = position
        self.line = line
        self.column = column


class RenderError(ScssDtsError):
    """Rendering the declaration template or writing it to disk failed."""
