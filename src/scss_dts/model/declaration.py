"""StylesDeclaration: the class names of one stylesheet, ready to render."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SUFFIX = ".d.ts"


@dataclass(frozen=True)
class StylesDeclaration:
    """Ordered class names plus the stylesheet they came from."""

    source_path: str
    class_names: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.class_names

    def output_path(self, suffix: str = DEFAULT_SUFFIX) -> str:
        """The declaration file path: the source path with ``suffix`` appended."""
        return f"{self.source_path}{suffix}"
