from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from scss_dts.extract import FIELD_ORDERS
from scss_dts.model.declaration import DEFAULT_SUFFIX


@dataclass(frozen=True)
class GeneratorConfig:
    threads: int = 4
    extension: str = "scss"
    suffix: str = DEFAULT_SUFFIX
    field_order: str = "source"  # "source" or "sorted"
    template_path: str | None = None
    ignore_dirs: tuple[str, ...] = ("node_modules", ".yalc", "dist")
    include_hidden: bool = False

    def __post_init__(self) -> None:
        if self.threads < 1:
            raise ValueError(f"threads must be at least 1, got {self.threads}")
        if self.field_order not in FIELD_ORDERS:
            raise ValueError(
                f"field_order must be one of {FIELD_ORDERS}, got {self.field_order!r}"
            )
        if not self.suffix:
            raise ValueError("suffix must not be empty")

    def with_overrides(self, **overrides: object) -> GeneratorConfig:
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)
