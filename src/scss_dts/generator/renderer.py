"""DeclarationRenderer: class names + template -> declaration file."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, StrictUndefined, TemplateError

from scss_dts.errors import RenderError
from scss_dts.generator.templates import DEFAULT_TEMPLATE, ts_key
from scss_dts.model.declaration import DEFAULT_SUFFIX, StylesDeclaration
from scss_dts.model.outcome import FileStatus

logger = logging.getLogger(__name__)


class DeclarationRenderer:
    """Renders StylesDeclarations through one compiled Jinja2 template.

    A renderer holds no per-file state, so one instance can be shared by
    every worker of a run.
    """

    def __init__(self, template_source: str = DEFAULT_TEMPLATE, *, suffix: str = DEFAULT_SUFFIX) -> None:
        self.suffix = suffix
        self._env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters["ts_key"] = ts_key
        try:
            self._template = self._env.from_string(template_source)
        except TemplateError as exc:
            raise RenderError(f"Invalid declaration template: {exc}", cause=exc) from exc

    @classmethod
    def from_file(cls, template_path: str | Path, *, suffix: str = DEFAULT_SUFFIX) -> DeclarationRenderer:
        """Build a renderer from a template file on disk."""
        try:
            source = Path(template_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RenderError(
                f"Could not read template: {exc}", path=str(template_path), cause=exc
            ) from exc
        return cls(source, suffix=suffix)

    def render(self, class_names: Sequence[str], source_path: str = "") -> str:
        """Render the declaration text for ``class_names`` in the given order."""
        try:
            return self._template.render(classes=list(class_names), source_path=source_path)
        except TemplateError as exc:
            raise RenderError(
                f"Template rendering failed: {exc}", path=source_path or None, cause=exc
            ) from exc

    def write(self, declaration: StylesDeclaration) -> FileStatus:
        """Render ``declaration`` and write it next to its source.

        Nothing is written for an empty declaration, or when the file on disk
        already has exactly the rendered content.
        """
        if declaration.is_empty:
            return FileStatus.SKIPPED

        out_path = declaration.output_path(self.suffix)
        content = self.render(declaration.class_names, declaration.source_path)

        try:
            if Path(out_path).read_text(encoding="utf-8") == content:
                logger.debug("Declaration unchanged: %s", out_path)
                return FileStatus.UNCHANGED
        except (OSError, UnicodeDecodeError):
            pass

        _write_atomic(out_path, content, source_path=declaration.source_path)
        return FileStatus.WRITTEN


def _write_atomic(out_path: str, content: str, *, source_path: str) -> None:
    """Write via a temp file in the target directory, then rename into place."""
    directory = os.path.dirname(out_path) or "."
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".scss_dts_", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, out_path)
    except OSError as exc:
        if tmp_path and os.path.exists(tmp_path):
            try:
                os.remove(tmp_path)
            except OSError:
                pass
        raise RenderError(
            f"Could not write {out_path}: {exc}", path=source_path, cause=exc
        ) from exc
