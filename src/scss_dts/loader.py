"""Discover stylesheet files under a project root."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from scss_dts.errors import InputError

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_DIRS = ("node_modules", ".yalc", "dist")


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def discover_files(
    root: str | Path,
    extension: str = "scss",
    ignore_dirs: Iterable[str] = DEFAULT_IGNORE_DIRS,
    include_hidden: bool = False,
) -> list[str]:
    """Walk ``root`` and return the sorted paths of ``*.<extension>`` files.

    Symlinks are not followed. Directories named in ``ignore_dirs`` and,
    unless ``include_hidden`` is set, dot-directories are pruned.
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise InputError(f"Not a directory: {root}", path=str(root))

    ignored = set(ignore_dirs)
    suffix = f".{extension.lstrip('.')}"
    found: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        dirnames[:] = [
            d for d in dirnames
            if d not in ignored and (include_hidden or not _is_hidden(d))
        ]
        for filename in filenames:
            if not include_hidden and _is_hidden(filename):
                continue
            if filename.endswith(suffix):
                found.append(os.path.join(dirpath, filename))

    found.sort()
    logger.debug("Discovered %d %s file(s) under %s", len(found), suffix, root)
    return found


def read_source(path: str | Path) -> str:
    """Read a stylesheet as UTF-8 text."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Could not read file: {exc}", path=str(path), cause=exc) from exc
