"""Per-file processing and the pooled driver for a whole run.

Each stylesheet is read, scanned, reduced to class names and rendered
independently. Failures are caught at the file boundary and reported as a
failed FileOutcome; they never stop sibling files.
"""

from __future__ import annotations

import logging
import math
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Sequence

from scss_dts.config import GeneratorConfig
from scss_dts.errors import ScssDtsError
from scss_dts.events.bus import EventBus
from scss_dts.events.types import FileProcessed, RunCompleted, RunStarted
from scss_dts.extract import ordered_class_names
from scss_dts.generator.renderer import DeclarationRenderer
from scss_dts.lexer.scanner import tokenize
from scss_dts.loader import discover_files, read_source
from scss_dts.model.declaration import StylesDeclaration
from scss_dts.model.outcome import FileOutcome, FileStatus, RunSummary

logger = logging.getLogger(__name__)


def build_renderer(config: GeneratorConfig) -> DeclarationRenderer:
    """Create the renderer a run shares across its workers."""
    if config.template_path:
        return DeclarationRenderer.from_file(config.template_path, suffix=config.suffix)
    return DeclarationRenderer(suffix=config.suffix)


def _failed(path: str, exc: Exception) -> FileOutcome:
    message = exc.message if isinstance(exc, ScssDtsError) else str(exc)
    return FileOutcome(
        path=path,
        status=FileStatus.FAILED,
        error=message,
        error_type=type(exc).__name__,
    )


def process_file(
    path: str,
    renderer: DeclarationRenderer,
    config: GeneratorConfig | None = None,
) -> FileOutcome:
    """Read, scan, extract and render one stylesheet."""
    config = config or GeneratorConfig()
    try:
        source = read_source(path)
        tokens = tokenize(source, path=path)
        names = ordered_class_names(tokens, config.field_order)
        logger.debug("Classes found in %s: %s", path, names)
        declaration = StylesDeclaration(source_path=path, class_names=tuple(names))
        status = renderer.write(declaration)
    except ScssDtsError as exc:
        logger.warning("Failed to process %s: %s", path, exc.message)
        return _failed(path, exc)

    output_path = ""
    if status is not FileStatus.SKIPPED:
        output_path = declaration.output_path(renderer.suffix)
    return FileOutcome(
        path=path,
        status=status,
        class_names=declaration.class_names,
        output_path=output_path,
    )


def chunk_paths(paths: Sequence[str], threads: int) -> list[list[str]]:
    """Split ``paths`` into at most ``threads`` contiguous chunks of equal size."""
    if not paths:
        return []
    size = math.ceil(len(paths) / max(threads, 1))
    return [list(paths[i:i + size]) for i in range(0, len(paths), size)]


def run_files(
    paths: Sequence[str],
    config: GeneratorConfig | None = None,
    *,
    renderer: DeclarationRenderer | None = None,
    bus: EventBus | None = None,
    cancel: threading.Event | None = None,
) -> RunSummary:
    """Process ``paths`` on a fixed-size thread pool.

    Files are statically partitioned into one chunk per worker. Setting
    ``cancel`` stops workers from starting further files; files already in
    progress finish normally and the rest are counted as cancelled.
    """
    config = config or GeneratorConfig()
    renderer = renderer or build_renderer(config)
    chunks = chunk_paths(paths, config.threads)

    def _emit(event: object) -> None:
        if bus is None:
            return
        try:
            bus.emit(event)
        except Exception:
            logger.exception("Event listener failed on %s", type(event).__name__)

    _emit(RunStarted(file_count=len(paths), threads=config.threads))

    def _work(worker_id: int, chunk: list[str], outcomes: list[FileOutcome]) -> int:
        for index, path in enumerate(chunk):
            if cancel is not None and cancel.is_set():
                return len(chunk) - index
            logger.debug("Worker %d processing %s", worker_id, path)
            try:
                outcome = process_file(path, renderer, config)
            except Exception as exc:
                logger.exception("Unexpected error while processing %s", path)
                outcome = _failed(path, exc)
            outcomes.append(outcome)
            _emit(FileProcessed(outcome=outcome))
        logger.debug("Worker %d completed %d file(s)", worker_id, len(chunk))
        return 0

    summary = RunSummary()
    chunk_outcomes: list[list[FileOutcome]] = [[] for _ in chunks]
    with ThreadPoolExecutor(max_workers=config.threads) as pool:
        futures = {
            pool.submit(_work, i, chunk, chunk_outcomes[i]): i
            for i, chunk in enumerate(chunks)
        }
        for future in as_completed(futures):
            index = futures[future]
            outcomes = chunk_outcomes[index]
            try:
                summary.cancelled += future.result()
            except Exception as exc:
                logger.exception("Worker %d stopped early", index)
                reported = {o.path for o in outcomes}
                outcomes.extend(_failed(p, exc) for p in chunks[index] if p not in reported)
            summary.outcomes.extend(outcomes)

    summary.outcomes.sort(key=lambda o: o.path)
    logger.info(
        "Processed %d file(s): %d written, %d unchanged, %d skipped, %d failed",
        summary.total,
        summary.written,
        summary.unchanged,
        summary.skipped,
        summary.failed,
    )
    _emit(RunCompleted(summary=summary))
    return summary


def generate_declarations(
    root: str | Path,
    config: GeneratorConfig | None = None,
    *,
    bus: EventBus | None = None,
    cancel: threading.Event | None = None,
) -> RunSummary:
    """Discover every stylesheet under ``root`` and generate its declaration."""
    config = config or GeneratorConfig()
    paths = discover_files(
        root,
        extension=config.extension,
        ignore_dirs=config.ignore_dirs,
        include_hidden=config.include_hidden,
    )
    logger.info("Found %d .%s file(s), parsing...", len(paths), config.extension)
    return run_files(paths, config, bus=bus, cancel=cancel)
