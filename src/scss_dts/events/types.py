"""Event types emitted during a generation run."""

from dataclasses import dataclass

from scss_dts.model.outcome import FileOutcome, RunSummary


@dataclass(frozen=True)
class RunStarted:
    file_count: int
    threads: int


@dataclass(frozen=True)
class FileProcessed:
    outcome: FileOutcome


@dataclass(frozen=True)
class RunCompleted:
    summary: RunSummary
