"""Outcome model: per-file results and the aggregate of a run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FileStatus(Enum):
    """What happened to one stylesheet."""

    WRITTEN = "written"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class FileOutcome:
    """Result of processing a single stylesheet."""

    path: str
    status: FileStatus
    class_names: tuple[str, ...] = ()
    output_path: str = ""
    error: str = ""
    error_type: str = ""

    @property
    def succeeded(self) -> bool:
        """True unless the file failed."""
        return self.status is not FileStatus.FAILED

    @property
    def failed(self) -> bool:
        return self.status is FileStatus.FAILED


@dataclass
class RunSummary:
    """Outcomes of every file a run picked up, plus the ones it never started."""

    outcomes: list[FileOutcome] = field(default_factory=list)
    cancelled: int = 0

    def _count(self, status: FileStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def written(self) -> int:
        return self._count(FileStatus.WRITTEN)

    @property
    def unchanged(self) -> int:
        return self._count(FileStatus.UNCHANGED)

    @property
    def skipped(self) -> int:
        return self._count(FileStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(FileStatus.FAILED)

    @property
    def failures(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if o.failed]

    @property
    def ok(self) -> bool:
        return self.failed == 0
