"""scss_dts model layer -- public type re-exports."""

from scss_dts.model.declaration import DEFAULT_SUFFIX, StylesDeclaration
from scss_dts.model.outcome import FileOutcome, FileStatus, RunSummary

__all__ = [
    # declaration
    "DEFAULT_SUFFIX",
    "StylesDeclaration",
    # outcome
    "FileStatus",
    "FileOutcome",
    "RunSummary",
]
