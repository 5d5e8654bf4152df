"""Error types raised while resolving, parsing and filtering interval files.

Every error is fatal for the run: the CLI reports it on stderr and exits
non-zero. Output already written for earlier files is left in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class VariantFilterError(Exception):
    """Base class for all lastzfilter failures."""


class FileAccessError(VariantFilterError, OSError):
    """Raised when an input path is missing, unreadable or cannot be listed."""

    def __init__(self, message: str, *, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class FormatMismatchError(VariantFilterError, ValueError):
    """Raised when not every non-empty line of a file is an 11-column record."""

    def __init__(self, *, path: str | Path, lines: int, parsed: int) -> None:
        super().__init__(
            "Are you sure this is the right file? "
            f"found {lines} lines but could only process {parsed} ({path})"
        )
        self.path = Path(path)
        self.lines = int(lines)
        self.parsed = int(parsed)


class NumericParseError(VariantFilterError, ValueError):
    """Raised when an integer column does not hold a valid in-range integer."""

    def __init__(
        self,
        *,
        field: str,
        value: str,
        path: Optional[str | Path] = None,
        line_no: Optional[int] = None,
    ) -> None:
        where = ""
        if path is not None:
            where = f" in {path}"
            if line_no is not None:
                where += f" line {line_no}"
        super().__init__(f"Invalid integer for {field}{where}: {value!r}")
        self.field = field
        self.value = value
        self.path = Path(path) if path is not None else None
        self.line_no = line_no
