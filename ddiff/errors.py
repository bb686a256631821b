#!/usr/bin/env python3
"""
ddiff.errors

Exception taxonomy. Core functions raise these; only the CLI turns them into
log lines and exit codes.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class DdiffError(Exception):
    """Base class for every error ddiff raises on purpose."""


class UsageError(DdiffError):
    """Wrong number of positional arguments."""


class InvalidRootError(DdiffError):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"'{self.path}' is not a directory.")


class _PathIOError(DdiffError):
    action = "access"

    def __init__(self, path: Path, cause: Optional[OSError] = None) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = (cause.strerror or str(cause)) if cause is not None else "unknown error"
        super().__init__(f"Failed to {self.action} '{self.path}': {reason}")


class TraversalIOError(_PathIOError):
    """A directory could not be listed or an entry's type could not be determined."""

    action = "walk"


class HashIOError(_PathIOError):
    """A file could not be opened or read while hashing."""

    action = "hash"
