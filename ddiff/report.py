#!/usr/bin/env python3
"""
ddiff.report

Key-set comparison of two fingerprint maps and its presentation: INFO log
lines for the normal run, a rich table on request.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import DiffEntry, DiffResult

logger = logging.getLogger(__name__)

IDENTICAL_MSG = (
    "The files contained within these directories are identical, "
    "though the directory structure may be different."
)
ADDED_HEADER = "The following files are present in second directory and not in the first."
REMOVED_HEADER = "The following files are present in first directory and not in the second."


def _one_sided(src: Mapping[str, str], other: Mapping[str, str]) -> List[DiffEntry]:
    out = [DiffEntry(fingerprint=k, path=v) for k, v in src.items() if k not in other]
    out.sort(key=lambda e: (e.path, e.fingerprint))
    return out


def diff_maps(old: Mapping[str, str], new: Mapping[str, str]) -> DiffResult:
    """
    Compare two fingerprint maps by key only.

    Paths are never compared, so identical content laid out differently is
    reported as identical. Fingerprints present on both sides are not reported.
    """
    if old.keys() == new.keys():
        return DiffResult(added=[], removed=[])
    return DiffResult(added=_one_sided(new, old), removed=_one_sided(old, new))


def format_added(entry: DiffEntry) -> str:
    return f"{entry.path}, Sea: {entry.fingerprint}"


def format_removed(entry: DiffEntry) -> str:
    return f"{entry.path}, Hash: {entry.fingerprint}"


def report_lines(result: DiffResult) -> Iterable[str]:
    if result.identical:
        yield IDENTICAL_MSG
        return
    yield ADDED_HEADER
    for e in result.added:
        yield format_added(e)
    yield REMOVED_HEADER
    for e in result.removed:
        yield format_removed(e)


def log_report(result: DiffResult, log: Optional[logging.Logger] = None) -> None:
    """Emit the diff as INFO lines."""
    log = log or logger
    for line in report_lines(result):
        log.info(line)


def build_table(result: DiffResult) -> Table:
    table = Table(title="Directory diff", expand=False, padding=(0, 1))
    table.add_column("Change", justify="left", no_wrap=True)
    table.add_column("Fingerprint", justify="right", no_wrap=True)
    table.add_column("Path", justify="left")
    for e in result.added:
        table.add_row(Text("+ new only", style="green"), e.fingerprint, e.path)
    for e in result.removed:
        table.add_row(Text("- old only", style="red"), e.fingerprint, e.path)
    if result.identical:
        table.caption = "identical content"
    else:
        table.caption = f"{len(result.added)} new only, {len(result.removed)} old only"
    return table


def render_table(result: DiffResult, console: Optional[Console] = None) -> None:
    """Print the diff as a rich table."""
    (console or Console()).print(build_table(result))
