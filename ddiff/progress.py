#!/usr/bin/env python3
"""
ddiff.progress

Rich-powered progress bar for the hashing stage. With ``enable=False`` every
method is a no-op so the pipeline can call it unconditionally.
"""

from __future__ import annotations

import threading
from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)


class HashProgress:
    """One progress task per compared side, advanced once per hashed file."""

    def __init__(self, enable: bool = True, console: Optional[Console] = None) -> None:
        self.enable = enable
        self.completed = 0
        self.total = 0
        self._lock = threading.Lock()
        self._task: Optional[TaskID] = None
        self._progress: Optional[Progress] = None
        if enable:
            self._progress = Progress(
                TextColumn("[bold]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                TimeElapsedColumn(),
                TimeRemainingColumn(),
                console=console or Console(stderr=True),
                transient=True,
            )

    def __enter__(self) -> "HashProgress":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()

    def start(self) -> None:
        if self._progress is not None:
            self._progress.start()

    def stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()

    def start_side(self, label: str, total: int) -> None:
        with self._lock:
            self.completed = 0
            self.total = total
            if self._progress is not None:
                if self._task is not None:
                    self._progress.remove_task(self._task)
                self._task = self._progress.add_task(f"Hashing {label} directory", total=total)

    def advance(self, n: int = 1) -> None:
        with self._lock:
            self.completed += n
            if self._progress is not None and self._task is not None:
                self._progress.advance(self._task, n)
