#!/usr/bin/env python3
from __future__ import annotations
import dataclasses
from pathlib import Path
from typing import Dict, List

# fingerprint (uppercase hex) -> representative path
FingerprintMap = Dict[str, str]


@dataclasses.dataclass(frozen=True)
class DiffEntry:
    fingerprint: str
    path: str


@dataclasses.dataclass(frozen=True)
class DiffResult:
    added: List[DiffEntry]  # present in new, not in old
    removed: List[DiffEntry]  # present in old, not in new

    @property
    def identical(self) -> bool:
        # no one-sided fingerprints means both key sets are equal
        return not self.added and not self.removed


@dataclasses.dataclass(frozen=True)
class WalkResult:
    files: List[Path]
    skipped: int = 0


@dataclasses.dataclass(frozen=True)
class HashResult:
    fingerprints: FingerprintMap
    skipped: int = 0


@dataclasses.dataclass(frozen=True)
class SideSummary:
    label: str  # "first" | "second"
    root: Path
    file_count: int
    unique_count: int
    skipped: int = 0


@dataclasses.dataclass(frozen=True)
class DiffOutcome:
    old: SideSummary
    new: SideSummary
    result: DiffResult
