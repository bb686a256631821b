#!/usr/bin/env python3
"""
ddiff.pipeline

Walk -> hash -> compare for the two roots.

Each side is fully discovered before its hashing starts, the old side is
processed before the new one, and nothing here exits the process: errors
from ddiff.errors propagate to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from ddiff.config import DiffConfig
from ddiff.errors import InvalidRootError
from ddiff.hashers import hash_files
from ddiff.models import DiffOutcome, FingerprintMap, SideSummary
from ddiff.progress import HashProgress
from ddiff.report import diff_maps
from ddiff.walker import walk_files

logger = logging.getLogger(__name__)


def check_root(path: Union[str, Path]) -> Path:
    p = Path(path)
    if not p.is_dir():
        raise InvalidRootError(p)
    return p


def _scan_side(
    label: str,
    root: Path,
    cfg: DiffConfig,
    progress: Optional[HashProgress],
) -> Tuple[SideSummary, FingerprintMap]:
    walked = walk_files(root, skip_errors=cfg.skip_errors)
    if progress is not None:
        progress.start_side(label, len(walked.files))
    hashed = hash_files(
        walked.files,
        threads=cfg.threads,
        skip_errors=cfg.skip_errors,
        stable_ties=cfg.stable_ties,
        progress=progress,
    )
    # only files that were actually hashed count
    n = len(walked.files) - hashed.skipped
    if n == 0:
        logger.warning("The %s directory has no files contained within it.", label)
    else:
        logger.info("There are %d files in the %s directory.", n, label)
    skipped = walked.skipped + hashed.skipped
    if skipped:
        logger.warning("Skipped %d unreadable entries in the %s directory.", skipped, label)
    logger.debug("%s directory: %d unique fingerprints", label.capitalize(), len(hashed.fingerprints))

    summary = SideSummary(
        label=label,
        root=root,
        file_count=n,
        unique_count=len(hashed.fingerprints),
        skipped=skipped,
    )
    return summary, hashed.fingerprints


def run_diff(
    old_root: Union[str, Path],
    new_root: Union[str, Path],
    cfg: Optional[DiffConfig] = None,
    progress: Optional[HashProgress] = None,
) -> DiffOutcome:
    """
    Compare ``old_root`` against ``new_root`` by content.

    Raises:
        InvalidRootError: either root is not a directory.
        TraversalIOError / HashIOError: I/O failure while walking or hashing
            (unless ``cfg.skip_errors`` is set).
    """
    cfg = cfg or DiffConfig()
    old = check_root(old_root)
    new = check_root(new_root)
    logger.debug("Comparing %s -> %s with %d thread(s)", old, new, cfg.threads)

    old_summary, old_map = _scan_side("first", old, cfg, progress)
    new_summary, new_map = _scan_side("second", new, cfg, progress)

    result = diff_maps(old_map, new_map)
    return DiffOutcome(old=old_summary, new=new_summary, result=result)
