#!/usr/bin/env python3
"""
ddiff.walker

Recursive discovery of regular files under a root directory.

Entries are classified without following symlinks: regular files are
collected, directories are descended into (no depth limit) and everything
else (symlinks, devices, fifos, sockets) is ignored. Output order is
whatever the filesystem hands back and must not be relied upon.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Union

from ddiff.errors import TraversalIOError
from ddiff.models import WalkResult

logger = logging.getLogger(__name__)


def walk_files(root: Union[str, Path], *, skip_errors: bool = False) -> WalkResult:
    """
    Depth-first walk of ``root`` returning every regular file found.

    Args:
        root: Directory to enumerate. The caller has already checked it exists.
        skip_errors: Log and skip unreadable directories / unclassifiable
            entries instead of raising.

    Raises:
        TraversalIOError: a directory could not be listed or an entry's type
            could not be determined (only when ``skip_errors`` is False).
    """
    files: List[Path] = []
    skipped = 0
    stack: List[Path] = [Path(root)]
    dir_count = 0

    while stack:
        current = stack.pop()
        dir_count += 1
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as e:
            if not skip_errors:
                raise TraversalIOError(current, e) from e
            logger.warning("Skipping unreadable directory %s: %s", current, e)
            skipped += 1
            continue

        for entry in entries:
            try:
                if entry.is_file(follow_symlinks=False):
                    files.append(Path(entry.path))
                elif entry.is_dir(follow_symlinks=False):
                    stack.append(Path(entry.path))
                else:
                    logger.debug("Ignoring non-regular entry: %s", entry.path)
            except OSError as e:
                if not skip_errors:
                    raise TraversalIOError(Path(entry.path), e) from e
                logger.warning("Skipping entry with unknown type %s: %s", entry.path, e)
                skipped += 1

    logger.debug("Walked %d directories under %s, found %d files", dir_count, root, len(files))
    return WalkResult(files=files, skipped=skipped)


def list_files(root: Union[str, Path], *, skip_errors: bool = False) -> List[Path]:
    """Return the regular files under ``root`` (see walk_files)."""
    return walk_files(root, skip_errors=skip_errors).files
