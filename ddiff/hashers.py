#!/usr/bin/env python3
"""
ddiff.hashers

Content fingerprints. A fingerprint is the xxHash64 of a file's full byte
stream with a fixed seed, rendered as uppercase hex without zero padding, so
the same bytes always give the same string on either side of a comparison
and across runs.
"""

from __future__ import annotations

import concurrent.futures
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import xxhash

from ddiff.errors import HashIOError
from ddiff.models import HashResult
from ddiff.progress import HashProgress

logger = logging.getLogger(__name__)

HASH_SEED = 0
DEFAULT_BLOCK_SIZE = 1 << 20


def format_fingerprint(value: int) -> str:
    return format(value, "X")


def hash_file(path: Union[str, Path], block_size: int = DEFAULT_BLOCK_SIZE) -> str:
    """
    Stream ``path`` through xxHash64 and return its fingerprint.

    Raises:
        HashIOError: the file could not be opened or read.
    """
    p = Path(path)
    h = xxhash.xxh64(seed=HASH_SEED)
    try:
        with p.open("rb") as f:
            for chunk in iter(lambda: f.read(block_size), b""):
                h.update(chunk)
    except OSError as e:
        raise HashIOError(p, e) from e
    return format_fingerprint(h.intdigest())


def _keep_new(current: Optional[str], candidate: str, stable_ties: bool) -> bool:
    if current is None:
        return True
    if stable_ties:
        return candidate < current
    # last finished worker wins
    return True


def hash_files(
    paths: Iterable[Union[str, Path]],
    *,
    threads: int = 8,
    skip_errors: bool = False,
    stable_ties: bool = False,
    progress: Optional[HashProgress] = None,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> HashResult:
    """
    Hash every path in a thread pool and build the fingerprint -> path map.

    Workers only hash; the map is filled on the calling thread as futures
    complete. When several files share a fingerprint, the one whose worker
    finished last is kept, which depends on scheduling. ``stable_ties`` keeps
    the lexicographically smallest path instead.

    Raises:
        HashIOError: a file could not be hashed (only when ``skip_errors`` is False).
    """
    files: List[Path] = [Path(p) for p in paths]
    fingerprints: Dict[str, str] = {}
    skipped = 0
    if not files:
        return HashResult(fingerprints={}, skipped=0)

    workers = max(1, int(threads))
    logger.debug("Hashing %d files with %d thread(s)", len(files), workers)

    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = {ex.submit(hash_file, p, block_size): p for p in files}
        try:
            for fut in concurrent.futures.as_completed(futures):
                path = futures[fut]
                try:
                    digest = fut.result()
                except HashIOError as e:
                    if not skip_errors:
                        raise
                    logger.warning("Skipping unreadable file %s: %s", e.path, e.cause)
                    skipped += 1
                else:
                    candidate = str(path)
                    if _keep_new(fingerprints.get(digest), candidate, stable_ties):
                        fingerprints[digest] = candidate
                if progress is not None:
                    progress.advance()
        except BaseException:
            for fut in futures:
                fut.cancel()
            raise

    return HashResult(fingerprints=fingerprints, skipped=skipped)

