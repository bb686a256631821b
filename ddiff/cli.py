#!/usr/bin/env python3
"""
ddiff.cli – CLI entrypoint

Report which files exist (by content) in only one of two directory trees,
regardless of file names or layout.

Examples:

  # Plain comparison
  ddiff old_backup/ new_backup/

  # Keep going past unreadable files, show a progress bar and a summary table
  ddiff /mnt/a /mnt/b -s -L --table -t 16

  # Quieter output (also settable with DDIFF_LOG=warning)
  ddiff a/ b/ --log-level WARNING
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

# NOTE: absolute imports so the CLI works whether installed or run from source
from ddiff.config import LOG_ENV_VAR, DiffConfig, level_number, resolve_log_level
from ddiff.errors import DdiffError, HashIOError, InvalidRootError, TraversalIOError, UsageError
from ddiff.pipeline import run_diff
from ddiff.progress import HashProgress
from ddiff.report import log_report, render_table

PROG = "ddiff"


def _usage_banner() -> str:
    rule = "=" * 30
    return "\n".join([
        rule,
        f"{PROG}: diff directories",
        f"Syntax: {PROG} <old directory> <new directory>",
        rule,
    ])


def _setup_logging(log_file: Optional[Path] = None, log_level: str = "INFO") -> logging.Logger:
    """
    Configure the 'ddiff' logger: console handler on stderr, plus an optional
    detailed file handler.

    Raises:
        OSError: the log file or its directory could not be created.
    """
    logger = logging.getLogger("ddiff")
    logger.setLevel(level_number(log_level))

    # Clear any existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(funcName)-20s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    return logger


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Compare two directory trees by file content.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    # Counted by hand so a wrong count gets the usage banner and exit code 1.
    p.add_argument("directories", nargs="*", metavar="DIR", help="<old directory> <new directory>")
    p.add_argument("-t", "--threads", type=int, default=None,
                   help="Hashing worker threads (default: CPU count)")
    p.add_argument("-s", "--skip-errors", action="store_true",
                   help="Warn and skip unreadable directories/files instead of aborting")
    p.add_argument("--stable-ties", action="store_true",
                   help="For duplicate content keep the lexicographically smallest path")
    p.add_argument("-L", "--live", action="store_true", help="Show a live hashing progress bar")
    p.add_argument("--table", action="store_true", help="Also print the differences as a table")
    p.add_argument("--log-level", type=str, default=None,
                   help="DEBUG, INFO, WARNING or ERROR (default: $DDIFF_LOG or INFO)")
    p.add_argument("--log-file", type=str, default=None, help="Also write a detailed log to this file")
    return p.parse_args(argv)


def _validate_args(args: argparse.Namespace) -> None:
    n = len(args.directories)
    if n < 2:
        raise UsageError("Not enough arguments. Exiting...")
    if n > 2:
        raise UsageError("Too many arguments. Exiting...")
    if args.threads is not None and args.threads < 1:
        raise UsageError("Thread count must be positive.")


def _build_config(args: argparse.Namespace, log_level: str, log_file: Optional[Path]) -> DiffConfig:
    cfg = DiffConfig(
        skip_errors=args.skip_errors,
        stable_ties=args.stable_ties,
        live=args.live,
        table=args.table,
        log_level=log_level,
        log_file=log_file,
    )
    if args.threads is not None:
        cfg.threads = args.threads
    return cfg


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        log_level, rejected_env = resolve_log_level(args.log_level)
    except ValueError as e:
        print(f"{PROG}: error: {e}", file=sys.stderr)
        return 1

    log_file = Path(args.log_file).expanduser() if args.log_file else None
    try:
        logger = _setup_logging(log_file, log_level)
    except OSError as e:
        print(f"{PROG}: error: cannot open log file {log_file}: {e}", file=sys.stderr)
        return 1
    if rejected_env:
        logger.warning("Ignoring unrecognized %s value %r, using %s.", LOG_ENV_VAR, rejected_env, log_level)

    try:
        _validate_args(args)
    except UsageError as e:
        print(_usage_banner())
        logger.error(str(e))
        return 1

    cfg = _build_config(args, log_level, log_file)
    old_dir, new_dir = (Path(d) for d in args.directories)

    try:
        with HashProgress(enable=cfg.live) as progress:
            outcome = run_diff(old_dir, new_dir, cfg, progress=progress)
    except InvalidRootError as e:
        logger.error(str(e))
        return 1
    except (TraversalIOError, HashIOError) as e:
        logger.error(str(e))
        logger.debug("I/O failure detail", exc_info=True)
        return 1
    except DdiffError as e:
        logger.error(str(e))
        return 1

    log_report(outcome.result, logger)
    if cfg.table:
        render_table(outcome.result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
