#!/usr/bin/env python3
"""
ddiff.config

Run configuration. Built once by the CLI and handed to the pipeline, so the
core modules never read process-wide state themselves.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

LOG_ENV_VAR = "DDIFF_LOG"
DEFAULT_LOG_LEVEL = "INFO"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL", "TRACE": "DEBUG", "OFF": "CRITICAL"}


def _default_threads() -> int:
    return max(1, os.cpu_count() or 1)


@dataclass
class DiffConfig:
    threads: int = field(default_factory=_default_threads)
    # degrade traversal/hash I/O failures to warning-and-skip
    skip_errors: bool = False
    # resolve duplicate content to the smallest path instead of the last finished worker
    stable_ties: bool = False
    # presentation
    live: bool = False
    table: bool = False
    # logging
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None


def normalize_level(name: str) -> str:
    """Return the canonical logging level name for ``name`` or raise ValueError."""
    s = (name or "").strip().upper()
    s = _ALIASES.get(s, s)
    if s not in _LEVELS:
        raise ValueError(f"unknown log level: {name!r} (expected one of {', '.join(_LEVELS)})")
    return s


def resolve_log_level(
    cli_value: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[str, Optional[str]]:
    """
    Pick the effective log level.

    Precedence: explicit CLI value, then the DDIFF_LOG environment variable,
    then INFO. An unknown CLI value raises ValueError; an unknown DDIFF_LOG
    value falls back to INFO and is returned as the second element so the
    caller can warn about it once logging is up.
    """
    if cli_value:
        return normalize_level(cli_value), None
    env = os.environ if environ is None else environ
    raw = env.get(LOG_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_LOG_LEVEL, None
    try:
        return normalize_level(raw), None
    except ValueError:
        return DEFAULT_LOG_LEVEL, raw


def level_number(name: str) -> int:
    return getattr(logging, normalize_level(name))
