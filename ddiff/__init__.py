#!/usr/bin/env python3
"""
ddiff – content-addressed directory diff (package).
"""
__version__ = "0.3.0"

__all__ = [
    "errors",
    "config",
    "models",
    "walker",
    "hashers",
    "progress",
    "report",
    "pipeline",
]
