from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Union

import pytest

Content = Union[bytes, str]


def _write_tree(root: Path, files: Dict[str, Content]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for rel, data in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            data = data.encode("utf-8")
        p.write_bytes(data)
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[str, Dict[str, Content]], Path]:
    """Build a directory under tmp_path from {relative path: content}."""

    def _make(name: str, files: Dict[str, Content]) -> Path:
        return _write_tree(tmp_path / name, files)

    return _make


@pytest.fixture(autouse=True)
def _reset_ddiff_logger():
    """cli.main attaches handlers bound to the captured streams; drop them between tests."""
    yield
    logger = logging.getLogger("ddiff")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
