import logging

from rich.console import Console

from ddiff.models import DiffEntry, DiffResult
from ddiff.report import (
    ADDED_HEADER,
    IDENTICAL_MSG,
    REMOVED_HEADER,
    build_table,
    diff_maps,
    log_report,
    render_table,
)


def test_same_keys_are_identical_even_with_other_paths():
    old = {"A1": "/old/x.txt", "B2": "/old/y.txt"}
    new = {"B2": "/new/renamed.txt", "A1": "/new/deep/x.txt"}
    result = diff_maps(old, new)
    assert result.identical
    assert result.added == [] and result.removed == []


def test_identity_follows_the_entries():
    assert DiffResult(added=[], removed=[]).identical
    assert not DiffResult(added=[DiffEntry("A1", "x")], removed=[]).identical
    assert not DiffResult(added=[], removed=[DiffEntry("B2", "y")]).identical


def test_asymmetric_difference():
    old = {"A1": "/old/a", "C3": "/old/c"}
    new = {"A1": "/new/a", "D4": "/new/d"}
    result = diff_maps(old, new)
    assert not result.identical
    assert result.added == [DiffEntry("D4", "/new/d")]
    assert result.removed == [DiffEntry("C3", "/old/c")]


def test_log_report_identical(caplog):
    caplog.set_level(logging.INFO, logger="ddiff")
    log_report(diff_maps({"A": "a"}, {"A": "b"}))
    assert caplog.messages == [IDENTICAL_MSG]


def test_log_report_line_format(caplog):
    caplog.set_level(logging.INFO, logger="ddiff")
    log_report(diff_maps({"A": "a", "OLD": "gone.txt"}, {"A": "a", "NEW": "fresh.txt"}))
    assert caplog.messages == [
        ADDED_HEADER,
        "fresh.txt, Sea: NEW",
        REMOVED_HEADER,
        "gone.txt, Hash: OLD",
    ]


def test_table_rows_and_caption():
    result = diff_maps({"OLD": "gone.txt"}, {"NEW": "fresh.txt", "NEW2": "more.txt"})
    table = build_table(result)
    assert table.row_count == 3
    assert table.caption == "2 new only, 1 old only"


def test_render_table_prints_paths():
    console = Console(record=True, width=120)
    render_table(diff_maps({}, {"ABC": "fresh.txt"}), console=console)
    out = console.export_text()
    assert "fresh.txt" in out
    assert "ABC" in out
