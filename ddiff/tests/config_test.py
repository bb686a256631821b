import pytest

from ddiff.config import DiffConfig, level_number, normalize_level, resolve_log_level


def test_defaults():
    cfg = DiffConfig()
    assert cfg.threads >= 1
    assert cfg.log_level == "INFO"
    assert not cfg.skip_errors and not cfg.stable_ties


def test_env_overrides_default():
    assert resolve_log_level(None, {"DDIFF_LOG": "debug"}) == ("DEBUG", None)


def test_cli_overrides_env():
    assert resolve_log_level("error", {"DDIFF_LOG": "debug"}) == ("ERROR", None)
    assert resolve_log_level("error", {"DDIFF_LOG": "nonsense"}) == ("ERROR", None)


def test_blank_env_falls_back_to_info():
    assert resolve_log_level(None, {"DDIFF_LOG": "  "}) == ("INFO", None)
    assert resolve_log_level(None, {}) == ("INFO", None)


def test_unknown_env_value_falls_back_and_is_reported():
    assert resolve_log_level(None, {"DDIFF_LOG": "mycrate=debug"}) == ("INFO", "mycrate=debug")


def test_unknown_cli_value_raises():
    with pytest.raises(ValueError):
        resolve_log_level("chatty", {})


@pytest.mark.parametrize("raw, expected", [
    ("warn", "WARNING"),
    ("trace", "DEBUG"),
    ("off", "CRITICAL"),
    ("Fatal", "CRITICAL"),
])
def test_aliases(raw, expected):
    assert normalize_level(raw) == expected


def test_level_number_and_unknown():
    assert level_number("fatal") == 50
    assert level_number("trace") == 10
    with pytest.raises(ValueError):
        normalize_level("loud")
