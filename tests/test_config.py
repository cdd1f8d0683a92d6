import importlib

import pytest

import chainlog.config as config

@pytest.mark.parametrize("raw,expected", [
    ("true", True), ("1", True), ("YES", True), ("on", True),
    ("false", False), ("0", False), ("no", False), ("", False),
])
def test_getenv_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("CHAINLOG_TEST_FLAG", raw)
    assert config.getenv_bool("CHAINLOG_TEST_FLAG", not expected) is expected

def test_getenv_bool_default(monkeypatch):
    monkeypatch.delenv("CHAINLOG_TEST_FLAG", raising=False)
    assert config.getenv_bool("CHAINLOG_TEST_FLAG", True) is True

def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_UTC", "false")
    monkeypatch.setenv("DATETIME_FORMAT", "%H:%M")
    try:
        reloaded = importlib.reload(config)
        cfg = reloaded.Config()
        assert cfg.LOG_LEVEL == "DEBUG"
        assert cfg.LOG_UTC is False
        assert cfg.DATETIME_FORMAT == "%H:%M"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
