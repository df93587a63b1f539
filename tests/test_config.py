"""Tests for environment-driven configuration."""

import importlib

import pytest

from swimlane import config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key in ("SWIMLANE_LOG_LEVEL", "SWIMLANE_LOG_FORMAT", "SWIMLANE_STRICT", "SWIMLANE_DATE_FORMAT"):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:
    def test_defaults(self, reload_config):
        cfg = reload_config()
        assert cfg.LOG_LEVEL == "INFO"
        assert cfg.STRICT_INTERVALS is False
        assert cfg.DATE_DISPLAY_FORMAT == "%m-%d"
        assert cfg.log_json_format() is None

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_strict_truthy(self, reload_config, value):
        assert reload_config(SWIMLANE_STRICT=value).STRICT_INTERVALS is True

    def test_strict_falsy(self, reload_config):
        assert reload_config(SWIMLANE_STRICT="no").STRICT_INTERVALS is False

    @pytest.mark.parametrize("fmt,expected", [("json", True), ("HUMAN", False), ("auto", None)])
    def test_log_format(self, reload_config, fmt, expected):
        assert reload_config(SWIMLANE_LOG_FORMAT=fmt).log_json_format() is expected
