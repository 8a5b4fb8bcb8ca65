"""Tests for logging helpers."""

import logging

from common.logging_utils import configure_logging, extra_context, is_debug_enabled


def _own_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_metadata_json_lint", False)]


def test_env_level_used_when_no_explicit_level(monkeypatch):
    monkeypatch.setenv("METADATA_JSON_LINT_LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_explicit_level_wins_over_env(monkeypatch):
    monkeypatch.setenv("METADATA_JSON_LINT_LOG_LEVEL", "DEBUG")
    configure_logging("ERROR")
    assert logging.getLogger().level == logging.ERROR


def test_unknown_level_falls_back_to_default(monkeypatch):
    monkeypatch.delenv("METADATA_JSON_LINT_LOG_LEVEL", raising=False)
    configure_logging("LOUD")
    assert logging.getLogger().level == logging.WARNING


def test_reconfiguring_replaces_handlers(tmp_path):
    configure_logging("INFO", str(tmp_path / "a.log"))
    assert len(_own_handlers()) == 2
    configure_logging("INFO")
    assert len(_own_handlers()) == 1


def test_extra_context_drops_none():
    assert extra_context(event="x", outcome=None, count=0) == {"event": "x", "count": 0}


def test_is_debug_enabled():
    logger = logging.getLogger("metadata_json_lint.test")
    logger.setLevel(logging.DEBUG)
    assert is_debug_enabled(logger) is True
    logger.setLevel(logging.INFO)
    assert is_debug_enabled(logger) is False
