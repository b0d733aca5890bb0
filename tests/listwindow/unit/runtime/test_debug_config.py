from __future__ import annotations

from listwindow.runtime.debug_config import (
    enabled_trace,
    load_debug_config,
    resolve_log_format,
    resolve_log_level_name,
)


def test_load_debug_config_parses_env(monkeypatch) -> None:
    monkeypatch.setenv("LISTWINDOW_DEBUG_TRACE", "yes")
    monkeypatch.setenv("LISTWINDOW_LOG_LEVEL", "debug")
    monkeypatch.setenv("LISTWINDOW_LOG_FORMAT", "JSON")
    monkeypatch.setenv("LISTWINDOW_LOG_FILE", " logs/listwindow.jsonl ")

    cfg = load_debug_config()
    assert cfg.trace_enabled is True
    assert cfg.log_level == "DEBUG"
    assert cfg.log_format == "json"
    assert cfg.log_file == "logs/listwindow.jsonl"


def test_load_debug_config_defaults(monkeypatch) -> None:
    for name in (
        "LISTWINDOW_DEBUG_TRACE",
        "LISTWINDOW_LOG_LEVEL",
        "LOG_LEVEL",
        "LISTWINDOW_LOG_FORMAT",
        "LISTWINDOW_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    cfg = load_debug_config()
    assert cfg.trace_enabled is False
    assert cfg.log_level == "INFO"
    assert cfg.log_format == "text"
    assert cfg.log_file is None


def test_resolve_log_level_prefers_package_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LISTWINDOW_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"
    monkeypatch.delenv("LISTWINDOW_LOG_LEVEL")
    assert resolve_log_level_name() == "WARNING"


def test_unknown_log_format_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("LISTWINDOW_LOG_FORMAT", "xml")
    assert resolve_log_format() == "text"


def test_enabled_trace_reads_current_env(monkeypatch) -> None:
    monkeypatch.setenv("LISTWINDOW_DEBUG_TRACE", "0")
    assert enabled_trace() is False
    monkeypatch.setenv("LISTWINDOW_DEBUG_TRACE", "on")
    assert enabled_trace() is True
