from __future__ import annotations

import json
import logging

from listwindow.api.logging import JsonFormatter, LoggingConfig
from listwindow.runtime.logging import configure_logging, setup_logging, shutdown_logging
from listwindow.runtime.window import ListWindow
from tests.listwindow.conftest import make_config


def test_setup_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("LISTWINDOW_LOG_LEVEL", "DEBUG")
        monkeypatch.delenv("LISTWINDOW_LOG_FILE", raising=False)
        setup_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_logging_streams_json_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_path = tmp_path / "logs" / "listwindow.jsonl"
    try:
        configure_logging(LoggingConfig(level_name="DEBUG", file_path=str(log_path)))
        window = ListWindow(make_config())
        window.reset_after_index(3)
        shutdown_logging()
        lines = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
        assert any(line["msg"] == "list_window_reset index=3" for line in lines)
        assert all(line["logger"] for line in lines)
    finally:
        shutdown_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_keeps_extra_fields() -> None:
    record = logging.LogRecord(
        name="listwindow.runtime",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="render index=%d",
        args=(4,),
        exc_info=None,
    )
    record.visible_stop = 7
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["msg"] == "render index=4"
    assert payload["fields"]["visible_stop"] == 7
