"""Structured logging helpers."""

from __future__ import annotations

import io
import json
import logging
import sys

from llm_catalog.base.log_support import JsonFormatter, LogContext
from llm_catalog.base.logging import configure_logger, get_logger, log_event
from llm_catalog.base.models import Snapshot
from llm_catalog.tests.utils import assert_true


def test_env_level_overrides_default(monkeypatch, capsys) -> None:
    monkeypatch.setenv("LLM_CATALOG_LOG_LEVEL", "ERROR")
    logger = get_logger("llm_catalog.test")
    logger.warning("quiet")
    assert_true(capsys.readouterr().err == "", "warning suppressed at ERROR")
    logger.error("loud")
    data = json.loads(capsys.readouterr().err.strip())
    assert_true(data["level"] == "ERROR" and data["logger"] == "llm_catalog.test", f"unexpected {data}")
    monkeypatch.delenv("LLM_CATALOG_LOG_LEVEL")
    get_logger("llm_catalog.test")


def test_log_event_hoists_fields_and_drops_none(capsys) -> None:
    logger = get_logger("llm_catalog.test.event")
    log_event(logger, "catalog.test", LogContext(provider="openai", stage="merge"), models=3, skipped=None)
    data = json.loads(capsys.readouterr().err.strip())
    assert_true(data["event"] == "catalog.test", "event hoisted")
    assert_true(data["provider"] == "openai" and data["stage"] == "merge", "context merged")
    assert_true(data["models"] == 3, "fields merged")
    assert_true("skipped" not in data and "msg" not in data, "None fields and raw msg dropped")


def test_log_event_keep_none(capsys) -> None:
    log_event(get_logger("llm_catalog.test.none"), "catalog.test", keep_none=True, value=None)
    data = json.loads(capsys.readouterr().err.strip())
    assert_true("value" in data and data["value"] is None, "None kept on request")


def test_json_formatter_plain_message() -> None:
    record = logging.LogRecord("llm_catalog.x", logging.INFO, __file__, 0, "hello %s", ("world",), None)
    data = json.loads(JsonFormatter().format(record))
    assert_true(data["msg"] == "hello world", f"unexpected {data}")


def test_log_context_to_dict_prunes_none() -> None:
    ctx = LogContext(model="m", extra={"k": 1, "n": None})
    assert_true(ctx.to_dict() == {"model": "m", "k": 1}, f"unexpected {ctx.to_dict()}")


def test_configure_logger_file_handler(tmp_path) -> None:
    target = tmp_path / "logs" / "catalog.log"
    logger = configure_logger(file_path=str(target))
    try:
        log_event(logger, "catalog.file.test")
        for handler in logger.handlers:
            handler.flush()
        assert_true("catalog.file.test" in target.read_text(encoding="utf-8"), "event written to file")
    finally:
        configure_logger(file_path=None, level=logging.INFO)


def _bind_closed_stream(monkeypatch) -> None:
    stream = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    monkeypatch.setattr(sys, "stderr", stream)
    get_logger("llm_catalog.test.stream")
    stream.close()


def test_closed_console_stream_is_replaced(monkeypatch) -> None:
    _bind_closed_stream(monkeypatch)
    target = io.StringIO()
    monkeypatch.setattr(sys, "stderr", target)
    log_event(get_logger("llm_catalog.test.stream"), "catalog.after.close")
    assert_true("catalog.after.close" in target.getvalue(), "events reach the current stderr")


def test_publish_after_closed_stream(monkeypatch, store) -> None:
    _bind_closed_stream(monkeypatch)
    monkeypatch.setattr(sys, "stderr", io.StringIO())
    assert_true(store.publish(Snapshot()) == 1, "publish succeeds")
    store.clear()
    assert_true(store.get() is None, "clear succeeds")
