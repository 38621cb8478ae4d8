"""Tests for monoui.utils.logging module."""

from __future__ import annotations

import json
import logging

import pytest

from monoui.colors import ColorFormatError, ColorRgb
from monoui.geometry import Point, Rect
from monoui.utils.logging import configure_logging, get_logger, render_primitives


def _read_last_json_log_line(capsys: pytest.CaptureFixture[str]) -> dict[str, object]:
    captured = capsys.readouterr()
    lines = [line for line in captured.out.splitlines() if line.strip()]
    assert lines, "Expected at least one log line on stdout"
    return json.loads(lines[-1])


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="WARNING", log_format="console")
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_default_settings_do_not_error() -> None:
    configure_logging()


def test_get_logger_returns_logger_proxy() -> None:
    configure_logging(level="DEBUG", log_format="console")
    logger = get_logger("test.module")
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")


def test_json_log_is_valid(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(level="INFO", log_format="json")

    logger = get_logger("test.json")
    logger.info("hello", foo="bar")
    payload = _read_last_json_log_line(capsys)

    assert payload["event"] == "hello"
    assert payload["foo"] == "bar"
    assert payload["level"] == "info"
    assert payload["logger"] == "test.json"
    assert "timestamp" in payload


def test_rejected_color_is_logged_at_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(level="DEBUG", log_format="json")

    with pytest.raises(ColorFormatError):
        ColorRgb.parse("not-a-color")
    payload = _read_last_json_log_line(capsys)

    assert payload["event"] == "Rejected color string"
    assert payload["text"] == "not-a-color"
    assert payload["level"] == "debug"
    assert payload["logger"] == "monoui.colors.rgb"


def test_value_types_are_logged_in_text_form(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(level="INFO", log_format="json")

    logger = get_logger("test.primitives")
    logger.info("clip", rect=Rect(0, 0, 10, 2.5), color=ColorRgb.parse("red"))
    payload = _read_last_json_log_line(capsys)

    assert payload["rect"] == "0, 0, 10, 2.5"
    assert payload["color"] == "Red"


def test_render_primitives_leaves_other_fields() -> None:
    event = {"event": "hit", "point": Point(1, 2), "count": 3}
    rendered = render_primitives(None, "info", event)
    assert rendered == {"event": "hit", "point": "1, 2", "count": 3}
