"""Logging configuration for the command line."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from mdquote import Blockquote
from mdquote.lib.logging import _level_from_verbosity, configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [(-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_level_from_verbosity(verbosity: int, level: int) -> None:
    assert _level_from_verbosity(verbosity) == level


def test_structlog_writes_to_stderr(restore_logging, capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbosity=1)
    structlog.get_logger("mdquote.test").info("quoted text", length=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "quoted text" in captured.err


def test_json_mode_renders_json(restore_logging, capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(json_mode=True, verbosity=1)
    structlog.get_logger("mdquote.test").info("quoted text", length=3)

    err = capsys.readouterr().err
    assert '"event": "quoted text"' in err
    assert '"length": 3' in err


def test_default_verbosity_filters_info(restore_logging, capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging()
    structlog.get_logger("mdquote.test").info("hidden")
    structlog.get_logger("mdquote.test").warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_formatter_debug_lines_share_the_renderer(
    restore_logging, capsys: pytest.CaptureFixture[str]
) -> None:
    configure_logging(json_mode=True, verbosity=2)
    str(Blockquote.new("abcdef").soft_limit(3))

    err = capsys.readouterr().err
    records = [json.loads(line) for line in err.splitlines() if line.strip()]
    assert any(
        record["event"] == "Truncated blockquote at character 3 of 6."
        and record["logger"] == "mdquote.lib.blockquote"
        and record["level"] == "debug"
        for record in records
    )
