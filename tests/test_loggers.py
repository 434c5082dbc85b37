import logging
import sys

import pytest

from buildnumber import loggers


@pytest.mark.parametrize(
    "debug, no_color, log_level",
    [
        (False, False, logging.INFO),
        (True, True, logging.DEBUG),
    ],
)
def test_initialize_root_logger(debug, no_color, log_level):
    loggers.initialize_root_logger(debug, no_color)

    root_logger = logging.getLogger()
    assert root_logger.level == log_level
    assert len(root_logger.handlers) == 1
    console_handler = root_logger.handlers[0]
    assert console_handler.__class__ == logging.StreamHandler
    assert console_handler.stream is sys.stdout
    console_formatter = console_handler.formatter
    assert isinstance(console_formatter, loggers.CustomColoredFormatter)
    assert console_formatter.fmt == "%(log_color)s%(levelname)-8s %(message)s"
    assert console_formatter.no_color == no_color
    assert console_formatter.color is None

    result_logger = loggers.get_result_logger()
    assert not result_logger.propagate
    assert len(result_logger.handlers) == 1
    result_formatter = result_logger.handlers[0].formatter
    assert isinstance(result_formatter, loggers.CustomColoredFormatter)
    assert result_formatter.fmt == console_formatter.fmt
    assert result_formatter.no_color == no_color
    assert result_formatter.color == "green"


def test_initialize_root_logger_replaces_handlers():
    loggers.initialize_root_logger(False, True)
    loggers.initialize_root_logger(True, True)

    assert len(logging.getLogger().handlers) == 1
    assert len(loggers.get_result_logger().handlers) == 1


@pytest.mark.parametrize(
    "color, log_colors",
    [
        (None, loggers.DEFAULT_LOG_COLORS),
        (
            "green",
            {
                "DEBUG": "green",
                "INFO": "green",
                "WARNING": "green",
                "ERROR": "green",
                "CRITICAL": "green",
            },
        ),
    ],
)
def test_formatter_log_colors(color, log_colors):
    formatter = loggers.CustomColoredFormatter("%(message)s", False, color)
    assert formatter.log_colors == log_colors


def test_formatter_clone():
    formatter = loggers.CustomColoredFormatter("%(message)s", True)
    clone = formatter.clone("green")
    assert clone is not formatter
    assert clone.fmt == "%(message)s"
    assert clone.no_color
    assert clone.color == "green"
    assert formatter.clone().color is None
    assert not formatter.clone(no_color=False).no_color


def test_formatter_no_color(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    formatter = loggers.CustomColoredFormatter(loggers.LOG_FORMAT, True)
    record = logging.LogRecord("name1", logging.ERROR, __file__, 1, "message1", None, None)
    assert formatter.format(record) == "ERROR    message1"


def test_result_logger_output(capsys, monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    loggers.initialize_root_logger(False, False)
    loggers.get_result_logger().info("done")

    out = capsys.readouterr().out
    assert "INFO     done" in out
    assert out.startswith("\x1b[32m")
