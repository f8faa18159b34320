"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from pnl_dashboard.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_daily_file_under_subdir(tmp_path, monkeypatch):
    """LoggerBuilder should place log files under logs/<subdir>/."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20260105"),
    )

    builder = logger_module.LoggerBuilder()
    refresh_logger = (
        builder.name("pnl_dashboard.test.refresh")
        .subdir("refresh")
        .prefix("refresh_logs")
        .console(False)
        .level(logging.DEBUG)
        .build()
    )

    assert refresh_logger.level == logging.DEBUG
    assert refresh_logger.propagate is False
    assert len(refresh_logger.handlers) == 1
    handler = refresh_logger.handlers[0]
    assert isinstance(handler, logging.FileHandler)
    expected = tmp_path / "logs" / "refresh" / "20260105_refresh_logs.log"
    assert handler.baseFilename == str(expected)
    # A configured logger is reused as is.
    assert builder.build() is refresh_logger

    for h in list(refresh_logger.handlers):
        h.close()
        refresh_logger.removeHandler(h)


def test_logger_builder_accepts_custom_factories(tmp_path, monkeypatch):
    """Custom handler factories receive the built formatter."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    fmt = logging.Formatter("%(message)s")
    file_factory = MagicMock(return_value=logging.NullHandler())
    console_factory = MagicMock(return_value=logging.NullHandler())

    built = (
        logger_module.LoggerBuilder()
        .name("pnl_dashboard.test.factories")
        .formatter(lambda: fmt)
        .file_handler(file_factory)
        .console_handler(console_factory)
        .build()
    )

    assert file_factory.call_args.args[1] is fmt
    console_factory.assert_called_once_with(fmt)
    assert len(built.handlers) == 2


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "app.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_with_arguments(monkeypatch):
    """Logger methods forward message and arguments."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("app")
    logger.info("loaded %s periods", 3)
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("loaded %s periods", 3)
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    """App and usage loggers are separate singletons."""
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: MagicMock(),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert isinstance(app_logger, logger_module.AppLogger)
    assert isinstance(usage_logger, logger_module.UsageLogger)
