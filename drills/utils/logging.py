"""\
Logging
=======

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module provides logging utilities and configuration helpers for the
drills package.

It includes formatters for plain, coloured and JSON output that render
extra record fields automatically, a `configure` function driven by
`drills.core.config.LoggerConfig`, and a decorator that times a call.

Console records are written to standard error because standard output
is where the exercises print their results.
"""

from __future__ import annotations

import functools
import json
import logging
import logging.handlers
import sys
import time
import typing as t
from pathlib import Path

if t.TYPE_CHECKING:
    from drills.core.config import LoggerConfig

__all__: tuple[str, ...] = (
    "ColouredFormatter",
    "DrillsFormatter",
    "JSONFormatter",
    "configure",
    "get_logger",
    "perf_logger",
)

# NOTE: Only loggers under this namespace get their level lowered by
# `configure`, third-party libraries keep the root logger's threshold.
_NAMESPACE: t.Final[str] = "drills"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record becomes a single JSON object carrying the timestamp,
    level, logger name, location and message, plus any exception text.

    :param extras: Whether to include extra fields in output, defaults
        to `True`.
    """

    def __init__(self, extras: bool = True) -> None:
        """Initialise the JSON formatter instance."""
        super().__init__()
        self.extras = extras

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        :param record: The log record to format.
        :return: JSON-formatted log message.
        """
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if self.extras:
            for key, value in record.__dict__.items():
                if key in DrillsFormatter.LOG_RECORD_ATTRS:
                    continue
                if key not in payload and not key.startswith("_"):
                    payload[key] = value
        return json.dumps(payload, default=str)


class DrillsFormatter(logging.Formatter):
    """Formatter that automatically includes extra fields.

    Any attribute passed through `extra=` that is not a standard
    `LogRecord` attribute is rendered with `extra_format` and joined with
    `extra_separator`. The result is exposed to the format string as
    `%(extra)s`. `%(qualName)s` defaults to the logger name followed by
    the function name.

    :param fmt: The format string for log messages, defaults to `None`.
    :param datefmt: The format string for timestamps, defaults to `None`.
    :param extra_format: Format string for individual extra fields.
    :param extra_separator: Separator between multiple extra fields.
    :var LOG_RECORD_ATTRS: Set of standard `LogRecord` attributes.
    """

    LOG_RECORD_ATTRS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "exc_info",
        "exc_text",
        "stack_info",
        "message",
        "asctime",
        "taskName",
        "qualName",
        "extra",
    }

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        extra_format: str = "{key}: {value}",
        extra_separator: str = " ",
    ) -> None:
        """Initialise the formatter."""
        super().__init__(fmt, datefmt)
        self.extra = extra_format
        self.extra_separator = extra_separator

    def extras(self, record: logging.LogRecord) -> str:
        """Render the non-standard attributes of `record`."""
        entries = [
            self.extra.format(key=key, value=value)
            for key, value in sorted(record.__dict__.items())
            if key not in self.LOG_RECORD_ATTRS and not key.startswith("_")
        ]
        return self.extra_separator.join(entries)

    def make_qualname(self, record: logging.LogRecord) -> str:
        """Return `<logger>.<function>` for the record."""
        if record.funcName and record.funcName != "<module>":
            return f"{record.name}.{record.funcName}"
        return record.name

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with extra field handling.

        The record is cloned so handlers sharing it see it untouched.

        :param record: The log record to format.
        :return: Formatted log message.
        """
        clone = logging.makeLogRecord(record.__dict__)
        clone.extra = self.extras(record)
        clone.qualName = self.make_qualname(record)
        return super().format(clone)


class ColouredFormatter(DrillsFormatter):
    """Formatter adding ANSI colours to level and qualified name.

    Colours are only applied when `is_tty` is set, so log files stay free
    of escape sequences.

    :var COLORS: Dictionary mapping log levels to ANSI colour codes.
    """

    COLORS = {
        "DEBUG": "\x1b[38;5;14m",
        "INFO": "\x1b[38;5;41m",
        "WARNING": "\x1b[38;5;215m",
        "ERROR": "\x1b[38;5;204m",
        "CRITICAL": "\x1b[38;5;197m",
        "QUALNAME": "\x1b[38;5;140m",
        "RESET": "\x1b[0m",
    }

    is_tty: bool = False

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with padded, optionally coloured, fields."""
        clone = logging.makeLogRecord(record.__dict__)
        clone.extra = self.extras(record)
        qualname = self.make_qualname(record)
        if self.is_tty:
            reset = self.COLORS["RESET"]
            colour = self.COLORS.get(record.levelname, reset)
            clone.levelname = f"{colour}{record.levelname:>8s}{reset}"
            clone.qualName = f"{self.COLORS['QUALNAME']}{qualname}{reset}"
        else:
            clone.levelname = f"{record.levelname:>8s}"
            clone.qualName = qualname
        return logging.Formatter.format(self, clone)


def _formatter(config: LoggerConfig, fmt: str, tty: bool) -> logging.Formatter:
    """Build the formatter for one handler."""
    if config.as_json:
        return JSONFormatter()
    formatter = ColouredFormatter(
        fmt=fmt,
        datefmt=config.datefmt,
        extra_format="[{key}: {value}]",
        extra_separator=" ",
    )
    formatter.is_tty = tty
    return formatter


def configure(config: LoggerConfig) -> logging.Logger:
    """Configure logging based on provided configuration settings.

    Installs a console handler on standard error and, when enabled, a
    rotating file handler under `config.file.path`. Handlers are attached
    to the `drills` logger, which stops propagating to the root logger,
    so calling this more than once replaces the previous setup.

    :param config: Logger configuration settings.
    :return: The configured package logger.
    """
    logger = logging.getLogger(_NAMESPACE)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    levels: list[int] = []
    if config.tty.enable:
        tty = logging.StreamHandler(sys.stderr)
        tty.setLevel(getattr(logging, config.tty.level))
        colour = config.tty.colour and sys.stderr.isatty()
        tty.setFormatter(_formatter(config, config.tty.fmt, colour))
        logger.addHandler(tty)
        levels.append(tty.level)
    if config.file.enable:
        directory = Path(config.file.path)
        directory.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            filename=directory / config.file.output,
            maxBytes=config.file.max_bytes,
            backupCount=config.file.backups,
            encoding=config.file.encoding,
        )
        handler.setLevel(getattr(logging, config.file.level))
        handler.setFormatter(_formatter(config, config.file.fmt, False))
        logger.addHandler(handler)
        levels.append(handler.level)
    if not levels:
        logger.addHandler(logging.NullHandler())
    threshold = getattr(logging, config.level)
    logger.setLevel(max(threshold, min(levels)) if levels else threshold)
    return logger


def get_logger(logger_name: str) -> logging.Logger:
    """Get a logger instance with the specified name.

    :param logger_name: Logger name.
    :return: Logger instance.
    """
    return logging.getLogger(logger_name)


def perf_logger(func: t.Callable[..., t.Any]) -> t.Callable[..., t.Any]:
    """Decorator to log function execution time.

    The elapsed time is logged at DEBUG on success. On failure the error
    is logged at ERROR with the elapsed time and then re-raised.

    :param func: Function to wrap.
    :return: Wrapped function with performance logging.
    """

    @functools.wraps(func)
    def wrapper(*args: t.Any, **kwargs: t.Any) -> t.Any:
        logger = get_logger(func.__module__)
        started = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            elapsed = time.perf_counter() - started
            logger.error(
                f"Function {func.__qualname__!r} failed after "
                f"{elapsed:.4f}s: {exc}",
                extra={"function": func.__qualname__, "elapsed": elapsed},
            )
            raise
        elapsed = time.perf_counter() - started
        logger.debug(
            f"Function {func.__qualname__!r} completed in {elapsed:.4f}s",
            extra={"function": func.__qualname__, "elapsed": elapsed},
        )
        return result

    return wrapper
