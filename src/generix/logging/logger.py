# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Logger implementation for generix.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured logging capabilities.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import uuid
from logging import StreamHandler
from typing import TYPE_CHECKING, Any

from generix.errors import GenerixError
from generix.logging.config import LoggingSettings
from generix.logging.errors import LOGGING_CONFIGURATION, LoggingError
from generix.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Generator

# Attribute under which structured context travels on a LogRecord
CONTEXT_ATTR = "generix_context"


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        # Define format string based on settings
        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        extra: dict[str, Any] = dict(getattr(record, CONTEXT_ATTR, None) or {})

        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        return self._format_text(message, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "name": record.name,
            **extra,
        }

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data, cls=GenerixJsonEncoder, ensure_ascii=False)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message

        # Format the extra context as key-value pairs
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        """Format a value for text output.

        Args:
            value: Value to format

        Returns:
            Formatted value string
        """
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, BaseException):
            return str(value)
        try:
            return json.dumps(value, cls=GenerixJsonEncoder)
        except (TypeError, ValueError):
            return str(value)


class GenerixJsonEncoder(json.JSONEncoder):
    """JSON encoder that falls back to strings for values json cannot handle."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, enum.Enum):
            return obj.value
        if isinstance(obj, GenerixError):
            return obj.to_dict()
        return str(obj)


class GenerixLogger:
    """Default logger implementation for generix.

    Every call merges three layers of context into the record, later layers
    winning: values bound with ``bind()``, values from an active ``context()``
    block, and the keyword arguments of the call itself.
    """

    def __init__(
        self,
        name: str,
        level: str | None = None,
        settings: LoggingSettings | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            level: Log level override; defaults to the configured level
            settings: Optional logger settings (loads from environment if None)
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()

        # Create the underlying Python logger
        self._logger = logging.getLogger(name)
        self._configure(level or self._settings.level)

        self._bound_context: dict[str, Any] = {}
        self._context: dict[str, Any] = {}

    def _configure(self, level: str) -> None:
        """
        Configure the underlying logger with the provided settings.

        Args:
            level: Log level

        Raises:
            LoggingError: If a configured handler cannot be created
        """
        self._logger.setLevel(LogLevel.from_string(level).to_stdlib_level())

        # Clear any existing handlers
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        if self._settings.console_enabled:
            console = StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            try:
                file_handler = logging.FileHandler(self._settings.file_path)
            except OSError as exc:
                raise LoggingError(
                    f"Cannot open log file {self._settings.file_path}",
                    code=LOGGING_CONFIGURATION,
                    file_path=self._settings.file_path,
                ) from exc
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs: Any) -> None:
        combined_context = {**self._bound_context, **self._context, **kwargs}
        self._logger.log(
            level,
            msg,
            exc_info=exc_info,
            extra={CONTEXT_ATTR: combined_context},
        )

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logger's level.

        Args:
            level: New logging level
        """
        self._logger.setLevel(level.to_stdlib_level())

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None]:
        """
        Context manager for adding contextual information to log messages.

        Args:
            **kwargs: Context key-value pairs to add to log messages
        """
        original_context = self._context.copy()
        self._context.update(kwargs)
        try:
            yield
        finally:
            self._context = original_context

    def bind(self, **kwargs: Any) -> GenerixLogger:
        """Create a new logger with bound context values.

        Args:
            **kwargs: Context values to bind

        Returns:
            New logger instance with bound context
        """
        logger = GenerixLogger(
            self.name,
            level=logging.getLevelName(self._logger.level),
            settings=self._settings,
        )
        logger._bound_context = {**self._bound_context, **kwargs}
        return logger


def get_logger(name: str, level: LogLevel | None = None) -> GenerixLogger:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    settings = LoggingSettings.load()
    logger = GenerixLogger(name, settings=settings)

    if level is not None:
        logger.set_level(level)

    return logger
