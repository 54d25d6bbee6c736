"""Top-level pytest configuration for generix."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

# Import modules for their side effects so the error registry is populated
import generix.containers.errors
import generix.logging.errors

LOGGING_ENV_KEYS = [
    "GENERIX_LOGGING_LEVEL",
    "GENERIX_LOGGING_JSON_FORMAT",
    "GENERIX_LOGGING_INCLUDE_TIMESTAMP",
    "GENERIX_LOGGING_INCLUDE_LEVEL",
    "GENERIX_LOGGING_CONSOLE_ENABLED",
    "GENERIX_LOGGING_FILE_ENABLED",
    "GENERIX_LOGGING_FILE_PATH",
]


@dataclass
class LogRecordStub:
    level: str
    message: str
    context: dict[str, Any] = field(default_factory=dict)


class RecordingLogger:
    """In-memory LoggerProtocol implementation for assertions."""

    def __init__(self) -> None:
        self.records: list[LogRecordStub] = []

    def _record(self, level: str, msg: str, **kwargs: Any) -> None:
        self.records.append(LogRecordStub(level, msg, kwargs))

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._record("DEBUG", msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._record("INFO", msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._record("WARNING", msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._record("ERROR", msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        self._record("CRITICAL", msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        self._record("ERROR", msg, **kwargs)

    def at(self, level: str) -> list[LogRecordStub]:
        return [r for r in self.records if r.level == level]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture(autouse=True)
def clear_logging_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings-driven tests."""
    for key in LOGGING_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
