# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Structured errors shared by every generix package.

Each package declares its own category and codes, and raises subclasses of
``GenerixError`` that carry the code, a severity and a context dictionary.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final

from generix.errors.registry import registry


class ErrorSeverity(str, Enum):
    """Severity levels for errors raised by generix."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory:
    """Named group of error codes, e.g. ``CONTAINERS`` or ``LOGGING``.

    Categories compare by name. Use ``get_or_create`` so that every module
    shares the registered instance.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCategory):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @classmethod
    def get_or_create(cls, name: str) -> "ErrorCategory":
        return registry.get_category(name)


INTERNAL: Final = ErrorCategory.get_or_create("INTERNAL")


class ErrorCode:
    """Stable machine-readable identifier of an error, within a category."""

    def __init__(self, code: str, category: ErrorCategory | None = None) -> None:
        """Initialize an error code.

        Args:
            code: Unique identifier, e.g. ``EMPTY_CONTAINER``
            category: Owning category; ``INTERNAL`` when omitted
        """
        self.code = code
        self.category = category or registry.get_category("INTERNAL")

    def __str__(self) -> str:
        return self.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> "ErrorCode":
        """Return the registered code ``name``, creating it in ``category``."""
        return registry.get_code(name, category.name)


INTERNAL_ERROR: Final = ErrorCode.get_or_create("INTERNAL_ERROR", INTERNAL)


class GenerixError(Exception):
    """Abstract base of every error raised by generix.

    Only subclasses can be instantiated. Keyword arguments passed to the
    constructor are merged into ``context``.
    """

    message: str
    code: ErrorCode
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> "GenerixError":
        if cls is GenerixError:
            raise TypeError(
                "Do not instantiate GenerixError directly; subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Args:
            message: Human-readable description
            code: Registered error code; its category becomes ``category``
            severity: How serious the failure is
            context: Initial context, copied
            **kwargs: Extra context entries

        Raises:
            TypeError: If ``code`` is not an ``ErrorCode``
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        full_context = dict(context or {})
        full_context.update(kwargs)

        super().__init__(message)
        self.code = code
        self.message = message
        self.category = code.category
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> "GenerixError":
        """Add a key-value pair to the error context and return self for chaining."""
        self.context[key] = value
        return self

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view of the error, used for structured logs."""
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
