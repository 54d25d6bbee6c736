# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Container-specific error classes.

Containers raise these and never catch or log them; the caller decides what
to do with an empty container or a rejected element.
"""

from __future__ import annotations

from typing import Any, Final

from generix.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, GenerixError

CONTAINERS: Final = ErrorCategory.get_or_create("CONTAINERS")
EMPTY_CONTAINER: Final = ErrorCode.get_or_create("EMPTY_CONTAINER", CONTAINERS)
INVALID_ELEMENT_TYPE: Final = ErrorCode.get_or_create(
    "INVALID_ELEMENT_TYPE", CONTAINERS
)
ELEMENT_INDEX_OUT_OF_RANGE: Final = ErrorCode.get_or_create(
    "ELEMENT_INDEX_OUT_OF_RANGE", CONTAINERS
)


class ContainerError(GenerixError):
    """Base class for all container errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message, code=code, severity=severity, context=context, **kwargs
        )


class EmptyContainerError(ContainerError):
    """Raised when an operation needs at least one element and there is none."""

    def __init__(self, operation: str, container: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot {operation}() on an empty {container}",
            code=EMPTY_CONTAINER,
            operation=operation,
            container=container,
            **kwargs,
        )
        self.operation = operation


class InvalidElementTypeError(ContainerError, TypeError):
    """Raised when an element or an element type does not fit a container."""

    def __init__(self, message: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            message,
            code=INVALID_ELEMENT_TYPE,
            expected=expected,
            actual=actual,
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


class ElementIndexError(ContainerError, IndexError):
    """Raised by positional lookups outside ``0 <= index < size``."""

    def __init__(self, index: int, size: int, **kwargs: Any) -> None:
        super().__init__(
            f"Index {index} out of range for {size} element(s)",
            code=ELEMENT_INDEX_OUT_OF_RANGE,
            index=index,
            size=size,
            **kwargs,
        )
        self.index = index
