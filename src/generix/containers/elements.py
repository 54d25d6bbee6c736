# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Runtime element-type and capability checks.

Type parameters are erased at runtime, so every container carries its element
type and checks each inserted element against it. Bounded containers also
check the element type itself once, when they are constructed.
"""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Real
from typing import Any, TypeVar

from generix.containers.errors import InvalidElementTypeError

T = TypeVar("T")


def type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


def check_element_type(element_type: Any) -> None:
    """Reject anything that cannot be used with ``isinstance``."""
    if not isinstance(element_type, type):
        raise InvalidElementTypeError(
            f"Element type must be a class, got {element_type!r}",
            expected="type",
            actual=type_name(type(element_type)),
        )


def accepts(element_type: type, item: object) -> bool:
    """Whether ``item`` may be stored in a container of ``element_type``.

    ``bool`` is only accepted by ``bool`` containers even though it is an
    ``int`` subclass. ``int`` is accepted by ``float`` containers.
    """
    if isinstance(item, bool) and not issubclass(element_type, bool):
        return element_type is object
    if element_type is float and isinstance(item, int):
        return True
    return isinstance(item, element_type)


def check_element(element_type: type[T], item: object, container: str) -> T:
    if not accepts(element_type, item):
        raise InvalidElementTypeError(
            f"{container} expects {type_name(element_type)} elements, "
            f"got {type_name(type(item))}: {item!r}",
            expected=type_name(element_type),
            actual=type_name(type(item)),
            container=container,
        )
    return item  # type: ignore[return-value]


def check_elements(
    element_type: type[T], items: Iterable[object], container: str
) -> list[T]:
    """Check every item, returning them as a new list. All or nothing."""
    return [check_element(element_type, item, container) for item in items]


def require_real(element_type: type, container: str) -> None:
    """Capability check for numeric-bounded containers."""
    check_element_type(element_type)
    if not issubclass(element_type, Real) or issubclass(element_type, bool):
        raise InvalidElementTypeError(
            f"{container} requires a real number element type, "
            f"got {type_name(element_type)}",
            expected="numbers.Real",
            actual=type_name(element_type),
            container=container,
        )


def require_ordering(element_type: type, container: str) -> None:
    """Capability check for comparable-bounded containers."""
    check_element_type(element_type)
    if getattr(element_type, "__lt__", object.__lt__) is object.__lt__:
        raise InvalidElementTypeError(
            f"{container} requires an element type that supports '<', "
            f"got {type_name(element_type)}",
            expected="SupportsLessThan",
            actual=type_name(element_type),
            container=container,
        )


def check_orderable(element_type: type[T], item: object, container: str) -> T:
    """Element check that also requires ``item < item`` to be supported.

    Some classes define ``__lt__`` but refuse to compare (``complex``,
    ``dict``), so the type-level check alone cannot guarantee ordering.
    """
    check_element(element_type, item, container)
    try:
        item < item  # type: ignore[operator]
    except TypeError as exc:
        raise InvalidElementTypeError(
            f"{container} requires elements that support '<', "
            f"got {type_name(type(item))}: {item!r}",
            expected="SupportsLessThan",
            actual=type_name(type(item)),
            container=container,
        ) from exc
    return item  # type: ignore[return-value]
