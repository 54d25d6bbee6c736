# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Generic LIFO containers.

This module provides the base implementation shared by every element-checked
sequence container, and the plain ``Stack``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from generix.containers.elements import check_element, check_element_type, type_name
from generix.containers.errors import EmptyContainerError

T = TypeVar("T")


class TypedContainer(Generic[T]):
    """Base implementation of an element-checked LIFO sequence.

    Elements are kept in insertion order; the last element is the top.
    Instances are not thread-safe.
    """

    def __init__(self, element_type: type[T], items: Iterable[T] = ()) -> None:
        """Initialize the container.

        Args:
            element_type: The class every element must be an instance of
            items: Optional initial elements, bottom first

        Raises:
            InvalidElementTypeError: If the element type is not a class or an
                initial element does not match it
        """
        self._check_element_type(element_type)
        self._element_type = element_type
        self._items: list[T] = [self._check_item(item) for item in items]

    def _check_element_type(self, element_type: type[T]) -> None:
        """Hook for bounded subclasses; runs once, before any element is stored."""
        check_element_type(element_type)

    def _check_item(self, item: object) -> T:
        """Hook for bounded subclasses; runs for every element before it is stored."""
        return check_element(self._element_type, item, self._container_name())

    @classmethod
    def _container_name(cls) -> str:
        return cls.__name__

    @property
    def element_type(self) -> type[T]:
        return self._element_type

    def push(self, item: T) -> None:
        """Append ``item`` to the top.

        Raises:
            InvalidElementTypeError: If ``item`` is not of the element type
        """
        self._items.append(self._check_item(item))

    def pop(self) -> T:
        """Remove and return the top element.

        Raises:
            EmptyContainerError: If the container is empty
        """
        if not self._items:
            raise EmptyContainerError("pop", self._container_name())
        return self._items.pop()

    def peek(self) -> T:
        """Return the top element without removing it.

        Raises:
            EmptyContainerError: If the container is empty
        """
        if not self._items:
            raise EmptyContainerError("peek", self._container_name())
        return self._items[-1]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def items(self) -> tuple[T, ...]:
        """Snapshot of the elements, bottom first."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return (
            f"{self._container_name()}[{type_name(self._element_type)}]"
            f"({self._items!r})"
        )


class Stack(TypedContainer[T]):
    """Last-in-first-out stack of a single element type."""
