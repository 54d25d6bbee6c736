# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""Repository pattern implementation for in-memory values.

``Repository`` is a plain list-backed store. Removal is by value: the first
element equal to the argument goes, and removing an absent value is a no-op.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from generix.containers.elements import (
    check_element,
    check_element_type,
    check_elements,
    type_name,
)
from generix.containers.errors import ElementIndexError

T = TypeVar("T")


class Repository(Generic[T]):
    """Insertion-ordered, element-checked store of values."""

    def __init__(self, element_type: type[T], items: Iterable[T] = ()) -> None:
        check_element_type(element_type)
        self._element_type = element_type
        self._items: list[T] = check_elements(
            element_type, items, self.__class__.__name__
        )

    @property
    def element_type(self) -> type[T]:
        return self._element_type

    def add(self, item: T) -> None:
        """Append an item.

        Raises:
            InvalidElementTypeError: If ``item`` is not of the element type
        """
        self._items.append(
            check_element(self._element_type, item, self.__class__.__name__)
        )

    def remove(self, item: T) -> bool:
        """Remove the first element equal to ``item``.

        Returns:
            True if an element was removed, False if none matched
        """
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def contains(self, item: object) -> bool:
        return item in self._items

    def get_by_id(self, index: int) -> T:
        """Return the element at ``index`` (0-based, insertion order).

        Raises:
            ElementIndexError: If ``index`` is negative or not below ``size()``
        """
        if not 0 <= index < len(self._items):
            raise ElementIndexError(index, len(self._items))
        return self._items[index]

    def get_all(self) -> tuple[T, ...]:
        """Immutable snapshot of every element in insertion order."""
        return tuple(self._items)

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}[{type_name(self._element_type)}]"
            f"({self._items!r})"
        )
