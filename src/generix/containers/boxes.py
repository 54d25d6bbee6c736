# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Typed single-value holders and small generic helpers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from generix.containers.elements import check_element, check_element_type, type_name
from generix.containers.errors import EmptyContainerError

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K")
V = TypeVar("V")


class SafeBox(Generic[T]):
    """Holds exactly one item of a fixed type."""

    def __init__(self, element_type: type[T], item: T) -> None:
        check_element_type(element_type)
        self._element_type = element_type
        self._item = check_element(element_type, item, "SafeBox")

    @property
    def element_type(self) -> type[T]:
        return self._element_type

    @property
    def item(self) -> T:
        return self._item

    @item.setter
    def item(self, value: T) -> None:
        self._item = check_element(self._element_type, value, "SafeBox")

    def __repr__(self) -> str:
        return f"SafeBox[{type_name(self._element_type)}]({self._item!r})"


@dataclass(frozen=True, repr=False)
class Pair(Generic[A, B]):
    """Immutable pair of values; ``repr`` and ``str`` read ``Pair(Alice, 30)``."""

    first: A
    second: B

    def __repr__(self) -> str:
        return f"Pair({self.first}, {self.second})"


@dataclass(frozen=True)
class KeyValue(Generic[K, V]):
    key: K
    value: V

    def __str__(self) -> str:
        return f"{self.key}: {self.value}"


def get_first(items: Sequence[T]) -> T:
    """First element of ``items``.

    Raises:
        EmptyContainerError: If ``items`` is empty
    """
    if not items:
        raise EmptyContainerError("get_first", type_name(type(items)))
    return items[0]


def wrap_in_list(item: T) -> list[T]:
    return [item]


def swap_pair(pair: Pair[A, B]) -> Pair[B, A]:
    return Pair(pair.second, pair.first)
