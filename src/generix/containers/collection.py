# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Named collections with random selection.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from generix.containers.elements import check_element_type, check_elements
from generix.containers.errors import EmptyContainerError

T = TypeVar("T")


class Collection(Generic[T]):
    """An immutable, named group of elements of one type."""

    def __init__(self, name: str, element_type: type[T], data: Iterable[T]) -> None:
        check_element_type(element_type)
        self.name = name
        self._element_type = element_type
        self._data: tuple[T, ...] = tuple(
            check_elements(element_type, data, "Collection")
        )

    @property
    def element_type(self) -> type[T]:
        return self._element_type

    @property
    def data(self) -> tuple[T, ...]:
        return self._data

    def random_item(self, rng: random.Random | None = None) -> T:
        """Pick one element uniformly at random; the data order is untouched.

        Args:
            rng: Source of randomness; the module-level generator if None

        Raises:
            EmptyContainerError: If the collection is empty
        """
        if not self._data:
            raise EmptyContainerError("random_item", "Collection", name=self.name)
        return (rng or random).choice(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Collection({self.name!r}, {list(self._data)!r})"
