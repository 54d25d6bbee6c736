# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
containers.protocols
Structural contracts for containers and the capabilities their element types may need.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


class SupportsLessThan(Protocol):
    """Capability: instances can be ordered with ``<``."""

    def __lt__(self, other: Any, /) -> bool: ...


C = TypeVar("C", bound=SupportsLessThan)
# Real numbers; int is accepted wherever float is expected.
N = TypeVar("N", bound=float)


@runtime_checkable
class ContainerProtocol(Protocol[T]):
    """LIFO container contract."""

    def push(self, item: T) -> None: ...

    def pop(self) -> T: ...

    def peek(self) -> T: ...

    def size(self) -> int: ...

    def is_empty(self) -> bool: ...


@runtime_checkable
class RepositoryProtocol(Protocol[T]):
    """Value-based store contract, the shape a logging decorator can wrap."""

    @property
    def element_type(self) -> type[T]: ...

    def add(self, item: T) -> None: ...

    def remove(self, item: T) -> bool: ...

    def contains(self, item: object) -> bool: ...

    def get_by_id(self, index: int) -> T: ...

    def get_all(self) -> tuple[T, ...]: ...

    def size(self) -> int: ...

    def is_empty(self) -> bool: ...

    def __iter__(self) -> Iterator[T]: ...
