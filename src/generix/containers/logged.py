# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""Logging decorator for repositories.

``LoggedRepository`` owns an inner repository and logs every mutating call
before delegating to it. Reads pass straight through. The inner repository is
only required to satisfy ``RepositoryProtocol``, so any conforming store can be
decorated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from generix.containers.protocols import RepositoryProtocol
from generix.containers.repository import Repository
from generix.logging import LoggerProtocol, get_logger

T = TypeVar("T")

RepositoryFactory = Callable[[type[T]], RepositoryProtocol[T]]


class LoggedRepository(Generic[T]):
    """Repository decorator that logs ``add`` and ``remove``.

    ``add`` always logs one INFO record and then delegates. ``remove`` logs at
    INFO only when the value is present; an absent value yields a DEBUG
    record and the delegated call is a no-op.
    """

    def __init__(
        self,
        label: str,
        element_type: type[T],
        factory: RepositoryFactory[T] | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize the decorator.

        Args:
            label: Name used in every log record
            element_type: Element type of the inner repository
            factory: Builds the inner repository from the element type;
                defaults to ``Repository``
            logger: Optional logger instance. If not provided, a default one will be created.
        """
        self.label = label
        self._inner: RepositoryProtocol[T] = (factory or Repository)(element_type)
        self._logger = logger or get_logger(
            f"generix.repository.{label.lower()}"
        )

    @property
    def wrapped(self) -> RepositoryProtocol[T]:
        """The inner repository. Mutate it only through the decorator."""
        return self._inner

    @property
    def element_type(self) -> type[T]:
        return self._inner.element_type

    def add(self, item: T) -> None:
        self._logger.info(
            f"[{self.label}] Added: {item}", repository=self.label, item=item
        )
        self._inner.add(item)

    def remove(self, item: T) -> bool:
        if self._inner.contains(item):
            self._logger.info(
                f"[{self.label}] Removed: {item}", repository=self.label, item=item
            )
        else:
            self._logger.debug(
                f"[{self.label}] Not present: {item}", repository=self.label, item=item
            )
        return self._inner.remove(item)

    def contains(self, item: object) -> bool:
        return self._inner.contains(item)

    def get_by_id(self, index: int) -> T:
        return self._inner.get_by_id(index)

    def get_all(self) -> tuple[T, ...]:
        return self._inner.get_all()

    def size(self) -> int:
        return self._inner.size()

    def is_empty(self) -> bool:
        return self._inner.is_empty()

    def __contains__(self, item: object) -> bool:
        return self._inner.contains(item)

    def __len__(self) -> int:
        return self._inner.size()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.label!r}, {self._inner!r})"
