# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Comparable-bounded container.
"""

from __future__ import annotations

from generix.containers.elements import check_orderable, require_ordering
from generix.containers.protocols import C
from generix.containers.stack import TypedContainer


class SortedCollection(TypedContainer[C]):
    """Container whose elements can be returned in sorted order.

    The element type must define ``<``; this is checked at construction. Each
    element must also compare with itself, so types whose ``<`` always raises
    are rejected when their elements are inserted.
    """

    def _check_element_type(self, element_type: type[C]) -> None:
        require_ordering(element_type, self._container_name())

    def _check_item(self, item: object) -> C:
        return check_orderable(self._element_type, item, self._container_name())

    def sorted(self, reverse: bool = False) -> list[C]:
        """Return the elements as a new sorted list.

        The sort is stable, so equal elements keep their insertion order,
        including when ``reverse`` is set. The collection itself is unchanged.
        """
        return sorted(self._items, reverse=reverse)
