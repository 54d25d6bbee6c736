# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Numeric-bounded container.
"""

from __future__ import annotations

import math
from numbers import Integral, Real

from generix.containers.elements import require_real
from generix.containers.errors import EmptyContainerError
from generix.containers.protocols import N
from generix.containers.stack import TypedContainer


class MathBox(TypedContainer[N]):
    """Container of real numbers with aggregate queries.

    The element type must be a ``numbers.Real`` subclass other than ``bool``;
    this is checked when the box is constructed.
    """

    def _check_element_type(self, element_type: type[N]) -> None:
        require_real(element_type, self._container_name())

    def sum(self) -> Real:
        """Sum of all elements.

        Integers are added exactly with Python's unbounded ``int``. A ``float``
        box, or any box holding a float, is totalled with ``math.fsum``, which
        is correctly rounded and always returns a float, so ``int`` elements
        of a ``float`` box still give a float. Other real types (``Fraction``)
        are added exactly. The result is never narrowed back to the element
        type.

        Raises:
            EmptyContainerError: If the box is empty
        """
        if not self._items:
            raise EmptyContainerError("sum", self._container_name())
        if issubclass(self._element_type, float) or any(
            isinstance(n, float) for n in self._items
        ):
            return math.fsum(self._items)
        if all(isinstance(n, Integral) for n in self._items):
            return sum(int(n) for n in self._items)
        total = self._items[0]
        for n in self._items[1:]:
            total = total + n
        return total

    def max(self) -> N:
        """Largest element; the first one wins on ties.

        Raises:
            EmptyContainerError: If the box is empty
        """
        if not self._items:
            raise EmptyContainerError("max", self._container_name())
        result = self._items[0]
        for n in self._items[1:]:
            if n > result:
                result = n
        return result

    def min(self) -> N:
        """Smallest element; the first one wins on ties.

        Raises:
            EmptyContainerError: If the box is empty
        """
        if not self._items:
            raise EmptyContainerError("min", self._container_name())
        result = self._items[0]
        for n in self._items[1:]:
            if n < result:
                result = n
        return result
