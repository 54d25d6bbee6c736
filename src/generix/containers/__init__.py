# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix

"""
Element-checked generic containers.
"""

from __future__ import annotations

from generix.containers.boxes import (
    KeyValue,
    Pair,
    SafeBox,
    get_first,
    swap_pair,
    wrap_in_list,
)
from generix.containers.collection import Collection
from generix.containers.errors import (
    ContainerError,
    ElementIndexError,
    EmptyContainerError,
    InvalidElementTypeError,
)
from generix.containers.logged import LoggedRepository
from generix.containers.numeric import MathBox
from generix.containers.ordered import SortedCollection
from generix.containers.protocols import (
    ContainerProtocol,
    RepositoryProtocol,
    SupportsLessThan,
)
from generix.containers.repository import Repository
from generix.containers.stack import Stack, TypedContainer

__all__ = [
    # Protocols
    "ContainerProtocol",
    "RepositoryProtocol",
    "SupportsLessThan",
    # Containers
    "TypedContainer",
    "Stack",
    "MathBox",
    "SortedCollection",
    "Repository",
    "LoggedRepository",
    "Collection",
    # Holders and helpers
    "SafeBox",
    "Pair",
    "KeyValue",
    "get_first",
    "wrap_in_list",
    "swap_pair",
    # Errors
    "ContainerError",
    "EmptyContainerError",
    "InvalidElementTypeError",
    "ElementIndexError",
]
