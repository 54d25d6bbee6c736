# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Small models: polymorphic menu items, ability mixins and static helpers.
"""

from generix.models.abilities import CanFly, CanRun, CanSwim, Duck, Superhero
from generix.models.math_helper import MathHelper
from generix.models.menu import Burger, MenuItem, Pizza

__all__ = [
    "MenuItem",
    "Pizza",
    "Burger",
    "CanFly",
    "CanSwim",
    "CanRun",
    "Duck",
    "Superhero",
    "MathHelper",
]
