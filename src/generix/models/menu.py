# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Menu items rendered through a shared ``format()`` method.

Each variant overrides ``format()`` once; ``str()`` always goes through it, so
a mixed list of items prints each one in its own layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MenuItem:
    title: str
    price: float

    def format(self) -> str:
        return f"{self.title} --> ${self.price:.2f}"

    def __str__(self) -> str:
        return self.format()


@dataclass
class Pizza(MenuItem):
    toppings: list[str] = field(default_factory=list)

    def format(self) -> str:
        toppings = ", ".join(self.toppings)
        return (
            f"PIZZA: {self.title}\n"
            f" PRICE: ${self.price:.2f}\n"
            f" TOPPINGS: {toppings}"
        )


@dataclass
class Burger(MenuItem):
    is_combo: bool = False

    def format(self) -> str:
        combo = "Yes" if self.is_combo else "No"
        return (
            f"BURGER: {self.title}\n"
            f" PRICE: ${self.price:.2f}\n"
            f" Combo: {combo}"
        )
