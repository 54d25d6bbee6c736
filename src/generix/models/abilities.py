# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""Ability mixins shared by unrelated classes."""

from __future__ import annotations


class CanFly:
    def fly(self) -> str:
        return "I can fly!"


class CanSwim:
    def swim(self) -> str:
        return "I can swim!"


class CanRun:
    def run(self) -> str:
        return "I can run!"


class Duck(CanFly, CanSwim):
    def __init__(self, name: str) -> None:
        self.name = name

    def abilities(self) -> str:
        return f"{self.name}: {self.fly()} {self.swim()}"


class Superhero(CanFly, CanSwim, CanRun):
    def __init__(self, name: str) -> None:
        self.name = name

    def abilities(self) -> str:
        return f"{self.name}: {self.fly()} {self.swim()} {self.run()}"
