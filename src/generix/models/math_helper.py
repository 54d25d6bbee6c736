# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
Class-level constants, static helpers and a process-wide instance counter.
"""

from __future__ import annotations

import threading
from typing import ClassVar, Final


class MathHelper:
    """Static math helpers that also count how many instances were created.

    The counter starts at zero when the module is imported and is incremented
    exactly once per construction, under a lock.
    """

    PI: Final[float] = 3.14159

    _instance_count: ClassVar[int] = 0
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        with MathHelper._lock:
            MathHelper._instance_count += 1

    @classmethod
    def instance_count(cls) -> int:
        return MathHelper._instance_count

    @classmethod
    def reset_instance_count(cls) -> None:
        with MathHelper._lock:
            MathHelper._instance_count = 0

    @staticmethod
    def circle_area(radius: float) -> float:
        return MathHelper.PI * radius * radius

    @staticmethod
    def celsius_to_fahrenheit(celsius: float) -> float:
        return celsius * 9 / 5 + 32
