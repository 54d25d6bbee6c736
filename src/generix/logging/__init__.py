# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix

"""
Public API for the generix logging system.

This module exports structured logging on top of the standard library,
configured from the environment.
"""

from __future__ import annotations

from generix.logging.config import LoggingSettings
from generix.logging.errors import LoggingError
from generix.logging.level import LogLevel
from generix.logging.logger import GenerixLogger, StructuredFormatter, get_logger
from generix.logging.protocols import LoggerProtocol

__all__ = [
    # Core interfaces
    "LoggerProtocol",
    "LogLevel",
    # Implementation
    "GenerixLogger",
    "StructuredFormatter",
    "LoggingError",
    # Settings
    "LoggingSettings",
    # Factory functions
    "get_logger",
]
