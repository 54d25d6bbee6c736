# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix

"""
Logging interface definitions for generix.

Anything satisfying ``LoggerProtocol`` can be handed to a container that logs,
which keeps the containers independent of the concrete logger.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """
    Protocol defining the interface for loggers in generix.

    Keyword arguments are structured context attached to the record.
    """

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a debug message."""
        ...

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an info message."""
        ...

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log a warning message."""
        ...

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an error message."""
        ...

    def critical(self, msg: str, **kwargs: Any) -> None:
        """Log a critical message."""
        ...

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an error message with the active exception attached."""
        ...
