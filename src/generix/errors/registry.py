"""Process-wide registry of error categories and codes."""

import threading
from typing import Any


class ErrorRegistry:
    """Singleton holding every ``ErrorCategory`` and ``ErrorCode`` by name.

    Modules declare their categories and codes at import time, so creation is
    idempotent: asking for an existing name returns the registered object.
    """

    _instance = None
    _lock = threading.RLock()

    def __new__(cls) -> "ErrorRegistry":
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def get_category(self, name: str) -> Any:
        """Return the category called ``name``, registering it on first use."""
        with self._lock:
            category = self._categories.get(name)
            if category is None:
                from generix.errors.base import ErrorCategory

                category = ErrorCategory(name)
                self._categories[name] = category
            return category

    def get_code(self, code: str, category_name: str = "INTERNAL") -> Any:
        """Return the error code ``code``, registering it on first use.

        Args:
            code: The error code string
            category_name: Category for a newly registered code; ignored when
                the code already exists

        Returns:
            The registered ErrorCode
        """
        with self._lock:
            error_code = self._codes.get(code)
            if error_code is None:
                from generix.errors.base import ErrorCode

                error_code = ErrorCode(code, self.get_category(category_name))
                self._codes[code] = error_code
            return error_code


registry = ErrorRegistry()
