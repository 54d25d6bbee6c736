# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: generix
"""
generix: element-checked generic containers with structured errors and logging.
"""

__version__ = "0.1.0"
