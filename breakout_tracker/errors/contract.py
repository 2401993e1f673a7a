"""
Caller contract violations.

Unlike data quality errors these are never recoverable: the caller passed
arguments or configuration that the system cannot work with.
"""

from typing import Any, Optional


class InvalidArgumentError(ValueError):
    """An argument is outside the range the operation accepts."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value
        self.recoverable = False


class ConfigurationError(Exception):
    """Merged configuration failed validation."""

    def __init__(self, message: str, issues: Optional[list] = None):
        super().__init__(message)
        self.issues = issues or []
        self.recoverable = False
