"""
Custom exceptions for form field dependency management.
"""

from typing import List, Optional


class FormDependencyError(Exception):
    """Base exception for form dependency errors."""
    pass


class CircularDependencyError(FormDependencyError):
    """
    Raised when field dependencies form a cycle.

    Attributes:
        field_key: Key of the field that closed the cycle
        path: Keys on the active dependency path when the cycle was found
    """

    def __init__(self, field_key: str, path: Optional[List[str]] = None):
        self.field_key = field_key
        self.path = list(path) if path else []
        super().__init__(f"circular dependency detected involving field: {field_key}")


class NonCallableCallbackError(FormDependencyError):
    """Raised when a dependency callback is not callable."""
    pass


class UnknownValidatorError(FormDependencyError):
    """Raised when a custom validator name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"custom validator '{name}' not found")
