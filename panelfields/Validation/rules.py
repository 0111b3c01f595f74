"""
Validation rule descriptors.

A ValidationRule only describes a rule (name, parameters, message) so it can be
shipped to the client or attached to a FieldUpdate. Evaluating rules is left to
the validation layer.
"""

from typing import Any, List

from pydantic import BaseModel, Field


class ValidationRule(BaseModel):
    """
    A single validation rule for a field.
    """

    name: str = Field(..., description="Rule name (required, email, min, ...)")
    parameters: List[Any] = Field(default_factory=list, description="Rule parameters")
    message: str = Field(default="", description="Error message shown to the user")


def required() -> ValidationRule:
    return ValidationRule(name="required", message="This field is required")


def email() -> ValidationRule:
    return ValidationRule(name="email", message="This field must be a valid email address")


def url() -> ValidationRule:
    return ValidationRule(name="url", message="This field must be a valid URL")


def min_value(minimum: Any) -> ValidationRule:
    return ValidationRule(
        name="min",
        parameters=[minimum],
        message=f"This field must be at least {minimum}",
    )


def max_value(maximum: Any) -> ValidationRule:
    return ValidationRule(
        name="max",
        parameters=[maximum],
        message=f"This field must be at most {maximum}",
    )


def min_length(length: int) -> ValidationRule:
    return ValidationRule(
        name="minLength",
        parameters=[length],
        message=f"This field must be at least {length} characters",
    )


def max_length(length: int) -> ValidationRule:
    return ValidationRule(
        name="maxLength",
        parameters=[length],
        message=f"This field must be at most {length} characters",
    )


def pattern(regex: str) -> ValidationRule:
    return ValidationRule(name="pattern", parameters=[regex], message="This field format is invalid")


def unique(table: str, column: str) -> ValidationRule:
    """Uniqueness check against a database column; evaluated by the data layer."""
    return ValidationRule(name="unique", parameters=[table, column], message="This value already exists")


def exists(table: str, column: str) -> ValidationRule:
    """Existence check against a database column; evaluated by the data layer."""
    return ValidationRule(name="exists", parameters=[table, column], message="This value does not exist")
