"""
Validation rule descriptors and the custom validator registry.
"""
from .rules import (
    ValidationRule,
    required,
    email,
    url,
    min_value,
    max_value,
    min_length,
    max_length,
    pattern,
    unique,
    exists,
)
from .ValidatorRegistry import ValidatorRegistry, ConditionalValidator, ValidatorFunc
