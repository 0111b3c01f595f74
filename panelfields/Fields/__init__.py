"""
Field declarations for the dependency engine.
"""
from .DependentField import (
    DependentField,
    DependencyCallback,
    CREATE_CONTEXT,
    UPDATE_CONTEXT,
)
from .DependencyMixin import DependencyMixin
from .DependentChoiceField import DependentChoiceField, DependentCharField
