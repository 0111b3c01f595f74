"""
Core components for form field dependency management.
"""
from .exceptions import (
    FormDependencyError,
    CircularDependencyError,
    NonCallableCallbackError,
    UnknownValidatorError,
)
from .FieldUpdate import FieldUpdate
from .DependencyGraph import DependencyGraph
from .CycleDetector import CycleDetector
from .DependencyResolver import DependencyResolver
from .DependencyFormMetaClass import DependencyFormMetaClass
from .DependentForm import DependentForm
