from .Core import (
    FieldUpdate,
    DependencyGraph,
    CycleDetector,
    DependencyResolver,
    DependencyFormMetaClass,
    DependentForm,
)
from .Core.exceptions import (
    FormDependencyError,
    CircularDependencyError,
    NonCallableCallbackError,
    UnknownValidatorError,
)
from .Fields import *
from .Validation import ValidationRule, ValidatorRegistry, ConditionalValidator
