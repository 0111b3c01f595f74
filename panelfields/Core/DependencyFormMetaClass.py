from typing import Dict

import structlog
from django.forms.forms import DeclarativeFieldsMetaclass

from ..Fields.DependencyMixin import DependencyMixin
from ..Fields.DependentField import DependentField
from .DependencyResolver import DependencyResolver
from .exceptions import NonCallableCallbackError

logger = structlog.get_logger(__name__)

FALLBACK_CALLBACK_SUFFIX = "_dependency_changed"


class DependencyFormMetaClass(DeclarativeFieldsMetaclass):
    """
    Metaclass for Django forms whose fields react to other fields.

    **What it does:**
    1. Scans all form fields for DependencyMixin fields with dependencies or callbacks
    2. Picks up a `{field_name}_dependency_changed` method as the fallback callback
    3. Logs (but tolerates) dependencies on fields the form does not declare
    4. Runs cycle detection, so a form with circular dependencies cannot be defined
    5. Stores the declarations in `_field_dependencies` (field name -> DependentField)
    """

    def __new__(mcls, name, bases, attrs):

        # DeclarativeFieldsMetaclass collects Field class attributes into `base_fields`.
        cls = super().__new__(mcls, name, bases, attrs)

        base_fields = cls.base_fields
        cls._field_dependencies: Dict[str, DependentField] = {}

        for field_name, field in base_fields.items():
            if not isinstance(field, DependencyMixin):
                continue

            fallback = getattr(cls, f"{field_name}{FALLBACK_CALLBACK_SUFFIX}", None)
            if fallback is not None and not callable(fallback):
                raise NonCallableCallbackError(
                    f"{name}.{field_name}{FALLBACK_CALLBACK_SUFFIX} must be a method."
                )

            if not field.has_dependency_facets() and fallback is None:
                continue

            for dependency in field.dependent_on:
                if dependency not in base_fields:
                    logger.warning(
                        "Field depends on an undeclared field",
                        form=name,
                        field=field_name,
                        dependency=dependency,
                    )

            cls._field_dependencies[field_name] = field.as_declaration(field_name, fallback=fallback)

        if cls._field_dependencies:
            DependencyResolver(cls._field_dependencies.values()).detect_circular_dependencies()

        return cls
