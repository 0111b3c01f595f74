"""
Dependent Form Module

This module provides a Django form whose fields can react to other fields.

Architecture:
- DependentForm: field values, rebinding, validation, applying FieldUpdates
- DependencyFormMetaClass: collects declarations and rejects cycles at class creation
- DependencyResolver: finds affected fields and runs their callbacks
"""

from typing import Any, Dict, Iterable, List, Optional

import structlog
from django import forms
from django.forms.utils import ErrorDict

from ..Fields.DependencyMixin import DependencyMixin
from ..Fields.DependentField import DependentField
from .DependencyFormMetaClass import DependencyFormMetaClass, FALLBACK_CALLBACK_SUFFIX
from .DependencyResolver import DependencyResolver
from .FieldUpdate import FieldUpdate

logger = structlog.get_logger(__name__)


class DependentForm(forms.Form, metaclass=DependencyFormMetaClass):
    """
    Base form class for forms with dependent fields.

    Declare dependent fields with DependencyMixin fields and either pass
    callbacks to the field or define `{field_name}_dependency_changed(self,
    field, form_data, request)` on the form:

        class AddressForm(DependentForm):
            country = forms.ChoiceField(choices=COUNTRIES)
            city = DependentChoiceField(dependent_on=["country"])

            def city_dependency_changed(self, field, form_data, request):
                return FieldUpdate().set_options(load_cities(form_data["country"]))
    """

    # Resolution context; None uses PANEL_FIELDS['DEFAULT_CONTEXT']
    dependency_context: Optional[str] = None

    def __init__(self, *args, context: Optional[str] = None, request: Any = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.context = context if context is not None else self.dependency_context
        self.request = request
        self.field_rules: Dict[str, List[Any]] = {}
        self._incremental_data: Dict[str, Any] = {}

    def get_dependent_fields(self) -> List[DependentField]:
        """
        Dependency declarations of this form instance.

        Built from the instance's own field copies, with
        `{field_name}_dependency_changed` bound to this form as fallback callback.
        """
        declarations = []
        for field_name in self._field_dependencies:
            field = self.fields.get(field_name)
            if not isinstance(field, DependencyMixin):
                continue
            fallback = getattr(self, f"{field_name}{FALLBACK_CALLBACK_SUFFIX}", None)
            declarations.append(field.as_declaration(field_name, fallback=fallback))
        return declarations

    def get_resolver(self, context: Optional[str] = None) -> DependencyResolver:
        return DependencyResolver(
            self.get_dependent_fields(),
            context if context is not None else self.context,
        )

    def resolve_dependencies(
        self,
        changed_fields: Iterable[str],
        request: Any = None,
        context: Optional[str] = None,
    ) -> Dict[str, FieldUpdate]:
        """
        Resolve updates for fields affected by `changed_fields`, using the
        form's current values as form data. Nothing is applied to the form.
        """
        return self.get_resolver(context).resolve(
            self.get_all_field_values(),
            changed_fields,
            request if request is not None else self.request,
        )

    def apply_field_updates(self, updates: Dict[str, FieldUpdate]):
        """Apply resolved FieldUpdates to this form's fields."""
        for field_name, update in updates.items():
            self._apply_field_update(field_name, update)

    def _apply_field_update(self, field_name: str, update: FieldUpdate):
        field = self.fields.get(field_name)
        if field is None:
            logger.debug("Skipping update for unknown form field", field=field_name)
            return

        if update.is_set("required"):
            field.required = bool(update.required)
        if update.is_set("disabled"):
            field.disabled = bool(update.disabled)
        if update.is_set("help_text"):
            field.help_text = update.help_text or ""
        if update.is_set("placeholder"):
            self._set_widget_attr(field, "placeholder", update.placeholder)
        if update.is_set("read_only"):
            self._set_widget_attr(field, "readonly", True if update.read_only else None)
        if update.is_set("visible"):
            self._set_widget_attr(field, "hidden", None if update.visible else True)
        if update.is_set("options") and hasattr(field, "choices"):
            field.choices = list((update.options or {}).items())
        if update.is_set("rules"):
            self.field_rules[field_name] = list(update.rules or [])
        if update.is_set("value"):
            self._update_incremental_data(field_name, update.value)
            self._rebind_form()

    @staticmethod
    def _set_widget_attr(field, name: str, value: Any):
        # None removes the attribute
        if value is None:
            field.widget.attrs.pop(name, None)
        else:
            field.widget.attrs[name] = value

    def _get_field_value(self, field_name):
        """
        Get field value from data (bound forms) or initial (unbound forms).

        Returns:
            Field value if found, None otherwise
        """
        if self.is_bound and self.data and field_name in self.data:
            return self.data.get(field_name)
        elif field_name in self.initial:
            return self.initial.get(field_name)
        return None

    def _update_incremental_data(self, field_name, value):
        self._incremental_data[field_name] = value

    def _rebind_form(self):
        """
        Merge incremental data with existing form data and rebind.
        """
        updated_data = {}
        if self.is_bound and self.data:
            # Convert QueryDict to dict if needed
            if hasattr(self.data, 'dict'):
                updated_data.update(self.data.dict())
            else:
                updated_data.update(dict(self.data))
        updated_data.update(self._incremental_data)

        self.data = updated_data
        self.is_bound = True

    def _is_value_changed(self, field_name, new_value) -> bool:
        """
        Compare new value with the current field value.
        None and empty string are treated as the same "empty" value.
        """
        current_value = self.get_field_value(field_name)
        normalized_current = None if (current_value is None or current_value == '') else current_value
        normalized_new = None if (new_value is None or new_value == '') else new_value
        return normalized_current != normalized_new

    def update_field(self, field_name, value, request: Any = None) -> Dict[str, FieldUpdate]:
        """
        Public interface for updating fields incrementally.

        Stores the value, and when it actually changed resolves and applies
        the updates of dependent fields, then validates the field.

        Returns:
            The FieldUpdates applied to dependent fields (empty when unchanged)
        """
        value_changed = self._is_value_changed(field_name, value)

        self._update_incremental_data(field_name, value)
        self._rebind_form()

        if not value_changed:
            return {}

        updates = self.resolve_dependencies([field_name], request=request)
        self.apply_field_updates(updates)
        self._validate_field(field_name)
        return updates

    def get_field_value(self, field_name):
        """
        Get current field value, checking incremental data first.
        """
        if field_name in self._incremental_data:
            return self._incremental_data[field_name]
        return self._get_field_value(field_name)

    def get_all_field_values(self) -> Dict[str, Any]:
        return {field_name: self.get_field_value(field_name) for field_name in self.fields}

    def _validate_field(self, field_name) -> bool:
        """
        Validate a single field and store its errors.

        Returns:
            bool: True if field is valid, False otherwise
        """
        if field_name not in self.fields:
            return False

        field_value = self.get_field_value(field_name)

        # Access _errors directly to avoid triggering full validation
        if self._errors and field_name in self._errors:
            del self._errors[field_name]

        try:
            self.fields[field_name].clean(field_value)
            return True
        except forms.ValidationError as e:
            if self._errors is None:
                self._errors = ErrorDict()
            self._errors[field_name] = self.error_class(e.messages)
            return False
