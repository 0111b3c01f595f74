"""
Field Update Module

A FieldUpdate is the patch a dependency callback returns for one field.

Every attribute is tri-state:
- never set        -> leave the field untouched (omitted from to_dict())
- set to a value   -> apply exactly that value, including False, "" and {}
- value set to None -> explicit null assignment (distinct from "not set")

"Set" is tracked through pydantic's fields-set bookkeeping, so assigning the
default value still counts as a change.
"""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from ..Validation.rules import ValidationRule


class FieldUpdate(BaseModel):
    """
    Sparse set of changes for a field's client-visible state.

    Setters return the same instance so callbacks can chain them:

        FieldUpdate().show().make_required().set_help_text("Pick a city")
    """

    visible: Optional[bool] = None
    read_only: Optional[bool] = Field(default=None, serialization_alias="readonly")
    required: Optional[bool] = None
    disabled: Optional[bool] = None
    help_text: Optional[str] = Field(default=None, serialization_alias="helpText")
    placeholder: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    value: Any = None
    rules: Optional[List[ValidationRule]] = None

    def show(self) -> "FieldUpdate":
        self.visible = True
        return self

    def hide(self) -> "FieldUpdate":
        self.visible = False
        return self

    def make_read_only(self) -> "FieldUpdate":
        self.read_only = True
        return self

    def make_editable(self) -> "FieldUpdate":
        self.read_only = False
        return self

    def make_required(self) -> "FieldUpdate":
        self.required = True
        return self

    def make_optional(self) -> "FieldUpdate":
        self.required = False
        return self

    def enable(self) -> "FieldUpdate":
        self.disabled = False
        return self

    def disable(self) -> "FieldUpdate":
        self.disabled = True
        return self

    def set_help_text(self, text: str) -> "FieldUpdate":
        self.help_text = text
        return self

    def set_placeholder(self, text: str) -> "FieldUpdate":
        self.placeholder = text
        return self

    def set_options(self, options: Dict[str, Any]) -> "FieldUpdate":
        """Replace the field's options (value -> label). An empty dict clears them."""
        self.options = dict(options)
        return self

    def set_value(self, value: Any) -> "FieldUpdate":
        self.value = value
        return self

    def set_rules(self, rules: Iterable[ValidationRule]) -> "FieldUpdate":
        """Replace the field's validation rules with `rules`."""
        self.rules = list(rules)
        return self

    def add_rule(self, rule: ValidationRule) -> "FieldUpdate":
        """Append a rule, keeping any rules set earlier on this update."""
        self.rules = [*(self.rules or []), rule]
        return self

    def is_set(self, attribute: str) -> bool:
        """True when `attribute` was assigned on this update."""
        return attribute in self.model_fields_set

    def is_empty(self) -> bool:
        return not self.model_fields_set

    def to_dict(self) -> Dict[str, Any]:
        """
        Client representation: only the attributes that were set.

        Returns:
            dict keyed by visible, readonly, required, disabled, helpText,
            placeholder, options, value, rules
        """
        data = self.model_dump(by_alias=True, exclude_unset=True, exclude={"rules"})
        if self.is_set("rules"):
            # nested rules always carry name, parameters and message
            data["rules"] = [rule.model_dump() for rule in self.rules or []]
        return data
