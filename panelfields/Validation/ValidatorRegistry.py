"""
Custom Validator Registry

Single Responsibility: Hold named custom validators for one application/form setup.

The registry is a plain value: build one, register validators on it, and pass it
to whatever needs it. There is no module-level instance, so tests and separate
admin panels never share validators by accident.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import structlog

from ..Core.exceptions import UnknownValidatorError

logger = structlog.get_logger(__name__)

# validator(value, context) -> None; raises django.core.exceptions.ValidationError when invalid
ValidatorFunc = Callable[[Any, Any], None]


class ValidatorRegistry:
    """
    Named custom validators.

    Validators follow Django's convention: they return nothing when the value
    is valid and raise ValidationError otherwise.
    """

    def __init__(self, validators: Optional[Dict[str, ValidatorFunc]] = None):
        self._validators: Dict[str, ValidatorFunc] = {}
        for name, validator in (validators or {}).items():
            self.register(name, validator)

    def register(self, name: str, validator: ValidatorFunc) -> "ValidatorRegistry":
        """
        Register (or replace) a validator under a name.

        Args:
            name: Name used to look the validator up
            validator: Callable taking (value, context)

        Returns:
            The registry itself, for chaining
        """
        if not callable(validator):
            raise TypeError(f"Validator '{name}' must be callable")
        if name in self._validators:
            logger.debug("Replacing custom validator", validator=name)
        self._validators[name] = validator
        return self

    def get(self, name: str) -> Optional[ValidatorFunc]:
        return self._validators.get(name)

    def has(self, name: str) -> bool:
        return name in self._validators

    def names(self):
        return list(self._validators.keys())

    def apply(self, name: str, value: Any, context: Any = None) -> None:
        """
        Run a registered validator.

        Raises:
            UnknownValidatorError: If no validator is registered under `name`
            ValidationError: Raised by the validator when the value is invalid
        """
        validator = self.get(name)
        if validator is None:
            raise UnknownValidatorError(name)
        validator(value, context)


@dataclass(frozen=True)
class ConditionalValidator:
    """Runs `validator` only when `condition(context)` holds."""

    condition: Callable[[Any], bool]
    validator: ValidatorFunc

    def __call__(self, value: Any, context: Any = None) -> None:
        if self.condition(context):
            self.validator(value, context)
