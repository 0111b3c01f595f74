"""
Dependency Mixin Module

Single Responsibility: Let any Django form field carry dependency facets.

The `dependent_on` and `callbacks` attributes are immutable after initialization.
Django deep-copies declared fields per form instance, so each form gets its own
copy of the facets.
"""

from typing import Any, Dict, Optional

from .DependentField import DependentField, DependencyCallback, _check_callable


class DependencyMixin:
    """
    Mixin for django.forms.Field subclasses.

    Example:
        class DependentCharField(DependencyMixin, forms.CharField):
            pass

        district = DependentCharField(dependent_on=["city"], callbacks={"form": refresh})

    `on_change` is shorthand for a context-independent callback.
    """

    def __init__(self, *args, dependent_on=None, callbacks=None, on_change=None, **kwargs):
        super().__init__(*args, **kwargs)
        # Store as tuple for immutability
        self._dependent_on = tuple(dependent_on) if dependent_on else ()
        merged: Dict[Optional[str], DependencyCallback] = dict(callbacks or {})
        if on_change is not None:
            merged[None] = on_change
        for context, callback in merged.items():
            _check_callable(getattr(self, "label", None) or self.__class__.__name__, callback, context)
        self._callbacks = merged

    @property
    def dependent_on(self):
        """Read-only list of field names this field depends on."""
        return list(self._dependent_on)

    @dependent_on.setter
    def dependent_on(self, value):
        raise AttributeError("'dependent_on' is read-only after initialization")

    @property
    def callbacks(self) -> Dict[Optional[str], DependencyCallback]:
        """Read-only copy of the context -> callback mapping."""
        return dict(self._callbacks)

    @callbacks.setter
    def callbacks(self, value):
        raise AttributeError("'callbacks' is read-only after initialization")

    def has_dependency_facets(self) -> bool:
        return bool(self._dependent_on or self._callbacks)

    def as_declaration(self, key: str, fallback: Optional[DependencyCallback] = None) -> DependentField:
        """
        Build the DependentField the engine works with.

        Args:
            key: The field's name in its form
            fallback: Context-independent callback used when the field declares none
        """
        callbacks: Dict[Optional[str], Any] = dict(self._callbacks)
        if None not in callbacks and fallback is not None:
            callbacks[None] = fallback
        return DependentField(
            key,
            depends_on=self._dependent_on,
            callbacks=callbacks,
            label=str(self.label) if getattr(self, "label", None) else None,
        )
