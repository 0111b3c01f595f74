"""
Dependent Field Module

Single Responsibility: Describe the dependency facets of one form field.

A DependentField is what the dependency engine sees of a field:
- key: identity of the field inside one form
- depends_on: keys of the fields it reacts to (in declaration order)
- callbacks: one callback per resolution context ("form", "filter", "create",
  "update", ...), plus an optional context-independent callback
"""

from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Mapping, Optional

from ..Core.exceptions import NonCallableCallbackError

if TYPE_CHECKING:
    from ..Core.FieldUpdate import FieldUpdate

# callback(field, form_data, request) -> FieldUpdate or None
DependencyCallback = Callable[["DependentField", Dict[str, Any], Any], Optional["FieldUpdate"]]

CREATE_CONTEXT = "create"
UPDATE_CONTEXT = "update"


def _check_callable(key: str, callback: Any, context: Optional[str]) -> None:
    if not callable(callback):
        where = f"context '{context}'" if context else "any context"
        raise NonCallableCallbackError(
            f"Field '{key}' dependency callback for {where} is not callable."
        )


class DependentField:
    """
    Dependency declaration of a single field.

    Example:
        city = (
            DependentField("city")
            .depends_on("country")
            .on_dependency_change(load_cities)
        )
    """

    def __init__(
        self,
        key: str,
        depends_on: Iterable[str] = (),
        callbacks: Optional[Mapping[Optional[str], DependencyCallback]] = None,
        label: Optional[str] = None,
    ):
        self.key = key
        self.label = label
        self._depends_on: List[str] = list(depends_on)
        self._callbacks: Dict[Optional[str], DependencyCallback] = {}
        for context, callback in (callbacks or {}).items():
            self.on_dependency_change(callback, context=context)

    def __repr__(self):
        return f"DependentField(key={self.key!r}, depends_on={self._depends_on!r})"

    @property
    def dependencies(self) -> List[str]:
        """Keys this field depends on. Duplicates and unknown keys are kept as declared."""
        return list(self._depends_on)

    @property
    def contexts(self) -> List[Optional[str]]:
        """Contexts with a registered callback; None stands for the context-independent one."""
        return list(self._callbacks.keys())

    def depends_on(self, *keys: str) -> "DependentField":
        self._depends_on.extend(keys)
        return self

    def on_dependency_change(
        self, callback: DependencyCallback, context: Optional[str] = None
    ) -> "DependentField":
        """
        Register the callback run when one of this field's dependencies changes.

        Args:
            callback: callable(field, form_data, request) -> FieldUpdate or None
            context: Resolution context the callback is for. None registers the
                     fallback used by every context without its own callback.
        """
        _check_callable(self.key, callback, context)
        self._callbacks[context] = callback
        return self

    def on_dependency_change_creating(self, callback: DependencyCallback) -> "DependentField":
        return self.on_dependency_change(callback, context=CREATE_CONTEXT)

    def on_dependency_change_updating(self, callback: DependencyCallback) -> "DependentField":
        return self.on_dependency_change(callback, context=UPDATE_CONTEXT)

    def get_dependency_callback(self, context: Optional[str]) -> Optional[DependencyCallback]:
        """
        Callback for `context`, falling back to the context-independent one.

        Returns:
            The callback, or None when the field is not reactive in `context`
        """
        if context in self._callbacks:
            return self._callbacks[context]
        return self._callbacks.get(None)
