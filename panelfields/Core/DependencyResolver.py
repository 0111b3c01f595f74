"""
Dependency Resolver Module

Single Responsibility: Turn "these fields changed" into per-field updates.

Flow for one resolve() call:
1. Build the reverse dependency graph from the field list
2. Find every field transitively affected by the changed keys (BFS)
3. For each affected field, run its callback for the resolver's context
4. Collect the non-None FieldUpdates by field key

Unknown keys (in changed fields, in depends_on, as graph targets) and fields
without a callback for the context are skipped, never raised. Callbacks own
their failures: an exception raised by a callback propagates to the caller.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

import structlog

from ..settings import panel_fields_settings
from ..utils.async_safe import call_maybe_async
from ..utils.log_safe import log_safe_output
from .CycleDetector import CycleDetector
from .DependencyGraph import DependencyGraph
from .FieldUpdate import FieldUpdate

logger = structlog.get_logger(__name__)


class DependencyResolver:
    """
    Resolves field dependencies for one resolution context.

    Example:
        resolver = DependencyResolver(fields, "form")
        resolver.detect_circular_dependencies()   # at registration time
        updates = resolver.resolve(form_data, ["country"], request)
    """

    def __init__(self, fields: Iterable[Any], context: Optional[str] = None):
        """
        Args:
            fields: DependentField declarations (anything with key, dependencies
                    and get_dependency_callback(context))
            context: Resolution context, defaults to PANEL_FIELDS['DEFAULT_CONTEXT']
        """
        self.fields = list(fields)
        self.context = context if context is not None else panel_fields_settings.DEFAULT_CONTEXT

    def build_dependency_graph(self) -> DependencyGraph:
        graph = DependencyGraph.from_fields(self.fields)
        logger.debug(
            "Dependency graph built",
            context=self.context,
            graph=log_safe_output(graph.to_dict()),
        )
        return graph

    def find_affected_fields(self, changed_fields: Iterable[str]) -> List[str]:
        return self.build_dependency_graph().find_affected(changed_fields)

    def find_field_by_key(self, key: str) -> Optional[Any]:
        """Linear lookup; the first field with `key` wins. Returns None when unknown."""
        for field in self.fields:
            if field.key == key:
                return field
        return None

    def detect_circular_dependencies(self):
        """
        Raises:
            CircularDependencyError: If the field dependencies contain a cycle
        """
        logger.debug("Circular dependency check started", context=self.context, field_count=len(self.fields))
        CycleDetector(self.build_dependency_graph(), [field.key for field in self.fields]).check()
        logger.debug("Circular dependency check passed", context=self.context)

    def has_circular_dependencies(self) -> bool:
        detector = CycleDetector(self.build_dependency_graph(), [field.key for field in self.fields])
        return detector.find_cycle() is not None

    def resolve(
        self,
        form_data: Optional[Mapping[str, Any]],
        changed_fields: Iterable[str],
        request: Any = None,
    ) -> Dict[str, FieldUpdate]:
        """
        Run the callbacks of every field affected by `changed_fields`.

        Args:
            form_data: Current values of the form, passed to callbacks untouched
            changed_fields: Keys that just changed
            request: Request-scoped object passed to callbacks untouched

        Returns:
            dict of field key -> FieldUpdate, in BFS discovery order; fields whose
            callback returned None are absent
        """
        form_data = form_data if form_data is not None else {}
        changed_fields = list(changed_fields)
        updates: Dict[str, FieldUpdate] = {}

        logger.debug(
            "Dependency resolution started",
            context=self.context,
            changed_fields=changed_fields,
            form_data=log_safe_output(form_data),
            field_count=len(self.fields),
        )

        affected_fields = self.find_affected_fields(changed_fields)

        for field_key in affected_fields:
            field = self.find_field_by_key(field_key)
            if field is None:
                logger.debug("Skipping unknown field", field_key=field_key)
                continue

            callback = field.get_dependency_callback(self.context)
            if callback is None:
                logger.debug(
                    "Skipping field without callback",
                    field_key=field_key,
                    context=self.context,
                    depends_on=field.dependencies,
                )
                continue

            update = call_maybe_async(callback, field, form_data, request)
            if update is None:
                logger.debug("Callback returned no update", field_key=field_key)
                continue

            updates[field_key] = update
            logger.debug("Callback returned update", field_key=field_key, update=log_safe_output(update))

        logger.info(
            "Dependency resolution finished",
            context=self.context,
            changed_fields=changed_fields,
            affected_fields=affected_fields,
            updated_fields=list(updates),
        )
        return updates
