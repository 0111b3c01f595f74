"""
Cycle Detector Module

Single Responsibility: Reject dependency configurations that contain a cycle.

Resolution itself terminates on cyclic graphs; this check runs when fields are
registered (form class creation, application startup).
"""

from typing import Iterable, List, Optional, Set

import structlog

from .DependencyGraph import DependencyGraph
from .exceptions import CircularDependencyError

logger = structlog.get_logger(__name__)


class CycleDetector:
    """
    Depth-first search with an explicit on-stack set.

    `visited` stops re-expansion of explored subtrees; `on_stack` holds only the
    active path and is popped on return, so diamonds (a->b, a->c, b->d, c->d)
    are not reported as cycles.
    """

    def __init__(self, graph: DependencyGraph, field_keys: Iterable[str]):
        self.graph = graph
        self.field_keys = list(field_keys)

    def find_cycle(self) -> Optional[CircularDependencyError]:
        """
        Returns:
            A CircularDependencyError describing the first cycle found, or None
        """
        visited: Set[str] = set()
        on_stack: Set[str] = set()
        path: List[str] = []

        for key in self.field_keys:
            if key in visited:
                continue
            error = self._visit(key, visited, on_stack, path)
            if error is not None:
                return error
        return None

    def check(self):
        """
        Raises:
            CircularDependencyError: If the graph contains a cycle
        """
        error = self.find_cycle()
        if error is not None:
            logger.warning(
                "Circular dependency detected",
                field_key=error.field_key,
                cycle=" -> ".join(error.path),
            )
            raise error

    def _visit(
        self,
        key: str,
        visited: Set[str],
        on_stack: Set[str],
        path: List[str],
    ) -> Optional[CircularDependencyError]:
        visited.add(key)
        on_stack.add(key)
        path.append(key)

        for dependent in self.graph.get_dependents(key):
            if dependent in on_stack:
                cycle = path[path.index(dependent):] + [dependent]
                return CircularDependencyError(dependent, cycle)
            if dependent not in visited:
                error = self._visit(dependent, visited, on_stack, path)
                if error is not None:
                    return error

        path.pop()
        on_stack.discard(key)
        return None
