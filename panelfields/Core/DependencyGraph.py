"""
Dependency Graph Module

Single Responsibility: Hold the reverse dependency graph of a field list and
answer reachability questions on it.

The graph maps a dependency key to the keys that declared it:
if `city` depends on `country`, then graph["country"] == ["city"].
It is rebuilt for every resolution and never cached.
"""

from typing import TYPE_CHECKING, Dict, Iterable, List

import structlog

if TYPE_CHECKING:
    from ..Fields.DependentField import DependentField

logger = structlog.get_logger(__name__)


class DependencyGraph:
    """
    Reverse adjacency map: dependency key -> dependent keys (field-list order).
    """

    def __init__(self, dependents: Dict[str, List[str]] = None):
        self.dependents: Dict[str, List[str]] = dependents if dependents is not None else {}

    @classmethod
    def from_fields(cls, fields: Iterable["DependentField"]) -> "DependencyGraph":
        """
        Build the graph from field declarations.

        Dependencies on keys that are not in `fields` are kept; they are simply
        never triggered unless that key shows up in a changed-field list.
        """
        graph = cls()
        for field in fields:
            for dependency in field.dependencies:
                graph.add_edge(dependency, field.key)
        return graph

    def add_edge(self, dependency: str, dependent: str):
        self.dependents.setdefault(dependency, []).append(dependent)

    def get_dependents(self, key: str) -> List[str]:
        """Direct dependents of `key`; unknown keys have none."""
        return self.dependents.get(key, [])

    def edge_count(self) -> int:
        return sum(len(keys) for keys in self.dependents.values())

    def find_affected(self, changed_keys: Iterable[str]) -> List[str]:
        """
        Breadth-first search from the changed keys over dependent edges.

        Args:
            changed_keys: Keys whose value just changed (unknown keys are fine)

        Returns:
            Affected keys in discovery (level) order. A changed key is only
            included when it is also a dependent of another visited key.
        """
        # dict as an insertion-ordered set
        changed = list(changed_keys)
        affected: Dict[str, None] = {}
        visited = set()
        queue = list(changed)
        head = 0

        while head < len(queue):
            current = queue[head]
            head += 1
            if current in visited:
                continue
            visited.add(current)

            for dependent in self.get_dependents(current):
                affected.setdefault(dependent, None)
                if dependent not in visited:
                    queue.append(dependent)

        result = list(affected)
        logger.debug("Affected fields found", changed=changed, affected=result)
        return result

    def to_dict(self) -> Dict[str, List[str]]:
        return {key: list(keys) for key, keys in self.dependents.items()}
