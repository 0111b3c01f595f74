"""
Unit tests for the reverse dependency graph and affected-field search.
"""

from panelfields import DependencyGraph, DependentField


def graph_of(spec):
    """Build a graph from {key: [dependencies]}."""
    return DependencyGraph.from_fields(
        DependentField(key, depends_on=deps) for key, deps in spec.items()
    )


def test_graph_maps_dependency_to_dependents(address_fields):
    graph = DependencyGraph.from_fields(address_fields)
    assert graph.to_dict() == {"country": ["city"], "city": ["district"]}


def test_graph_keeps_field_list_order_for_dependents():
    graph = graph_of({"b": ["a"], "c": ["a"], "d": ["a"]})
    assert graph.get_dependents("a") == ["b", "c", "d"]


def test_graph_keeps_dependencies_on_unknown_keys():
    graph = graph_of({"city": ["ghost"]})
    assert graph.get_dependents("ghost") == ["city"]
    assert graph.get_dependents("nobody") == []


def test_graph_keeps_duplicate_dependencies():
    graph = graph_of({"city": ["country", "country"]})
    assert graph.get_dependents("country") == ["city", "city"]
    assert graph.edge_count() == 2


def test_fields_without_dependencies_add_nothing():
    assert graph_of({"a": [], "b": []}).to_dict() == {}


def test_find_affected_chain_in_bfs_order(address_fields):
    graph = DependencyGraph.from_fields(address_fields)
    assert graph.find_affected(["country"]) == ["city", "district"]


def test_find_affected_level_order():
    graph = graph_of({"city": ["country"], "state": ["country"], "district": ["city"]})
    assert graph.find_affected(["country"]) == ["city", "state", "district"]


def test_find_affected_excludes_changed_keys():
    graph = graph_of({"b": ["a"]})
    assert graph.find_affected(["a"]) == ["b"]


def test_changed_key_reachable_from_another_changed_key_is_affected():
    graph = graph_of({"b": ["a"], "c": ["b"]})
    assert graph.find_affected(["a", "b"]) == ["b", "c"]


def test_find_affected_diamond_reports_each_field_once():
    graph = graph_of({"b": ["a"], "c": ["a"], "d": ["b", "c"]})
    assert graph.find_affected(["a"]) == ["b", "c", "d"]


def test_find_affected_unknown_and_empty_changes():
    graph = graph_of({"b": ["a"]})
    assert graph.find_affected([]) == []
    assert graph.find_affected(["nonexistent"]) == []


def test_find_affected_terminates_on_cycles():
    graph = graph_of({"a": ["c"], "b": ["a"], "c": ["b"]})
    assert set(graph.find_affected(["a"])) == {"a", "b", "c"}


def test_find_affected_self_reference():
    graph = graph_of({"a": ["a"]})
    assert graph.find_affected(["a"]) == ["a"]


def test_find_affected_accepts_generators():
    graph = graph_of({"b": ["a"]})
    assert graph.find_affected(key for key in ["a"]) == ["b"]
