"""
Unit tests for circular dependency detection.
"""

import pytest

from panelfields import CircularDependencyError, CycleDetector, DependencyGraph, DependentField


def detector_for(graph):
    fields = [DependentField(key, depends_on=deps) for key, deps in graph.items()]
    return CycleDetector(DependencyGraph.from_fields(fields), [field.key for field in fields])


def test_two_field_cycle_is_detected():
    with pytest.raises(CircularDependencyError) as exc_info:
        detector_for({"a": ["b"], "b": ["a"]}).check()
    assert exc_info.value.field_key in {"a", "b"}
    assert "circular dependency" in str(exc_info.value)


def test_three_field_cycle_names_a_member():
    error = detector_for({"a": ["b"], "b": ["c"], "c": ["a"]}).find_cycle()
    assert error is not None
    assert error.field_key in {"a", "b", "c"}
    assert error.path[0] == error.path[-1]
    assert set(error.path) == {"a", "b", "c"}


def test_self_reference_is_a_cycle():
    error = detector_for({"a": ["a"]}).find_cycle()
    assert error is not None
    assert error.field_key == "a"
    assert error.path == ["a", "a"]


def test_diamond_is_not_a_cycle():
    """a -> b, a -> c, b -> d, c -> d reaches d twice without a cycle."""
    detector = detector_for({"a": [], "b": ["a"], "c": ["a"], "d": ["b", "c"]})
    assert detector.find_cycle() is None
    detector.check()


def test_chain_is_not_a_cycle():
    assert detector_for({"country": [], "city": ["country"], "district": ["city"]}).find_cycle() is None


def test_wider_acyclic_graph():
    declared = {"a": [], "b": ["a"], "c": ["a"], "d": ["b", "c"], "e": ["c"], "f": ["d", "e"]}
    assert detector_for(declared).find_cycle() is None


def test_cycle_away_from_first_field_is_found():
    declared = {"root": [], "x": ["root"], "y": ["z"], "z": ["y"]}
    error = detector_for(declared).find_cycle()
    assert error is not None
    assert error.field_key in {"y", "z"}


def test_unknown_dependency_is_not_a_cycle():
    assert detector_for({"city": ["ghost"]}).find_cycle() is None
