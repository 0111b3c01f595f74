"""
Unit tests for DependencyResolver (graph -> affected fields -> callbacks).
"""

import pytest
from django.test import override_settings

from panelfields import CircularDependencyError, DependencyResolver, DependentField, FieldUpdate


def test_chain_resolves_affected_fields_in_bfs_order(address_fields, calls):
    updates = DependencyResolver(address_fields, "form").resolve({"country": "TR"}, ["country"])
    assert list(updates) == ["city", "district"]
    assert calls == ["city", "district"]
    assert updates["city"].to_dict() == {"visible": True}


def test_empty_change_returns_empty_updates(address_fields, calls):
    assert DependencyResolver(address_fields, "form").resolve({}, []) == {}
    assert calls == []


def test_unknown_changed_key_returns_empty_updates(address_fields):
    assert DependencyResolver(address_fields, "form").resolve({}, ["nonexistent"]) == {}


def test_field_without_callback_for_context_is_skipped(address_fields, calls):
    updates = DependencyResolver(address_fields, "filter").resolve({}, ["country"])
    assert updates == {}
    assert calls == []


def test_non_reactive_field_still_propagates_to_its_dependents():
    """city has no callback, but district (depending on city) still reacts."""
    fields = [
        DependentField("country"),
        DependentField("city").depends_on("country"),
        DependentField("district").depends_on("city").on_dependency_change(
            lambda field, data, request: FieldUpdate().set_value(None)
        ),
    ]
    updates = DependencyResolver(fields, "form").resolve({}, ["country"])
    assert list(updates) == ["district"]
    assert updates["district"].to_dict() == {"value": None}


def test_none_from_callback_means_no_change():
    fields = [
        DependentField("a"),
        DependentField("b").depends_on("a").on_dependency_change(lambda field, data, request: None),
        DependentField("c").depends_on("a").on_dependency_change(lambda field, data, request: FieldUpdate().hide()),
    ]
    updates = DependencyResolver(fields, "form").resolve({}, ["a"])
    assert list(updates) == ["c"]


def test_context_specific_callback_wins_over_fallback():
    field = (
        DependentField("city")
        .depends_on("country")
        .on_dependency_change(lambda f, d, r: FieldUpdate().set_value("any"))
        .on_dependency_change_updating(lambda f, d, r: FieldUpdate().set_value("update"))
    )
    fields = [DependentField("country"), field]
    assert DependencyResolver(fields, "update").resolve({}, ["country"])["city"].value == "update"
    assert DependencyResolver(fields, "create").resolve({}, ["country"])["city"].value == "any"


def test_callback_receives_field_form_data_and_request():
    seen = {}

    def callback(field, form_data, request):
        seen.update(field=field, form_data=form_data, request=request)
        return FieldUpdate().set_options({"ist": "Istanbul"} if form_data["country"] == "TR" else {})

    city = DependentField("city").depends_on("country").on_dependency_change(callback)
    request = object()
    form_data = {"country": "TR"}
    updates = DependencyResolver([DependentField("country"), city], "form").resolve(form_data, ["country"], request)

    assert seen == {"field": city, "form_data": form_data, "request": request}
    assert updates["city"].options == {"ist": "Istanbul"}


def test_dependency_on_missing_field_is_ignored():
    fields = [
        DependentField("city").depends_on("country", "ghost").on_dependency_change(
            lambda f, d, r: FieldUpdate().show()
        ),
    ]
    resolver = DependencyResolver(fields, "form")
    resolver.detect_circular_dependencies()
    assert list(resolver.resolve({}, ["ghost"])) == ["city"]


def test_first_field_with_duplicate_key_wins():
    fields = [
        DependentField("a"),
        DependentField("b").depends_on("a").on_dependency_change(lambda f, d, r: FieldUpdate().set_value(1)),
        DependentField("b").depends_on("a").on_dependency_change(lambda f, d, r: FieldUpdate().set_value(2)),
    ]
    assert DependencyResolver(fields, "form").resolve({}, ["a"])["b"].value == 1


def test_resolve_is_loop_safe_on_cyclic_configuration():
    def echo(field, data, request):
        return FieldUpdate().set_value(field.key)

    fields = [
        DependentField("a").depends_on("c").on_dependency_change(echo),
        DependentField("b").depends_on("a").on_dependency_change(echo),
        DependentField("c").depends_on("b").on_dependency_change(echo),
    ]
    resolver = DependencyResolver(fields, "form")
    assert resolver.has_circular_dependencies()
    assert set(resolver.resolve({}, ["a"])) == {"a", "b", "c"}


def test_detect_circular_dependencies_raises():
    fields = [
        DependentField("country").depends_on("city"),
        DependentField("city").depends_on("country"),
    ]
    with pytest.raises(CircularDependencyError):
        DependencyResolver(fields, "form").detect_circular_dependencies()


def test_detect_circular_dependencies_accepts_diamond():
    fields = [
        DependentField("a"),
        DependentField("b").depends_on("a"),
        DependentField("c").depends_on("a"),
        DependentField("d").depends_on("b", "c"),
    ]
    resolver = DependencyResolver(fields, "form")
    resolver.detect_circular_dependencies()
    assert not resolver.has_circular_dependencies()


def test_callback_errors_propagate():
    def broken(field, data, request):
        raise RuntimeError("lookup failed")

    fields = [DependentField("a"), DependentField("b").depends_on("a").on_dependency_change(broken)]
    with pytest.raises(RuntimeError, match="lookup failed"):
        DependencyResolver(fields, "form").resolve({}, ["a"])


@override_settings(PANEL_FIELDS={"DEFAULT_CONTEXT": "filter"})
def test_default_context_comes_from_settings():
    assert DependencyResolver([]).context == "filter"


def test_default_context_is_form():
    assert DependencyResolver([]).context == "form"


def test_async_callback_from_sync_caller():
    async def load(field, data, request):
        return FieldUpdate().set_options({"1": "One"})

    fields = [DependentField("a"), DependentField("b").depends_on("a").on_dependency_change(load)]
    updates = DependencyResolver(fields, "form").resolve({}, ["a"])
    assert updates["b"].options == {"1": "One"}


@pytest.mark.asyncio
async def test_async_callback_inside_running_loop():
    async def load(field, data, request):
        return FieldUpdate().make_required()

    fields = [DependentField("a"), DependentField("b").depends_on("a").on_dependency_change(load)]
    updates = DependencyResolver(fields, "form").resolve({}, ["a"])
    assert updates["b"].required is True
