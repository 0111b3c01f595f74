"""
Tests for PANEL_FIELDS settings and their environment overrides.
"""

import pytest
from django.test import override_settings

from panelfields.settings import panel_fields_settings


def test_defaults():
    assert panel_fields_settings.DEFAULT_CONTEXT == "form"
    assert panel_fields_settings.REQUEST_CONTEXTS == ["create", "update"]
    assert panel_fields_settings.CONTEXT_ALIASES == {"edit": "update"}
    assert panel_fields_settings.CHECK_CYCLES_ON_REQUEST is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PANEL_FIELDS_CHECK_CYCLES", "false")
    monkeypatch.setenv("PANEL_FIELDS_REQUEST_CONTEXTS", "create, update, ,filter")
    monkeypatch.setenv("PANEL_FIELDS_LOG_MAX_LEN", "80")

    assert panel_fields_settings.CHECK_CYCLES_ON_REQUEST is False
    assert panel_fields_settings.REQUEST_CONTEXTS == ["create", "update", "filter"]
    assert panel_fields_settings.LOG_MAX_STRING_LEN == 80


def test_invalid_integer_falls_back(monkeypatch):
    monkeypatch.setenv("PANEL_FIELDS_LOG_MAX_LEN", "lots")
    assert panel_fields_settings.LOG_MAX_STRING_LEN == 500


@override_settings(PANEL_FIELDS={"DEFAULT_CONTEXT": "filter"})
def test_django_settings_win_over_defaults(monkeypatch):
    monkeypatch.setenv("PANEL_FIELDS_CHECK_CYCLES", "false")
    assert panel_fields_settings.DEFAULT_CONTEXT == "filter"
    assert panel_fields_settings.CHECK_CYCLES_ON_REQUEST is False


def test_unknown_setting():
    with pytest.raises(AttributeError):
        panel_fields_settings.NOT_A_SETTING
