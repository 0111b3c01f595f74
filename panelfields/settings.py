"""
Library settings.

Projects configure the library through a `PANEL_FIELDS` dict in Django settings:

    PANEL_FIELDS = {
        'DEFAULT_CONTEXT': 'form',
        'REQUEST_CONTEXTS': ['create', 'update'],
        'CONTEXT_ALIASES': {'edit': 'update'},
        'CHECK_CYCLES_ON_REQUEST': True,
        'LOG_MAX_STRING_LEN': 500,
    }

Values are looked up on every access, so `override_settings` works in tests.
Some defaults can also come from the environment.
"""

from typing import Any, Dict

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .config import get_env_bool, get_env_int, get_env_list

SETTINGS_NAME = 'PANEL_FIELDS'


def _defaults() -> Dict[str, Any]:
    return {
        'DEFAULT_CONTEXT': 'form',
        'REQUEST_CONTEXTS': get_env_list('REQUEST_CONTEXTS', ['create', 'update']),
        'CONTEXT_ALIASES': {'edit': 'update'},
        'CHECK_CYCLES_ON_REQUEST': get_env_bool('CHECK_CYCLES', True),
        'LOG_MAX_STRING_LEN': get_env_int('LOG_MAX_LEN', 500),
    }


class PanelFieldsSettings:
    """
    Attribute access to the merged library settings.
    """

    def __getattr__(self, name: str) -> Any:
        defaults = _defaults()
        if name not in defaults:
            raise AttributeError(f"Invalid {SETTINGS_NAME} setting: '{name}'")
        try:
            user_settings = getattr(settings, SETTINGS_NAME, {})
        except ImproperlyConfigured:
            # used outside a configured Django project
            user_settings = {}
        return user_settings.get(name, defaults[name])


panel_fields_settings = PanelFieldsSettings()
