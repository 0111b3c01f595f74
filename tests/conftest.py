"""
Test bootstrap: configure a minimal Django project for forms and DRF.
"""

import django
import pytest
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='dummy-secret-key-for-testing',
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'rest_framework',
            ],
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            REST_FRAMEWORK={
                'DEFAULT_AUTHENTICATION_CLASSES': [],
                'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
                'UNAUTHENTICATED_USER': None,
            },
        )
        django.setup()


@pytest.fixture
def calls():
    """Keys of the fields whose callback ran, in call order."""
    return []


@pytest.fixture
def address_fields(calls):
    """country -> city -> district, every dependent reactive in the "form" context."""
    from panelfields import DependentField, FieldUpdate

    def on_change(field, form_data, request):
        calls.append(field.key)
        return FieldUpdate().show()

    return [
        DependentField("country"),
        DependentField("city").depends_on("country").on_dependency_change(on_change, context="form"),
        DependentField("district").depends_on("city").on_dependency_change(on_change, context="form"),
    ]
