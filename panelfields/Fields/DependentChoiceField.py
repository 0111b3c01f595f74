from django import forms

from .DependencyMixin import DependencyMixin


class DependentChoiceField(DependencyMixin, forms.ChoiceField):
    """
    A ChoiceField whose choices and state are driven by other fields.

    Choices usually come from a FieldUpdate's `options` produced by the
    field's dependency callback.
    """
    pass


class DependentCharField(DependencyMixin, forms.CharField):
    """A CharField that reacts to changes of other fields."""
    pass
