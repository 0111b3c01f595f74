from rest_framework import serializers

from ..settings import panel_fields_settings


def normalize_context(value: str) -> str:
    """Map context aliases (e.g. 'edit') to their canonical name."""
    return panel_fields_settings.CONTEXT_ALIASES.get(value, value)


class ResolveDependenciesRequestSerializer(serializers.Serializer):
    """
    Body of a resolve-dependencies request:

        {"formData": {...}, "context": "update", "changedFields": ["country"], "resourceId": 12}
    """
    formData = serializers.DictField(default=dict)
    context = serializers.CharField()
    changedFields = serializers.ListField(child=serializers.CharField(), default=list)
    resourceId = serializers.JSONField(required=False, allow_null=True)

    def validate_context(self, value):
        context = normalize_context(value)
        allowed = list(panel_fields_settings.REQUEST_CONTEXTS)
        if context not in allowed:
            choices = " or ".join(f"'{name}'" for name in allowed)
            raise serializers.ValidationError(f"Invalid context. Must be {choices}")
        return context
