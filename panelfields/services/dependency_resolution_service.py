"""
Dependency Resolution Service

Handles resolve-dependencies requests, separated from views.
Single responsibility: validate the request, guard against cycles, resolve, shape the response.
"""

from typing import Any, Dict, Iterable, Mapping

import structlog

from ..common.exceptions import CircularDependencyAPIError, InvalidRequestError
from ..Core.DependencyResolver import DependencyResolver
from ..Core.exceptions import CircularDependencyError
from ..Serializers import ResolveDependenciesRequestSerializer
from ..settings import panel_fields_settings

logger = structlog.get_logger(__name__)


class DependencyResolutionService:
    """
    Service for resolving field dependencies of a resource form.
    """

    @staticmethod
    def parse_request(data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate a request body.

        Returns:
            dict with formData, context (alias-normalized), changedFields, resourceId

        Raises:
            InvalidRequestError: If the body is malformed or the context is not allowed
        """
        serializer = ResolveDependenciesRequestSerializer(data=data)
        if serializer.is_valid():
            return dict(serializer.validated_data)

        errors = serializer.errors
        if 'context' in errors and errors['context']:
            message = str(errors['context'][0])
        else:
            message = 'Invalid request body'
        logger.info("Rejected dependency resolution request", error=message)
        raise InvalidRequestError(message, errors=errors)

    @staticmethod
    def resolve(fields: Iterable[Any], data: Mapping[str, Any], request: Any = None) -> Dict[str, Any]:
        """
        Resolve a request against a set of field declarations.

        Args:
            fields: DependentField declarations of the resource
            data: Raw request body
            request: Passed through to dependency callbacks

        Returns:
            {"fields": {field_key: FieldUpdate.to_dict()}}

        Raises:
            InvalidRequestError: If the request body is invalid
            CircularDependencyAPIError: If the field configuration has a cycle
        """
        payload = DependencyResolutionService.parse_request(data)
        resolver = DependencyResolver(fields, payload['context'])

        if panel_fields_settings.CHECK_CYCLES_ON_REQUEST:
            try:
                resolver.detect_circular_dependencies()
            except CircularDependencyError as e:
                raise CircularDependencyAPIError(e.field_key, str(e), e.path) from e

        updates = resolver.resolve(payload['formData'], payload['changedFields'], request)
        return {
            'fields': {field_key: update.to_dict() for field_key, update in updates.items()}
        }
