from typing import Any, List

from django.core.exceptions import ImproperlyConfigured
from rest_framework.response import Response
from rest_framework.views import APIView

from ..common.exceptions import ResolutionAPIError
from ..services import DependencyResolutionService


class DependencyResolverView(APIView):
    """
    POST endpoint resolving dependent field updates for a resource form.

    Set `form_class` to a DependentForm subclass, or override
    get_dependency_fields() to return DependentField declarations.
    """
    form_class = None

    def get_dependency_fields(self, request) -> List[Any]:
        if self.form_class is None:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} requires either 'form_class' "
                f"or an override of get_dependency_fields()."
            )
        return self.form_class(request=request).get_dependent_fields()

    def post(self, request, *args, **kwargs):
        """Resolve updates for the fields affected by `changedFields`."""
        try:
            result = DependencyResolutionService.resolve(
                self.get_dependency_fields(request),
                request.data,
                request,
            )
        except ResolutionAPIError as exc:
            return Response(exc.to_dict(), status=exc.status_code)
        return Response(result)
