"""
Errors of the resolve-dependencies endpoint.

Every error renders to the same body through to_dict():

    {"error": "<message>", "error_code": "<code>", ...extra data}
"""

from typing import Any, Dict, Iterable, Optional


class ResolutionAPIError(Exception):
    """
    Base class for errors returned to the client instead of field updates.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: Optional[str] = None,
        extra_data: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            message: Shown to the client under "error"
            status_code: HTTP status of the response
            error_code: Machine-readable code, defaults to the class name
            extra_data: Merged into the response body
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or self.__class__.__name__
        self.extra_data = extra_data or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body = {'error': self.message, 'error_code': self.error_code}
        body.update(self.extra_data)
        return body


class InvalidRequestError(ResolutionAPIError):
    """Malformed body or unsupported context (400 Bad Request)."""

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None):
        super().__init__(message, extra_data={'errors': errors} if errors else None)


class CircularDependencyAPIError(ResolutionAPIError):
    """Field configuration of the resource contains a cycle (400 Bad Request)."""

    def __init__(self, field_key: str, message: str, cycle: Optional[Iterable[str]] = None):
        super().__init__(
            message,
            error_code='CircularDependency',
            extra_data={'field': field_key, 'cycle': list(cycle or [])},
        )
        self.field_key = field_key
