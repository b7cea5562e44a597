"""Exception hierarchy for structured error responses.

``AppException`` subclasses are client-facing: they carry an error ``code`` and
HTTP ``status_code`` and are rendered by the application's exception handler.
``ConfigurationError`` and ``LinkResolutionError`` are not ``AppException``
subclasses: they signal deployment defects and surface as a generic 500
through the catch-all handler.
"""

from __future__ import annotations


class AppException(Exception):
    """Base exception for all domain errors.

    Subclasses set ``code`` and ``status_code`` at the class level; callers
    provide ``message`` and an optional ``details`` list.
    """

    code: str = "APP_ERROR"
    status_code: int = 500

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []


class BadRequestException(AppException):
    code = "BAD_REQUEST"
    status_code = 400


class InvalidSortExpressionException(BadRequestException):
    code = "INVALID_SORT_EXPRESSION"


class InvalidFieldsException(BadRequestException):
    code = "INVALID_FIELDS"


class NotFoundException(AppException):
    code = "NOT_FOUND"
    status_code = 404


class ValidationException(AppException):
    code = "VALIDATION_ERROR"
    status_code = 422


class ConfigurationError(RuntimeError):
    """A property mapping was requested for a type pair that was never registered,
    or a registration is inconsistent."""


class LinkResolutionError(RuntimeError):
    """A named route could not be turned into a URI while building links."""
