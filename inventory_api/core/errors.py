# File: inventory_api/core/errors.py

"""
Service-level error taxonomy.

Services raise these; the application translates them to HTTP responses
with the matching status code (see ``inventory_api.main``).
"""

from fastapi import status


class ServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ServiceError):
    """Uniqueness violation, e.g. an email that is already registered."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InsufficientStockError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class StoreError(ServiceError):
    """Any failure reported by the document store."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
