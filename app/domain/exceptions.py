# app/domain/exceptions.py

"""
Domain exceptions for the application.

These exceptions are framework-agnostic: they carry an HTTP status code,
a human readable detail and an internal code, and are translated into
the JSON envelope by the exception middleware.
"""

from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """
    Base exception for every business rule violation raised by the application.
    """

    status_code: int = 400
    internal_code: str = "DOMAIN_ERROR"

    def __init__(
            self,
            detail: str = "Business rule violation",
            errors: Optional[List[Dict[str, Any]]] = None,
            status_code: Optional[int] = None,
            internal_code: Optional[str] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.errors = errors or []
        if status_code is not None:
            self.status_code = status_code
        if internal_code is not None:
            self.internal_code = internal_code


class ValidationException(DomainException):
    """One or more fields failed shape, range or enum validation."""

    internal_code = "INVALID_INPUT"

    def __init__(self, errors: List[Dict[str, Any]], detail: str = "Validation errors"):
        super().__init__(detail=detail, errors=errors)


class InvalidReferenceException(DomainException):
    """An identifier is not syntactically valid."""

    internal_code = "INVALID_REFERENCE"

    def __init__(self, detail: str = "Invalid identifier", resource_id: Any = None):
        resource_info = f" ({resource_id})" if resource_id is not None else ""
        super().__init__(detail=f"{detail}{resource_info}")
        self.resource_id = resource_id


class ResourceNotFoundException(DomainException):
    """Resource not found."""

    status_code = 404
    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(detail=f"{detail}{resource_info}")
        self.resource_id = resource_id


class ClientNotFoundException(ResourceNotFoundException):
    def __init__(self, resource_id: Any = None):
        super().__init__(detail="Client not found", resource_id=resource_id)


class ReservationNotFoundException(ResourceNotFoundException):
    def __init__(self, resource_id: Any = None):
        super().__init__(detail="Reservation not found", resource_id=resource_id)


class ResourceAlreadyExistsException(DomainException):
    """Resource already exists."""

    status_code = 409
    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(detail=detail)


class DuplicateEmailException(ResourceAlreadyExistsException):
    """The email is already registered for another client."""

    status_code = 400
    internal_code = "DUPLICATE_EMAIL"

    def __init__(self, detail: str = "Email is already registered"):
        super().__init__(detail=detail)


class InvalidDateException(DomainException):
    """The scheduled date is not strictly in the future."""

    internal_code = "INVALID_DATE"

    def __init__(self, detail: str = "Scheduled date must be in the future"):
        super().__init__(detail=detail)


class HasActiveReservationsException(DomainException):
    """The client still owns Pending or In progress reservations."""

    internal_code = "HAS_ACTIVE_RESERVATIONS"

    def __init__(self, resource_id: Any = None, active_count: int = 0):
        super().__init__(
            detail="Client cannot be deleted because it has active reservations"
        )
        self.resource_id = resource_id
        self.active_count = active_count


class DatabaseOperationException(DomainException):
    """Unexpected failure while talking to the persistence store."""

    status_code = 500
    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(detail=f"{detail}{error_info}")
        self.original_error = original_error
