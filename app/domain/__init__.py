# app/domain/__init__.py

"""
Domain layer: business exceptions, enumerations and domain services.
"""

from app.domain.exceptions import (
    DomainException,
    ValidationException,
    InvalidReferenceException,
    ResourceNotFoundException,
    ClientNotFoundException,
    ReservationNotFoundException,
    ResourceAlreadyExistsException,
    DuplicateEmailException,
    InvalidDateException,
    HasActiveReservationsException,
    DatabaseOperationException,
)
from app.domain.models.reservation_domain_model import (
    ServiceType,
    ReservationStatus,
    ACTIVE_STATUSES,
)

__all__ = [
    "DomainException",
    "ValidationException",
    "InvalidReferenceException",
    "ResourceNotFoundException",
    "ClientNotFoundException",
    "ReservationNotFoundException",
    "ResourceAlreadyExistsException",
    "DuplicateEmailException",
    "InvalidDateException",
    "HasActiveReservationsException",
    "DatabaseOperationException",
    "ServiceType",
    "ReservationStatus",
    "ACTIVE_STATUSES",
]
