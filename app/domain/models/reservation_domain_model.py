# app/domain/models/reservation_domain_model.py

from enum import Enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


class ServiceType(str, Enum):
    """Services offered by the workshop."""
    PREVENTIVE_MAINTENANCE = "Preventive maintenance"
    OIL_CHANGE = "Oil change"
    BRAKE_INSPECTION = "Brake inspection"
    ALIGNMENT_AND_BALANCING = "Alignment and balancing"
    ENGINE_INSPECTION = "Engine inspection"
    TIRE_CHANGE = "Tire change"
    ELECTRICAL_INSPECTION = "Electrical inspection"
    GENERAL_DIAGNOSTICS = "General diagnostics"
    OTHER = "Other"


class ReservationStatus(str, Enum):
    """
    Reservation status.

    There is no enforced transition graph: any status may be set from any other.
    """
    PENDING = "Pending"
    IN_PROGRESS = "In progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


# Statuses that block the deletion of the owning client
ACTIVE_STATUSES = (ReservationStatus.PENDING, ReservationStatus.IN_PROGRESS)


@dataclass
class Reservation:
    """Domain model for a scheduled service request."""
    id: UUID
    client_id: UUID
    vehicle: str
    service: ServiceType
    scheduled_date: datetime
    status: ReservationStatus = ReservationStatus.PENDING
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
