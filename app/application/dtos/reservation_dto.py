# app/application/dtos/reservation_dto.py

"""
Schemas for reservation data.
"""

from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import ConfigDict, Field

from app.application.dtos.base_dto import CustomBaseModel, TrimmedStr
from app.application.dtos.client_dto import ClientSummary
from app.domain.models.reservation_domain_model import ServiceType, ReservationStatus


class ReservationCreate(CustomBaseModel):
    """
    Schema for creating a reservation.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "required": ["clientId", "vehicle", "service", "scheduledDate"],
            "example": {
                "clientId": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "vehicle": "Toyota Corolla 2018",
                "service": ServiceType.OIL_CHANGE.value,
                "scheduledDate": "2030-01-15T10:00:00Z",
                "notes": "Synthetic oil",
            },
        }
    )

    client_id: Optional[TrimmedStr] = Field(None, description="Identifier of an existing client.")
    vehicle: Optional[TrimmedStr] = Field(None, description="Vehicle description, 2 to 100 characters.")
    service: Optional[TrimmedStr] = Field(None, description="One of the offered service types.")
    scheduled_date: Optional[datetime] = Field(None, description="Appointment date, must be in the future.")
    status: Optional[TrimmedStr] = Field(None, description="Initial status, Pending by default.")
    notes: Optional[TrimmedStr] = Field(None, description="Free text, up to 500 characters.")


class ReservationUpdate(CustomBaseModel):
    """
    Schema for a partial reservation update.
    """
    model_config = ConfigDict(json_schema_extra={"example": {"status": ReservationStatus.IN_PROGRESS.value}})

    client_id: Optional[TrimmedStr] = Field(None, description="Identifier of an existing client.")
    vehicle: Optional[TrimmedStr] = Field(None, description="Vehicle description, 2 to 100 characters.")
    service: Optional[TrimmedStr] = Field(None, description="One of the offered service types.")
    scheduled_date: Optional[datetime] = Field(None, description="Appointment date, must be in the future.")
    status: Optional[TrimmedStr] = Field(None, description="Any status; there is no enforced transition order.")
    notes: Optional[TrimmedStr] = Field(None, description="Free text, up to 500 characters; null clears it.")


class ReservationOutput(CustomBaseModel):
    """
    Schema for returning reservation data with the owning client's contact.
    """
    id: UUID
    client_id: UUID
    client: Optional[ClientSummary] = Field(None, description="Owning client, null if it no longer exists.")
    vehicle: str
    service: ServiceType
    status: ReservationStatus
    scheduled_date: datetime
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
