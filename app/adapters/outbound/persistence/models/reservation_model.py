# app/adapters/outbound/persistence/models/reservation_model.py

"""
Reservation model.

A reservation holds a plain reference to its client: there is no foreign
key, so deleting a client never cascades and the reference is verified by
the application on every write that sets it.
"""

import uuid
from sqlalchemy import Column, String, DateTime, Text, Uuid
from sqlalchemy.orm import relationship
from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.datetime_utils import utc_now
from app.domain.models.reservation_domain_model import ReservationStatus


class Reservation(Base):
    """
    A scheduled service request tied to one client and one vehicle.

    Attributes:
        id: Unique identifier (UUID)
        client_id: Identifier of the owning client
        vehicle: Vehicle description
        service: Requested service (see ServiceType)
        status: Current status (see ReservationStatus)
        scheduled_date: Date and time of the appointment
        notes: Optional free text
        client: Owning client, None when it no longer exists
    """
    __tablename__ = "reservations"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    vehicle = Column(String(100), nullable=False)
    service = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default=ReservationStatus.PENDING.value, index=True)
    scheduled_date = Column(DateTime(timezone=True), nullable=False, index=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    client = relationship(
        "Client",
        primaryjoin="foreign(Reservation.client_id) == Client.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        """String representation of the Reservation object."""
        return f"<Reservation(client_id={self.client_id}, status={self.status})>"
