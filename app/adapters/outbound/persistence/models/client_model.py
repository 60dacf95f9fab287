# app/adapters/outbound/persistence/models/client_model.py

"""
Client model.

Defines the customers of the workshop who may schedule services.
"""

import uuid
from sqlalchemy import Column, String, Integer, DateTime, Uuid
from app.adapters.outbound.persistence.models.base_model import Base
from app.shared.utils.datetime_utils import utc_now


class Client(Base):
    """
    A customer of the vehicle-parts business.

    Attributes:
        id: Unique identifier (UUID)
        name: Full name
        email: Normalized email, unique among clients
        password: bcrypt hash of the password
        phone: Phone number
        age: Age in years
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """
    __tablename__ = "clients"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(50), nullable=False)
    # Backstop for the application-level uniqueness check
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=False)
    age = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    def __repr__(self) -> str:
        """String representation of the Client object."""
        return f"<Client(email={self.email})>"
