# app/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

Exports every SQLAlchemy model so that ``Base.metadata`` is complete
whenever this package is imported.
"""

from app.adapters.outbound.persistence.models.base_model import Base
from app.adapters.outbound.persistence.models.client_model import Client
from app.adapters.outbound.persistence.models.reservation_model import Reservation

__all__ = [
    "Base",
    "Client",
    "Reservation",
]
