# app/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
CRUD (Create, Read, Update, Delete) module.

This module exports classes and instances of the CRUD repositories
for the system entities, implementing the Repository pattern.
"""

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.repositories.client_repository import (
    AsyncClientCRUD,
    client_repository,
)
from app.adapters.outbound.persistence.repositories.reservation_repository import (
    AsyncReservationCRUD,
    reservation_repository,
)

__all__ = [
    # Classes
    "AsyncCRUDBase",
    "AsyncClientCRUD",
    "AsyncReservationCRUD",

    # Instances
    "client_repository",
    "reservation_repository",
]
