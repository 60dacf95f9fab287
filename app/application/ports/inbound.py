# app/application/ports/inbound.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from app.application.dtos.client_dto import ClientCreate, ClientUpdate
from app.application.dtos.reservation_dto import ReservationCreate, ReservationUpdate
from app.shared.utils.pagination import PageParams


class IClientUseCase(ABC):
    """Interface for client-related use cases."""

    @abstractmethod
    async def list_clients(
            self, params: PageParams, name: Optional[str] = None, email: Optional[str] = None
    ) -> Any:
        """List clients with filters, one page at a time."""
        pass

    @abstractmethod
    async def get_client(self, client_id: str) -> Any:
        """Get a client by ID."""
        pass

    @abstractmethod
    async def create_client(self, data: ClientCreate) -> Any:
        """Register a new client."""
        pass

    @abstractmethod
    async def update_client(self, client_id: str, data: ClientUpdate) -> Any:
        """Partially update a client."""
        pass

    @abstractmethod
    async def delete_client(self, client_id: str) -> None:
        """Delete a client without active reservations."""
        pass


class IReservationUseCase(ABC):
    """Interface for reservation-related use cases."""

    @abstractmethod
    async def list_reservations(
            self,
            params: PageParams,
            client_id: Optional[str] = None,
            status: Optional[str] = None,
            service: Optional[str] = None,
            start_date: Optional[datetime] = None,
            end_date: Optional[datetime] = None,
    ) -> Any:
        """List reservations with filters, one page at a time."""
        pass

    @abstractmethod
    async def get_reservation(self, reservation_id: str) -> Any:
        """Get a reservation by ID."""
        pass

    @abstractmethod
    async def create_reservation(self, data: ReservationCreate) -> Any:
        """Book a new reservation for an existing client."""
        pass

    @abstractmethod
    async def update_reservation(self, reservation_id: str, data: ReservationUpdate) -> Any:
        """Partially update a reservation."""
        pass

    @abstractmethod
    async def delete_reservation(self, reservation_id: str) -> None:
        """Delete a reservation."""
        pass

    @abstractmethod
    async def list_client_reservations(
            self, client_id: str, params: PageParams, status: Optional[str] = None
    ) -> Any:
        """List the reservations of one existing client."""
        pass
