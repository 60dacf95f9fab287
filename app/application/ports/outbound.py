# app/application/ports/outbound.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Generic, Iterable, Optional, TypeVar
from uuid import UUID

T = TypeVar('T')


class IRepository(Generic[T], ABC):
    """Generic repository interface. Every call receives the active session."""

    @abstractmethod
    async def get(self, db: Any, id: Any) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def create(self, db: Any, *, obj_in: Dict[str, Any]) -> T:
        """Create a new entity."""
        pass

    @abstractmethod
    async def update(self, db: Any, *, db_obj: T, obj_in: Dict[str, Any]) -> T:
        """Update an existing entity."""
        pass

    @abstractmethod
    async def remove(self, db: Any, *, id: Any) -> T:
        """Delete an entity by ID."""
        pass

    @abstractmethod
    async def paginate(self, db: Any, query: Any, params: Any) -> Any:
        """Run a query built by this repository and return one page of it."""
        pass


class IClientRepository(IRepository[T], ABC):
    """Client repository interface."""

    @abstractmethod
    async def get_by_email(self, db: Any, email: str) -> Optional[T]:
        """Get client by normalized email."""
        pass

    @abstractmethod
    def search_query(self, *, name: Optional[str] = None, email: Optional[str] = None) -> Any:
        """Query of the clients matching the filters, newest first."""
        pass


class IReservationRepository(IRepository[T], ABC):
    """Reservation repository interface."""

    @abstractmethod
    async def count_by_client_and_status(self, db: Any, client_id: UUID, statuses: Iterable[str]) -> int:
        """Count the reservations of a client whose status is one of ``statuses``."""
        pass

    @abstractmethod
    def search_query(
            self,
            *,
            client_id: Optional[UUID] = None,
            status: Optional[str] = None,
            service: Optional[str] = None,
            start_date: Optional[datetime] = None,
            end_date: Optional[datetime] = None,
    ) -> Any:
        """Query of the reservations matching the filters, soonest first."""
        pass
