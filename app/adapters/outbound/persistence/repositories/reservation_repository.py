# app/adapters/outbound/persistence/repositories/reservation_repository.py (async version)

"""
Repository for reservation operations.

Every read eagerly loads the owning client so that responses can embed
its contact summary.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, Optional
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Select

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import Reservation
from app.application.ports.outbound import IReservationRepository
from app.domain.exceptions import DatabaseOperationException


class AsyncReservationCRUD(AsyncCRUDBase[Reservation], IReservationRepository[Reservation]):
    """
    Async implementation of CRUD repository for the Reservation entity.
    """

    def _base_query(self) -> Select:
        return select(Reservation).options(selectinload(Reservation.client))

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> Reservation:
        reservation = await super().create(db, obj_in=obj_in)
        return await self.get(db, reservation.id)

    async def update(self, db: AsyncSession, *, db_obj: Reservation, obj_in: Dict[str, Any]) -> Reservation:
        reservation = await super().update(db, db_obj=db_obj, obj_in=obj_in)
        return await self.get(db, reservation.id)

    async def count_by_client_and_status(self, db: AsyncSession, client_id: UUID, statuses: Iterable[str]) -> int:
        """
        Count the reservations of a client in any of the given statuses.

        Args:
            db: Async database session
            client_id: Owning client
            statuses: Status values to count

        Returns:
            Number of matching reservations

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = (
                select(func.count())
                .select_from(Reservation)
                .where(Reservation.client_id == client_id, Reservation.status.in_(list(statuses)))
            )
            result = await db.execute(query)
            return result.scalar_one()
        except SQLAlchemyError as e:
            self.logger.error(f"Error counting reservations of client {client_id}: {e}")
            raise DatabaseOperationException(
                detail="Error counting client reservations",
                original_error=e
            )

    def search_query(
            self,
            *,
            client_id: Optional[UUID] = None,
            status: Optional[str] = None,
            service: Optional[str] = None,
            start_date: Optional[datetime] = None,
            end_date: Optional[datetime] = None,
    ) -> Select:
        """
        Build the listing query for the reservation filters.

        Args:
            client_id: Exact owning client
            status: Exact status
            service: Fragment of the service name (case-insensitive)
            start_date: Inclusive lower bound for the scheduled date
            end_date: Inclusive upper bound for the scheduled date

        Returns:
            SELECT of the matching reservations, soonest first
        """
        query = self._base_query()
        if client_id is not None:
            query = query.where(Reservation.client_id == client_id)
        if status:
            query = query.where(Reservation.status == status)
        if service:
            query = query.where(Reservation.service.icontains(service, autoescape=True))
        if start_date is not None:
            query = query.where(Reservation.scheduled_date >= start_date)
        if end_date is not None:
            query = query.where(Reservation.scheduled_date <= end_date)
        return query.order_by(Reservation.scheduled_date.asc(), Reservation.id)


# Singleton instance
reservation_repository = AsyncReservationCRUD(Reservation)
