# app/application/use_cases/reservation_use_cases.py (async version)

"""
Service for reservation management.

A reservation must always point to an existing client and, whenever its
date is set, be scheduled strictly in the future.
"""

import logging
from datetime import datetime
from typing import Any, Optional
from fastapi_pagination import set_page
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import Reservation
from app.adapters.outbound.persistence.repositories.client_repository import client_repository
from app.adapters.outbound.persistence.repositories.reservation_repository import reservation_repository
from app.application.dtos.reservation_dto import ReservationCreate, ReservationOutput, ReservationUpdate
from app.application.dtos.response_dto import PaginatedResponse
from app.application.ports.inbound import IReservationUseCase
from app.domain.exceptions import ReservationNotFoundException, ValidationException
from app.domain.models.reservation_domain_model import ReservationStatus
from app.domain.services.integrity_service import ReferentialIntegrityService, parse_identifier
from app.shared.utils.datetime_utils import ensure_utc
from app.shared.utils.input_validation import validate_reservation_data
from app.shared.utils.pagination import PageParams

logger = logging.getLogger(__name__)


class AsyncReservationService(IReservationUseCase):
    """
    Service for reservation management.
    """

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session
        self.integrity = ReferentialIntegrityService(
            db_session, client_repository, reservation_repository
        )

    async def _get_reservation(self, reservation_id: Any) -> Reservation:
        """
        Get a reservation by ID or raise an exception if it doesn't exist.

        Raises:
            InvalidReferenceException: If the ID is not a valid UUID
            ReservationNotFoundException: If the reservation is not found
        """
        reservation_uuid = parse_identifier(reservation_id, detail="Invalid reservation ID")
        reservation = await reservation_repository.get(self.db_session, reservation_uuid)
        if not reservation:
            logger.warning(f"Reservation not found: ID {reservation_uuid}")
            raise ReservationNotFoundException(resource_id=reservation_uuid)
        return reservation

    async def list_reservations(
            self,
            params: PageParams,
            client_id: Optional[str] = None,
            status: Optional[str] = None,
            service: Optional[str] = None,
            start_date: Optional[datetime] = None,
            end_date: Optional[datetime] = None,
    ) -> PaginatedResponse[ReservationOutput]:
        """
        Raises:
            InvalidReferenceException: If ``client_id`` is given but is not a valid UUID
        """
        client_uuid = None
        if client_id:
            client_uuid = parse_identifier(client_id, detail="Invalid client ID")

        query = reservation_repository.search_query(
            client_id=client_uuid,
            status=status,
            service=service,
            start_date=ensure_utc(start_date) if start_date else None,
            end_date=ensure_utc(end_date) if end_date else None,
        )
        with set_page(PaginatedResponse[ReservationOutput]):
            return await reservation_repository.paginate(self.db_session, query, params)

    async def get_reservation(self, reservation_id: str) -> Reservation:
        return await self._get_reservation(reservation_id)

    async def create_reservation(self, data: ReservationCreate) -> Reservation:
        """
        Book a reservation, Pending unless another status is given.

        Raises:
            ValidationException: If any field is missing or invalid
            ClientNotFoundException: If the client does not exist
            InvalidDateException: If the date is not in the future
        """
        payload = data.present_fields()
        errors = validate_reservation_data(payload)
        if errors:
            raise ValidationException(errors=errors)

        client = await self.integrity.ensure_client_exists(payload["client_id"])
        self.integrity.ensure_future_date(payload["scheduled_date"])

        payload["client_id"] = client.id
        payload["scheduled_date"] = ensure_utc(payload["scheduled_date"])
        if not payload.get("status"):
            payload["status"] = ReservationStatus.PENDING.value

        reservation = await reservation_repository.create(self.db_session, obj_in=payload)
        logger.info(f"Reservation created: ID {reservation.id} for client {client.id}")
        return reservation

    async def update_reservation(self, reservation_id: str, data: ReservationUpdate) -> Reservation:
        """
        Update only the fields present in ``data``.

        The client reference and the future-date rule are checked only when
        the corresponding field is part of the update.

        Raises:
            InvalidReferenceException: If an ID is not a valid UUID
            ValidationException: If a present field is invalid
            ReservationNotFoundException: If the reservation is not found
            ClientNotFoundException: If the new client does not exist
            InvalidDateException: If the new date is not in the future
        """
        reservation_uuid = parse_identifier(reservation_id, detail="Invalid reservation ID")
        payload = data.present_fields()
        errors = validate_reservation_data(payload, partial=True)
        if errors:
            raise ValidationException(errors=errors)

        if "client_id" in payload:
            client = await self.integrity.ensure_client_exists(payload["client_id"])
            payload["client_id"] = client.id

        if "scheduled_date" in payload:
            self.integrity.ensure_future_date(payload["scheduled_date"])
            payload["scheduled_date"] = ensure_utc(payload["scheduled_date"])

        reservation = await self._get_reservation(reservation_uuid)
        updated = await reservation_repository.update(
            self.db_session, db_obj=reservation, obj_in=payload
        )
        logger.info(f"Reservation updated: ID {updated.id}")
        return updated

    async def delete_reservation(self, reservation_id: str) -> None:
        reservation = await self._get_reservation(reservation_id)
        await reservation_repository.remove(self.db_session, id=reservation.id)
        logger.info(f"Reservation deleted: ID {reservation.id}")

    async def list_client_reservations(
            self, client_id: str, params: PageParams, status: Optional[str] = None
    ) -> PaginatedResponse[ReservationOutput]:
        """
        List the reservations of one client.

        Raises:
            InvalidReferenceException: If the client ID is not a valid UUID
            ClientNotFoundException: If the client does not exist
        """
        client = await self.integrity.ensure_client_exists(client_id)
        query = reservation_repository.search_query(client_id=client.id, status=status)
        with set_page(PaginatedResponse[ReservationOutput]):
            return await reservation_repository.paginate(self.db_session, query, params)
