# app/domain/services/integrity_service.py

"""
Invariants spanning clients and reservations.

Each check re-reads the store through the repository ports and keeps no
state between calls. Checks and the writes that follow are not wrapped in
a transaction: the unique index on ``clients.email`` is what finally
guarantees email uniqueness under concurrent writers, and the deletion
guard is best-effort.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Optional
from uuid import UUID

from app.application.ports.outbound import IClientRepository, IReservationRepository
from app.domain.exceptions import (
    ClientNotFoundException,
    DuplicateEmailException,
    HasActiveReservationsException,
    InvalidDateException,
    InvalidReferenceException,
)
from app.domain.models.reservation_domain_model import ACTIVE_STATUSES
from app.shared.utils.datetime_utils import ensure_utc, utc_now
from app.shared.utils.email_validation import normalize_email

logger = logging.getLogger(__name__)


def parse_identifier(value: Any, detail: str = "Invalid identifier") -> UUID:
    """
    Convert a raw identifier into a UUID.

    Raises:
        InvalidReferenceException: If the value is not a valid UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        raise InvalidReferenceException(detail=detail, resource_id=value)


class ReferentialIntegrityService:
    """
    Domain service enforcing the cross-entity invariants.

    Args:
        db: Session handed to every repository call
        clients: Client repository port
        reservations: Reservation repository port
        clock: Returns the current aware datetime (UTC by default)
    """

    def __init__(
            self,
            db: Any,
            clients: IClientRepository,
            reservations: IReservationRepository,
            clock: Optional[Callable[[], datetime]] = None,
    ):
        self.db = db
        self.clients = clients
        self.reservations = reservations
        self.clock = clock or utc_now

    async def ensure_email_unique(self, email: str, exclude_id: Optional[UUID] = None) -> None:
        """
        Fail when another client already uses ``email``.

        ``exclude_id`` lets a client keep its own current email on update.

        Raises:
            DuplicateEmailException: If the email belongs to a different client
        """
        existing = await self.clients.get_by_email(self.db, normalize_email(email))
        if existing is not None and existing.id != exclude_id:
            logger.warning(f"Email already registered: {normalize_email(email)}")
            raise DuplicateEmailException()

    async def ensure_client_exists(self, client_id: Any):
        """
        Resolve the client referenced by a reservation.

        Returns:
            The referenced client

        Raises:
            InvalidReferenceException: If the identifier is malformed
            ClientNotFoundException: If no such client exists
        """
        client_uuid = parse_identifier(client_id, detail="Invalid client ID")
        client = await self.clients.get(self.db, client_uuid)
        if client is None:
            logger.warning(f"Referenced client not found: {client_uuid}")
            raise ClientNotFoundException(resource_id=client_uuid)
        return client

    def ensure_future_date(self, scheduled_date: datetime) -> None:
        """
        Raises:
            InvalidDateException: If ``scheduled_date`` is not strictly after now
        """
        if ensure_utc(scheduled_date) <= ensure_utc(self.clock()):
            logger.warning(f"Rejected scheduled date in the past: {scheduled_date.isoformat()}")
            raise InvalidDateException()

    async def guard_client_deletion(self, client_id: UUID) -> None:
        """
        Block the deletion of a client that owns active reservations.

        Raises:
            HasActiveReservationsException: If at least one reservation is Pending or In progress
        """
        active = await self.reservations.count_by_client_and_status(
            self.db, client_id, [status.value for status in ACTIVE_STATUSES]
        )
        if active > 0:
            logger.warning(f"Client {client_id} has {active} active reservation(s), deletion blocked")
            raise HasActiveReservationsException(resource_id=client_id, active_count=active)
