# app/application/use_cases/client_use_cases.py (async version)

"""
Service for client management.

This module implements the client operations: listing with filters,
registration, partial updates and guarded deletion.
"""

import logging
from typing import Any, Optional
from fastapi_pagination import set_page
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.models import Client
from app.adapters.outbound.persistence.repositories.client_repository import client_repository
from app.adapters.outbound.persistence.repositories.reservation_repository import reservation_repository
from app.application.dtos.client_dto import ClientCreate, ClientOutput, ClientUpdate
from app.application.dtos.response_dto import PaginatedResponse
from app.application.ports.inbound import IClientUseCase
from app.domain.exceptions import ClientNotFoundException, ValidationException
from app.domain.services.integrity_service import ReferentialIntegrityService, parse_identifier
from app.shared.utils.input_validation import validate_client_data
from app.shared.utils.pagination import PageParams

logger = logging.getLogger(__name__)


class AsyncClientService(IClientUseCase):
    """
    Service for client management.

    Validation runs first and reports every invalid field at once; the
    cross-entity rules (unique email, deletion guard) are delegated to
    ReferentialIntegrityService.
    """

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session
        self.integrity = ReferentialIntegrityService(
            db_session, client_repository, reservation_repository
        )

    async def _get_client(self, client_id: Any) -> Client:
        """
        Get a client by ID or raise an exception if it doesn't exist.

        Raises:
            InvalidReferenceException: If the ID is not a valid UUID
            ClientNotFoundException: If the client is not found
        """
        client_uuid = parse_identifier(client_id, detail="Invalid client ID")
        client = await client_repository.get(self.db_session, client_uuid)
        if not client:
            logger.warning(f"Client not found: ID {client_uuid}")
            raise ClientNotFoundException(resource_id=client_uuid)
        return client

    async def list_clients(
            self, params: PageParams, name: Optional[str] = None, email: Optional[str] = None
    ) -> PaginatedResponse[ClientOutput]:
        query = client_repository.search_query(name=name, email=email)
        with set_page(PaginatedResponse[ClientOutput]):
            return await client_repository.paginate(self.db_session, query, params)

    async def get_client(self, client_id: str) -> Client:
        return await self._get_client(client_id)

    async def create_client(self, data: ClientCreate) -> Client:
        """
        Register a new client.

        Raises:
            ValidationException: If any field is missing or invalid
            DuplicateEmailException: If the email is already registered
        """
        payload = data.present_fields()
        errors = validate_client_data(payload)
        if errors:
            raise ValidationException(errors=errors)

        await self.integrity.ensure_email_unique(payload["email"])

        client = await client_repository.create_with_password(self.db_session, obj_in=payload)
        logger.info(f"Client created: ID {client.id}")
        return client

    async def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        """
        Update only the fields present in ``data``.

        Raises:
            InvalidReferenceException: If the ID is not a valid UUID
            ValidationException: If a present field is invalid
            ClientNotFoundException: If the client is not found
            DuplicateEmailException: If the new email belongs to another client
        """
        client_uuid = parse_identifier(client_id, detail="Invalid client ID")
        payload = data.present_fields()
        errors = validate_client_data(payload, partial=True)
        if errors:
            raise ValidationException(errors=errors)

        client = await self._get_client(client_uuid)

        if "email" in payload:
            await self.integrity.ensure_email_unique(payload["email"], exclude_id=client.id)

        updated = await client_repository.update_with_password(
            self.db_session, db_obj=client, obj_in=payload
        )
        logger.info(f"Client updated: ID {updated.id}")
        return updated

    async def delete_client(self, client_id: str) -> None:
        """
        Delete a client that owns no Pending or In progress reservations.

        Raises:
            InvalidReferenceException: If the ID is not a valid UUID
            ClientNotFoundException: If the client is not found
            HasActiveReservationsException: If the client still has active reservations
        """
        client = await self._get_client(client_id)
        await self.integrity.guard_client_deletion(client.id)
        await client_repository.remove(self.db_session, id=client.id)
        logger.info(f"Client deleted: ID {client.id}")
