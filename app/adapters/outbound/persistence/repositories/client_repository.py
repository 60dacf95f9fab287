# app/adapters/outbound/persistence/repositories/client_repository.py (async version)

"""
Repository for client operations.

This module implements the repository that performs database operations
related to clients, implementing the IClientRepository interface.
"""

from typing import Optional, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Select

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import Client
from app.adapters.outbound.security.password_hasher import PasswordHasher
from app.application.ports.outbound import IClientRepository
from app.domain.exceptions import DatabaseOperationException, DuplicateEmailException
from app.shared.utils.email_validation import normalize_email


class AsyncClientCRUD(AsyncCRUDBase[Client], IClientRepository[Client]):
    """
    Async implementation of CRUD repository for the Client entity.

    Extends AsyncCRUDBase with client-specific operations,
    such as email lookup, filtered listing and password hashing.
    """

    duplicate_exception = DuplicateEmailException

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[Client]:
        """
        Find a client by email.

        Args:
            db: Async database session
            email: Client's email, compared in normalized form

        Returns:
            Client found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(Client).where(Client.email == normalize_email(email))
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching client by email '{email}': {e}")
            raise DatabaseOperationException(
                detail="Error fetching client by email",
                original_error=e
            )

    def search_query(self, *, name: Optional[str] = None, email: Optional[str] = None) -> Select:
        """
        Build the listing query for partial, case-insensitive name/email filters.

        Args:
            name: Fragment of the name
            email: Fragment of the email

        Returns:
            SELECT of the matching clients, newest first
        """
        query = self._base_query()
        if name:
            query = query.where(Client.name.icontains(name, autoescape=True))
        if email:
            query = query.where(Client.email.icontains(email, autoescape=True))
        return query.order_by(Client.created_at.desc(), Client.id)

    async def create_with_password(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> Client:
        """
        Create a new client storing only the password hash.

        Args:
            db: Async database session
            obj_in: Validated client data with the plain password

        Returns:
            New Client created

        Raises:
            DuplicateEmailException: If the email unique constraint is violated
            DatabaseOperationException: In case of database error
        """
        obj_in_data = dict(obj_in)
        obj_in_data["email"] = normalize_email(obj_in_data["email"])
        obj_in_data["password"] = await PasswordHasher.hash_password(obj_in_data["password"])
        return await self.create(db, obj_in=obj_in_data)

    async def update_with_password(
            self,
            db: AsyncSession,
            *,
            db_obj: Client,
            obj_in: Dict[str, Any]
    ) -> Client:
        """
        Update a client, hashing the password only when it is being changed.

        Args:
            db: Async database session
            db_obj: Client to update
            obj_in: Fields to update

        Returns:
            Updated Client
        """
        update_data = dict(obj_in)
        if "email" in update_data:
            update_data["email"] = normalize_email(update_data["email"])
        if "password" in update_data:
            update_data["password"] = await PasswordHasher.hash_password(update_data["password"])
        return await self.update(db, db_obj=db_obj, obj_in=update_data)


# Singleton instance
client_repository = AsyncClientCRUD(Client)
