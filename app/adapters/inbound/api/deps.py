# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for database access and the application services.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.database import get_db
from app.application.use_cases.client_use_cases import AsyncClientService
from app.application.use_cases.reservation_use_cases import AsyncReservationService

########################################################################
# Database Session Management
########################################################################

get_session = get_db


########################################################################
# Application Services
########################################################################

async def get_client_service(db: AsyncSession = Depends(get_session)) -> AsyncClientService:
    return AsyncClientService(db)


async def get_reservation_service(db: AsyncSession = Depends(get_session)) -> AsyncReservationService:
    return AsyncReservationService(db)
