# app/adapters/inbound/api/v1/endpoints/reservation_endpoint.py (async version)

from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status

from app.adapters.inbound.api.deps import get_reservation_service
from app.application.dtos.reservation_dto import (
    ReservationCreate,
    ReservationOutput,
    ReservationUpdate,
)
from app.application.dtos.response_dto import (
    ERROR_RESPONSES,
    DataResponse,
    MessageResponse,
    PaginatedResponse,
)
from app.application.use_cases.reservation_use_cases import AsyncReservationService
from app.shared.utils.pagination import PageParams, pagination_params

router = APIRouter()


@router.get(
    "",
    response_model=PaginatedResponse[ReservationOutput],
    summary="List Reservations - Paginated reservation list",
    description=(
        "Returns reservations ordered by scheduled date. Filters: exact `clientId` and `status`, "
        "partial `service`, inclusive `startDate`/`endDate` range."
    ),
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
)
async def list_reservations(
        params: PageParams = Depends(pagination_params),
        client_id: Optional[str] = Query(None, alias="clientId", description="Owning client ID"),
        reservation_status: Optional[str] = Query(None, alias="status", description="Exact status"),
        service_type: Optional[str] = Query(None, alias="service", description="Part of the service name"),
        start_date: Optional[datetime] = Query(None, alias="startDate", description="Earliest scheduled date"),
        end_date: Optional[datetime] = Query(None, alias="endDate", description="Latest scheduled date"),
        service: AsyncReservationService = Depends(get_reservation_service),
):
    return await service.list_reservations(
        params,
        client_id=client_id,
        status=reservation_status,
        service=service_type,
        start_date=start_date,
        end_date=end_date,
    )


# Declared before "/{reservation_id}" so "client" is not taken as an ID
@router.get(
    "/client/{client_id}",
    response_model=PaginatedResponse[ReservationOutput],
    summary="List Client Reservations - Reservations of one client",
    description="Returns the reservations of an existing client, optionally filtered by status.",
    responses=ERROR_RESPONSES,
)
async def list_client_reservations(
        client_id: str = Path(..., description="ID of the client"),
        params: PageParams = Depends(pagination_params),
        reservation_status: Optional[str] = Query(None, alias="status", description="Exact status"),
        service: AsyncReservationService = Depends(get_reservation_service),
):
    return await service.list_client_reservations(
        client_id, params, status=reservation_status
    )


@router.get(
    "/{reservation_id}",
    response_model=DataResponse[ReservationOutput],
    summary="Get Reservation - Reservation data by ID",
    description="Returns the reservation with the contact data of its client.",
    responses=ERROR_RESPONSES,
)
async def get_reservation(
        reservation_id: str = Path(..., description="ID of the reservation"),
        service: AsyncReservationService = Depends(get_reservation_service),
):
    reservation = await service.get_reservation(reservation_id)
    return {"success": True, "data": reservation}


@router.post(
    "",
    response_model=DataResponse[ReservationOutput],
    status_code=status.HTTP_201_CREATED,
    summary="Create Reservation - Book a service",
    description="Books a service for an existing client. The scheduled date must be in the future.",
    responses=ERROR_RESPONSES,
)
async def create_reservation(
        reservation_data: ReservationCreate,
        service: AsyncReservationService = Depends(get_reservation_service),
):
    reservation = await service.create_reservation(reservation_data)
    return {"success": True, "message": "Reservation created successfully", "data": reservation}


@router.put(
    "/{reservation_id}",
    response_model=DataResponse[ReservationOutput],
    summary="Update Reservation - Partial update",
    description="Updates only the fields sent in the body; any status change is allowed.",
    responses=ERROR_RESPONSES,
)
async def update_reservation(
        reservation_data: ReservationUpdate,
        reservation_id: str = Path(..., description="ID of the reservation to update"),
        service: AsyncReservationService = Depends(get_reservation_service),
):
    reservation = await service.update_reservation(reservation_id, reservation_data)
    return {"success": True, "message": "Reservation updated successfully", "data": reservation}


@router.delete(
    "/{reservation_id}",
    response_model=MessageResponse,
    summary="Delete Reservation - Remove a reservation",
    responses=ERROR_RESPONSES,
)
async def delete_reservation(
        reservation_id: str = Path(..., description="ID of the reservation to delete"),
        service: AsyncReservationService = Depends(get_reservation_service),
):
    await service.delete_reservation(reservation_id)
    return {"success": True, "message": "Reservation deleted successfully"}
