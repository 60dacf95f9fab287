# app/adapters/inbound/api/v1/endpoints/client_endpoint.py (async version)

from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status

from app.adapters.inbound.api.deps import get_client_service
from app.application.dtos.client_dto import ClientCreate, ClientOutput, ClientUpdate
from app.application.dtos.response_dto import (
    ERROR_RESPONSES,
    DataResponse,
    MessageResponse,
    PaginatedResponse,
)
from app.application.use_cases.client_use_cases import AsyncClientService
from app.shared.utils.pagination import PageParams, pagination_params

router = APIRouter()


@router.get(
    "",
    response_model=PaginatedResponse[ClientOutput],
    summary="List Clients - Paginated client list",
    description="Returns clients newest first. `name` and `email` filter by partial, case-insensitive match.",
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
)
async def list_clients(
        params: PageParams = Depends(pagination_params),
        name: Optional[str] = Query(None, description="Part of the client name"),
        email: Optional[str] = Query(None, description="Part of the client email"),
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.list_clients(params, name=name, email=email)


@router.get(
    "/{client_id}",
    response_model=DataResponse[ClientOutput],
    summary="Get Client - Client data by ID",
    description="Returns the client data. The password is never included.",
    responses=ERROR_RESPONSES,
)
async def get_client(
        client_id: str = Path(..., description="ID of the client"),
        service: AsyncClientService = Depends(get_client_service),
):
    client = await service.get_client(client_id)
    return {"success": True, "data": client}


@router.post(
    "",
    response_model=DataResponse[ClientOutput],
    status_code=status.HTTP_201_CREATED,
    summary="Create Client - Register a new client",
    description="Registers a client. All fields are required and the email must not be in use.",
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
)
async def create_client(
        client_data: ClientCreate,
        service: AsyncClientService = Depends(get_client_service),
):
    client = await service.create_client(client_data)
    return {"success": True, "message": "Client created successfully", "data": client}


@router.put(
    "/{client_id}",
    response_model=DataResponse[ClientOutput],
    summary="Update Client - Partial update",
    description="Updates only the fields sent in the body.",
    responses=ERROR_RESPONSES,
)
async def update_client(
        client_data: ClientUpdate,
        client_id: str = Path(..., description="ID of the client to update"),
        service: AsyncClientService = Depends(get_client_service),
):
    client = await service.update_client(client_id, client_data)
    return {"success": True, "message": "Client updated successfully", "data": client}


@router.delete(
    "/{client_id}",
    response_model=MessageResponse,
    summary="Delete Client - Remove a client",
    description="Deletes a client. Fails while the client has Pending or In progress reservations.",
    responses=ERROR_RESPONSES,
)
async def delete_client(
        client_id: str = Path(..., description="ID of the client to delete"),
        service: AsyncClientService = Depends(get_client_service),
):
    await service.delete_client(client_id)
    return {"success": True, "message": "Client deleted successfully"}
