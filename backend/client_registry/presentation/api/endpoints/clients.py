"""Client CRUD endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from client_registry.application.schemas.client import (
    ClientCreate,
    ClientResponse,
    ClientUpdate,
    DeleteConfirmation,
)
from client_registry.application.services import ClientService
from client_registry.infrastructure.dependencies import get_client_service

router = APIRouter(prefix="/clients", tags=["Clients"])

ClientId = Annotated[int, Path(gt=0, description="Client id")]


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    service: ClientService = Depends(get_client_service),
) -> list[ClientResponse]:
    """Retrieve every registered client."""
    clients = await service.list_clients()
    return [ClientResponse.model_validate(c, from_attributes=True) for c in clients]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: ClientId,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Retrieve a single client by id."""
    client = await service.get_client(client_id)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Register a new client."""
    client = await service.create_client(data)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: ClientId,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Apply a partial update to an existing client."""
    client = await service.update_client(client_id, data)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.delete("/{client_id}", response_model=DeleteConfirmation)
async def delete_client(
    client_id: ClientId,
    service: ClientService = Depends(get_client_service),
) -> DeleteConfirmation:
    """Delete a client by id."""
    message = await service.delete_client(client_id)
    return DeleteConfirmation(message=message)
