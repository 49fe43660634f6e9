"""Application service (use case) for Client operations."""

import logging

from client_registry.application.interfaces import ClientRepository
from client_registry.application.schemas.client import ClientCreate, ClientUpdate
from client_registry.domain.cnpj import format_cnpj
from client_registry.domain.entities import Client
from client_registry.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Client deleted successfully"


class ClientService:
    """Orchestrates client CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ClientRepository):
        self._repository = repository

    async def get_client(self, client_id: int) -> Client:
        client = await self._repository.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def list_clients(self) -> list[Client]:
        return await self._repository.get_all()

    async def create_client(self, data: ClientCreate) -> Client:
        client = await self._repository.create(Client(**data.to_fields()))
        logger.info("Created client %s (%s)", client.id, format_cnpj(client.tax_id))
        return client

    async def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        changes = data.to_fields()
        if not changes:
            return await self.get_client(client_id)

        client = await self._repository.update(client_id, changes)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        logger.info("Updated client %s fields=%s", client_id, sorted(changes))
        return client

    async def delete_client(self, client_id: int) -> str:
        """Delete a client and return a confirmation message."""
        if not await self._repository.delete(client_id):
            raise EntityNotFoundError("Client", client_id)
        logger.info("Deleted client %s", client_id)
        return DELETED_MESSAGE
