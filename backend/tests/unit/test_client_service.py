"""Unit tests for the ClientService."""

from typing import Any

import pytest

from client_registry.application.interfaces import ClientRepository
from client_registry.application.schemas import ClientCreate, ClientUpdate
from client_registry.application.services import ClientService
from client_registry.domain.entities import Client
from client_registry.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class FakeClientRepository(ClientRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._clients: dict[int, Client] = {}
        self._next_id = 1

    def _ensure_unique(self, tax_id: str, ignore_id: int | None = None) -> None:
        for client in self._clients.values():
            if client.tax_id == tax_id and client.id != ignore_id:
                raise DuplicateEntityError("Client", "taxId", tax_id)

    async def get_by_id(self, client_id: int) -> Client | None:
        return self._clients.get(client_id)

    async def get_all(self) -> list[Client]:
        return list(self._clients.values())

    async def create(self, client: Client) -> Client:
        self._ensure_unique(client.tax_id)
        client.id = self._next_id
        self._next_id += 1
        self._clients[client.id] = client
        return client

    async def update(self, client_id: int, changes: dict[str, Any]) -> Client | None:
        client = self._clients.get(client_id)
        if client is None:
            return None
        if "tax_id" in changes:
            self._ensure_unique(changes["tax_id"], ignore_id=client_id)
        for name, value in changes.items():
            setattr(client, name, value)
        return client

    async def delete(self, client_id: int) -> bool:
        return self._clients.pop(client_id, None) is not None


@pytest.fixture
def service() -> ClientService:
    return ClientService(FakeClientRepository())


def _create(tax_id: str = "11222333000181", **extra) -> ClientCreate:
    return ClientCreate(tax_id=tax_id, legal_name="Acme Ltda", **extra)


@pytest.mark.asyncio
async def test_create_client(service: ClientService):
    client = await service.create_client(_create(city="São Paulo"))
    assert client.id == 1
    assert client.tax_id == "11222333000181"
    assert client.city == "São Paulo"


@pytest.mark.asyncio
async def test_duplicate_tax_id_keeps_first_client(service: ClientService):
    first = await service.create_client(_create())
    with pytest.raises(DuplicateEntityError):
        await service.create_client(_create())

    clients = await service.list_clients()
    assert [c.id for c in clients] == [first.id]
    assert (await service.get_client(first.id)).legal_name == "Acme Ltda"


@pytest.mark.asyncio
async def test_get_client_not_found(service: ClientService):
    with pytest.raises(EntityNotFoundError):
        await service.get_client(999)


@pytest.mark.asyncio
async def test_update_only_changes_supplied_fields(service: ClientService):
    created = await service.create_client(_create(city="Campinas", region="SP"))

    updated = await service.update_client(created.id, ClientUpdate(trade_name="Acme"))

    assert updated.trade_name == "Acme"
    assert updated.legal_name == "Acme Ltda"
    assert updated.city == "Campinas"
    assert updated.region == "SP"


@pytest.mark.asyncio
async def test_update_with_no_changes_returns_current_client(service: ClientService):
    created = await service.create_client(_create())
    updated = await service.update_client(created.id, ClientUpdate())
    assert updated == created


@pytest.mark.asyncio
async def test_update_missing_client(service: ClientService):
    with pytest.raises(EntityNotFoundError):
        await service.update_client(42, ClientUpdate(trade_name="x"))


@pytest.mark.asyncio
async def test_update_missing_client_with_empty_payload(service: ClientService):
    with pytest.raises(EntityNotFoundError):
        await service.update_client(42, ClientUpdate())


@pytest.mark.asyncio
async def test_delete_client(service: ClientService):
    created = await service.create_client(_create())
    message = await service.delete_client(created.id)
    assert message == "Client deleted successfully"
    with pytest.raises(EntityNotFoundError):
        await service.get_client(created.id)


@pytest.mark.asyncio
async def test_delete_missing_client_leaves_list_unchanged(service: ClientService):
    await service.create_client(_create())
    with pytest.raises(EntityNotFoundError):
        await service.delete_client(999)
    assert len(await service.list_clients()) == 1
