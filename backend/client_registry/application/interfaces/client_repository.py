"""Abstract repository interface (port) for Client persistence."""

from abc import ABC, abstractmethod
from typing import Any

from client_registry.domain.entities import Client


class ClientRepository(ABC):
    """Port for client persistence: implemented in the infrastructure layer.

    The store owns the uniqueness of ``tax_id``: implementations raise
    ``DuplicateEntityError`` when an insert or update would break it.
    """

    @abstractmethod
    async def get_by_id(self, client_id: int) -> Client | None:
        """Retrieve a single client by its id."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Client]:
        """Retrieve every stored client."""
        ...

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Persist a new client and return it with its generated id."""
        ...

    @abstractmethod
    async def update(self, client_id: int, changes: dict[str, Any]) -> Client | None:
        """Apply *changes* to one client. Returns None if no row matches."""
        ...

    @abstractmethod
    async def delete(self, client_id: int) -> bool:
        """Delete a client. Returns True if deleted, False if not found."""
        ...
