"""Port for the address lookup by postal code."""

from abc import ABC, abstractmethod

from client_registry.domain.entities import PostalAddress


class AddressLookup(ABC):
    """Best-effort lookup: implementations return None instead of raising."""

    @abstractmethod
    async def find_address(self, postal_code: str) -> PostalAddress | None:
        """Return the address for an 8-digit postal code, or None."""
        ...
