"""Port for the company-registry lookup by CNPJ."""

from abc import ABC, abstractmethod

from client_registry.domain.entities import CompanyProfile


class CompanyLookup(ABC):
    """Best-effort lookup: implementations return None instead of raising."""

    @abstractmethod
    async def find_company(self, tax_id: str) -> CompanyProfile | None:
        """Return registry data for a 14-digit CNPJ, or None."""
        ...
