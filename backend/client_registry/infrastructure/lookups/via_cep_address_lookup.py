"""ViaCEP adapter: address data by CEP (postal code).

Endpoint: ``GET {base_url}/{cep}/json/``. An unknown CEP answers 200 with
``{"erro": true}``.
"""

import httpx

from client_registry.application.interfaces import AddressLookup
from client_registry.domain.cnpj import only_digits
from client_registry.domain.entities import PostalAddress
from client_registry.infrastructure.lookups.base import JsonLookupClient, clean_text

_POSTAL_CODE_LENGTH = 8


class ViaCepAddressLookup(JsonLookupClient, AddressLookup):
    """Implements the AddressLookup port against ViaCEP."""

    service_name = "ViaCEP"

    def __init__(
        self,
        base_url: str = "https://viacep.com.br/ws",
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(base_url, http_client)

    async def find_address(self, postal_code: str) -> PostalAddress | None:
        digits = only_digits(postal_code)
        if len(digits) != _POSTAL_CODE_LENGTH:
            return None

        data = await self._fetch_json(f"{digits}/json/")
        if data is None or data.get("erro") in (True, "true"):
            return None

        return PostalAddress(
            street=clean_text(data.get("logradouro")),
            district=clean_text(data.get("bairro")),
            city=clean_text(data.get("localidade")),
            region=clean_text(data.get("uf")),
            complement=clean_text(data.get("complemento")),
        )
