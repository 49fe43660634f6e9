"""BrasilAPI adapter: company registry data by CNPJ.

Endpoint: ``GET {base_url}/cnpj/v1/{cnpj}``.
"""

import logging

import httpx

from client_registry.application.interfaces import CompanyLookup
from client_registry.domain.cnpj import CNPJ_LENGTH, only_digits
from client_registry.domain.entities import CompanyProfile
from client_registry.infrastructure.lookups.base import JsonLookupClient, clean_text

logger = logging.getLogger(__name__)


class BrasilApiCompanyLookup(JsonLookupClient, CompanyLookup):
    """Implements the CompanyLookup port against BrasilAPI."""

    service_name = "BrasilAPI"

    def __init__(
        self,
        base_url: str = "https://brasilapi.com.br/api",
        http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(base_url, http_client)

    async def find_company(self, tax_id: str) -> CompanyProfile | None:
        digits = only_digits(tax_id)
        if len(digits) != CNPJ_LENGTH:
            return None

        data = await self._fetch_json(f"cnpj/v1/{digits}")
        if data is None:
            return None

        logger.debug("BrasilAPI returned data for CNPJ %s", digits)
        return CompanyProfile(
            legal_name=clean_text(data.get("razao_social")),
            trade_name=clean_text(data.get("nome_fantasia")),
            street=clean_text(data.get("logradouro")),
            district=clean_text(data.get("bairro")),
            city=clean_text(data.get("municipio")),
            region=clean_text(data.get("uf")),
            postal_code=only_digits(clean_text(data.get("cep"))) or None,
            complement=clean_text(data.get("complemento")),
            email=clean_text(data.get("email")),
            phone=only_digits(clean_text(data.get("ddd_telefone_1"))) or None,
        )
