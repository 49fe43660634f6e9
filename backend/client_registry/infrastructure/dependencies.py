"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from client_registry.application.services import ClientService
from client_registry.config import Settings, get_settings
from client_registry.infrastructure.database.session import get_db_session
from client_registry.infrastructure.database.repositories import SQLAlchemyClientRepository
from client_registry.infrastructure.lookups import BrasilApiCompanyLookup, ViaCepAddressLookup
from client_registry.presentation.form.api_client import ClientsApiClient
from client_registry.presentation.form.form_controller import ClientFormController


async def get_client_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ClientService, None]:
    """Provides a ClientService instance with its repository wired up."""
    repository = SQLAlchemyClientRepository(session)
    yield ClientService(repository)


def build_form_controller(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ClientFormController:
    """Wire a ClientFormController to the configured API and lookup services."""
    settings = settings or get_settings()
    return ClientFormController(
        api=ClientsApiClient(settings.clients_api_base_url, http_client=http_client),
        company_lookup=BrasilApiCompanyLookup(settings.brasil_api_base_url, http_client=http_client),
        address_lookup=ViaCepAddressLookup(settings.via_cep_base_url, http_client=http_client),
    )
