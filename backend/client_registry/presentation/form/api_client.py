"""HTTP client for the registry REST API, used by the form tier.

Uses httpx with an optional injected ``AsyncClient`` so tests can swap in a
mock or ASGI transport.
"""

import logging
from collections.abc import Mapping
from typing import Any, NoReturn

import httpx

from client_registry.application.schemas.client import ClientResponse

logger = logging.getLogger(__name__)


class ClientsApiError(Exception):
    """Raised when the registry API rejects a request or cannot be reached.

    ``status_code`` is None when the request never got a response.
    ``issues`` carries the field-keyed messages of a 400 validation failure.
    """

    def __init__(
        self,
        status_code: int | None,
        message: str,
        issues: dict[str, str] | None = None,
    ):
        self.status_code = status_code
        self.message = message
        self.issues = issues or {}
        super().__init__(f"[{status_code}] {message}" if status_code else message)


class ClientsApiClient:
    """Thin async wrapper over ``/clients``."""

    def __init__(
        self,
        base_url: str = "http://localhost:8020",
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient()

    async def _request(
        self,
        method: str,
        path: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(
                method,
                url,
                json=dict(payload) if payload is not None else None,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ClientsApiError(None, f"Could not reach the registry API: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

        if response.is_success:
            return response.json()
        self._raise_api_error(response)

    @staticmethod
    def _raise_api_error(response: httpx.Response) -> NoReturn:
        """Turn an error response into a ClientsApiError."""
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        message = body.get("error") or body.get("message") or (
            f"Request failed with status {response.status_code}"
        )
        issues = body.get("issues") if isinstance(body.get("issues"), dict) else None
        raise ClientsApiError(response.status_code, str(message), issues)

    async def list_clients(self) -> list[ClientResponse]:
        data = await self._request("GET", "/clients")
        return [ClientResponse.model_validate(item) for item in data]

    async def get_client(self, client_id: int) -> ClientResponse:
        data = await self._request("GET", f"/clients/{client_id}")
        return ClientResponse.model_validate(data)

    async def create_client(self, payload: Mapping[str, Any]) -> ClientResponse:
        data = await self._request("POST", "/clients", payload)
        return ClientResponse.model_validate(data)

    async def update_client(self, client_id: int, payload: Mapping[str, Any]) -> ClientResponse:
        data = await self._request("PUT", f"/clients/{client_id}", payload)
        return ClientResponse.model_validate(data)

    async def delete_client(self, client_id: int) -> str:
        """Delete a client and return the server's confirmation message."""
        data = await self._request("DELETE", f"/clients/{client_id}")
        return data.get("message", "") if isinstance(data, dict) else ""
