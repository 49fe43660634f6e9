"""Shared httpx plumbing for the best-effort third-party lookups."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class JsonLookupClient:
    """GETs a JSON object and turns every failure into ``None``.

    Network errors, non-200 statuses and bodies that are not JSON objects are
    logged and swallowed, so a lookup can never break the caller's flow.
    """

    service_name = "lookup"

    def __init__(self, base_url: str, http_client: httpx.AsyncClient | None = None):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient()

    async def _fetch_json(self, path: str) -> dict[str, Any] | None:
        url = f"{self._base_url}/{path.lstrip('/')}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.get(url, headers={"Accept": "application/json"})
            if response.status_code != 200:
                logger.info(
                    "%s lookup returned HTTP %d for %s",
                    self.service_name,
                    response.status_code,
                    url,
                )
                return None
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("%s lookup failed for %s: %s", self.service_name, url, exc)
            return None
        finally:
            if should_close:
                await client.aclose()

        if not isinstance(data, dict):
            logger.info("%s lookup returned a non-object body for %s", self.service_name, url)
            return None
        return data


def clean_text(value: Any) -> str | None:
    """Trim a string value; anything else or an empty string becomes None."""
    if not isinstance(value, str):
        return None
    return value.strip() or None
