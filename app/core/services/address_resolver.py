import logging
from typing import Any, Dict, Protocol

import httpx

from app.core.models.exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class AddressResolver(Protocol):
    """Outbound address directory. Any provider returning the ViaCEP field set fits."""

    async def resolve(self, postal_code: str) -> Dict[str, Any]:
        """Return the directory payload for an 8-digit code or raise UpstreamUnavailableError."""
        ...


class ViaCepResolver:
    """Resolves postal codes against ViaCEP (``GET /ws/{cep}/json/``)."""

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def resolve(self, postal_code: str) -> Dict[str, Any]:
        url = f"{self.base_url}/ws/{postal_code}/json/"

        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise UpstreamUnavailableError() from e

        if not response.is_success:
            logger.warning("Address directory returned %s for %s", response.status_code, url)
            raise UpstreamUnavailableError()

        # A non-JSON body raises ValueError here and is reported as an internal error
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected directory payload type: {type(payload).__name__}")

        return payload
