import logging
from functools import lru_cache
from typing import Optional

import httpx
from app.core.config import settings

logger = logging.getLogger(__name__)


class HTTPClientManager:
    """
    Owns the pooled httpx.AsyncClient used for address directory lookups.

    Opened by the application lifespan and closed on shutdown. REQUEST_TIMEOUT
    is the only timeout a lookup is subject to.
    """

    def __init__(self):
        self._client: Optional[httpx.AsyncClient] = None
        self._is_initialized: bool = False

    async def initialize(self):
        """Create the client from the HTTPX_* and REQUEST_TIMEOUT settings. Later calls are no-ops."""
        if self._is_initialized:
            return

        limits = httpx.Limits(
            max_keepalive_connections=settings.HTTPX_MAX_KEEPALIVE,
            max_connections=settings.HTTPX_MAX_CONNECTIONS,
            keepalive_expiry=settings.HTTPX_KEEPALIVE_EXPIRY,
        )

        headers = {
            "User-Agent": f"{settings.PROJECT_NAME}/{settings.VERSION}",
            "Accept": "application/json",
        }

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.REQUEST_TIMEOUT),
            limits=limits,
            headers=headers,
            verify=settings.HTTPX_VERIFY_SSL
        )
        self._is_initialized = True
        logger.debug("Directory client pool created (timeout=%ss)", settings.REQUEST_TIMEOUT)

    def get_client(self) -> httpx.AsyncClient:
        """Client handed to ViaCepResolver; RuntimeError before the lifespan has opened it."""
        if not self._client:
            raise RuntimeError("HTTPClientManager has not been initialized. Call initialize() first.")
        return self._client

    async def close(self) -> None:
        """Release pooled connections; the next lookup needs a fresh initialize()."""
        if self._client:
            await self._client.aclose()
            self._client = None
            self._is_initialized = False


@lru_cache
def get_http_client_manager() -> HTTPClientManager:
    """The manager shared by the lifespan and get_address_lookup_service."""
    return HTTPClientManager()
