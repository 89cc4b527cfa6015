"""Async JSON-over-HTTP client with interval-based rate limiting."""

import asyncio
import logging
import time

import httpx

from txparse.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class RateLimitedClient:
    """Wraps httpx.AsyncClient; consecutive requests are spaced by 1 / rate_per_second."""

    def __init__(
        self,
        rate_per_second: float = 5.0,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._min_interval = 1.0 / rate_per_second
        self._last_request_time = 0.0
        self._lock = asyncio.Lock()
        self._client = httpx.AsyncClient(timeout=timeout, headers=JSON_HEADERS, transport=transport)

    async def _wait_for_slot(self) -> None:
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_request_time
            if elapsed < self._min_interval:
                await asyncio.sleep(self._min_interval - elapsed)
            self._last_request_time = time.monotonic()

    async def post(self, url: str, json: dict | list | None = None) -> httpx.Response:
        """POST a JSON body. 5xx and 429 responses raise ExternalServiceError."""
        await self._wait_for_slot()
        resp = await self._client.post(url, json=json)
        if resp.status_code == 429 or resp.status_code >= 500:
            logger.warning("HTTP %d from %s", resp.status_code, url)
            raise ExternalServiceError(f"HTTP {resp.status_code} from {url}")
        return resp

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RateLimitedClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
