import asyncio
from typing import Any

import httpx
from loguru import logger

# 4xx other than 429 means the request itself is wrong; sending it again cannot help
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class BaseClient:
    """
    Base asynchronous HTTP client with retry and logging.

    Transport errors and retryable status codes are retried with exponential
    backoff (backoff_base * 2**(attempt - 1)); anything else is raised on the
    first attempt. Callers above this layer never retry.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        max_retries: int = 3,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        backoff_base: float = 0.5,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.headers = headers or {}
        self.transport = transport
        self.backoff_base = backoff_base
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                transport=self.transport,
            )
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    @staticmethod
    def _should_retry(error: httpx.HTTPError) -> bool:
        if isinstance(error, httpx.HTTPStatusError):
            return error.response.status_code in RETRYABLE_STATUS_CODES
        return isinstance(error, httpx.TransportError)

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        client = self._get_client()
        attempt = 0

        while True:
            attempt += 1
            try:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response
            except httpx.HTTPError as e:
                if attempt >= self.max_retries or not self._should_retry(e):
                    logger.error(f"{method} {url} failed on attempt {attempt}/{self.max_retries}: {e}")
                    raise
                wait_time = self.backoff_base * (2 ** (attempt - 1))
                logger.warning(f"{method} {url} failed: {e}. Retrying in {wait_time}s ({attempt}/{self.max_retries})")
                await asyncio.sleep(wait_time)

    async def post(self, url: str, json: dict[str, Any] | None = None, **kwargs) -> dict[str, Any]:
        """POST and decode the JSON body."""
        response = await self._request("POST", url, json=json, **kwargs)
        return response.json()
