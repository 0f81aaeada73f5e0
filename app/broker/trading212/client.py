"""Trading 212 HTTP client (Basic auth, no retries)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.exceptions import SourceUnavailable

logger = logging.getLogger(__name__)


class Trading212Client:
    """Low-level HTTP client for the Trading 212 public API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_secret: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url
        self._auth = httpx.BasicAuth(api_key, api_secret)
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def open(self):
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            auth=self._auth,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        if not self._client:
            await self.open()
        resp = await self._client.get(path, params=params)
        if not resp.is_success:
            # 재시도 없이 호출자에게 전파
            logger.error("Trading212 GET 오류 [%s] %s: %s", resp.status_code, path, resp.text)
            raise SourceUnavailable(resp.status_code, resp.text, path)
        return resp.json()
