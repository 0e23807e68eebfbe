"""SauceNAO search API client."""

from __future__ import annotations

import asyncio
import time
from typing import Any, Dict

import aiohttp

from saucefinder import logger
from saucefinder.config import SauceNAOConfig
from saucefinder.search.errors import TransportError, UnexpectedStatus
from saucefinder.search.http_session import HttpSessionOwner

SAUCENAO_SEARCH_URL = "https://saucenao.com/search.php"
ALL_DATABASES = 999
JSON_OUTPUT = 2


class SauceNAOClient(HttpSessionOwner):
    """Issues one reverse-image-search request per call, without retries."""

    def __init__(self, config: SauceNAOConfig, search_url: str = SAUCENAO_SEARCH_URL):
        if not config.api_key:
            raise ValueError("SauceNAO API key is required for the search client.")

        super().__init__(config.timeout)
        self.config = config
        self.search_url = search_url

    def build_params(self, image_url: str) -> Dict[str, Any]:
        return {
            "api_key": self.config.api_key,
            "db": ALL_DATABASES,
            "output_type": JSON_OUTPUT,
            "url": image_url,
        }

    async def fetch(self, image_url: str, *, raise_for_status: bool = False) -> bytes:
        """Return the raw response body for ``image_url``.

        A non-200 status is logged and the body is still returned, since
        SauceNAO explains quota and key problems in a JSON body sent with an
        error status. Pass ``raise_for_status=True`` to raise instead.
        """
        params = self.build_params(image_url)
        log = logger.get_logger()
        log.api_request("GET", self.search_url, params)
        request_start = time.time()

        session = await self._ensure_session()
        try:
            async with session.get(self.search_url, params=params) as response:
                body = await response.read()
                status = response.status
                reason = response.reason or ""
        except (asyncio.TimeoutError, aiohttp.ClientError) as exc:
            log.error(f"SauceNAO request failed: {exc}")
            raise TransportError(self.search_url, exc) from exc

        elapsed_ms = (time.time() - request_start) * 1000
        log.api_response(status, body, elapsed_ms)

        if status != 200:
            exc = UnexpectedStatus(status, self.search_url, reason)
            if raise_for_status:
                raise exc
            log.error(str(exc))
        return body
