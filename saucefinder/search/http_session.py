"""Lazily created, reusable aiohttp session shared by the HTTP clients."""

from __future__ import annotations

import asyncio

import aiohttp

from saucefinder.__version__ import __version__

DEFAULT_USER_AGENT = f"SauceFinder/{__version__}"


class HttpSessionOwner:
    """Owns one aiohttp session; created on first use, closed by ``close()``."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None
        self._session_lock = asyncio.Lock()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        session = self._session
        if session is not None and not session.closed:
            return session

        async with self._session_lock:
            session = self._session
            if session is None or session.closed:
                self._session = aiohttp.ClientSession(
                    headers={"User-Agent": DEFAULT_USER_AGENT},
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                )
            return self._session

    async def close(self) -> None:
        """Close any open connections."""
        async with self._session_lock:
            session = self._session
            self._session = None
        if session is not None and not session.closed:
            await session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
