from __future__ import annotations

import pytest

from saucefinder.config import GalleryConfig, SauceNAOConfig
from saucefinder.search.gallery_client import GalleryClient
from saucefinder.search.http_session import DEFAULT_USER_AGENT, HttpSessionOwner
from saucefinder.search.saucenao_client import SauceNAOClient


@pytest.mark.asyncio
async def test_session_is_reused_until_closed() -> None:
    owner = HttpSessionOwner(timeout=12)

    first = await owner._ensure_session()
    second = await owner._ensure_session()

    assert first is second
    assert first.timeout.total == 12
    assert first.headers["User-Agent"] == DEFAULT_USER_AGENT

    await owner.close()
    assert first.closed
    assert owner._session is None

    third = await owner._ensure_session()
    assert third is not first
    await owner.close()


@pytest.mark.asyncio
async def test_close_without_session_is_noop() -> None:
    owner = HttpSessionOwner(timeout=5)

    await owner.close()

    assert owner._session is None


@pytest.mark.asyncio
async def test_clients_share_session_handling() -> None:
    async with SauceNAOClient(SauceNAOConfig(api_key="k", timeout=7)) as saucenao:
        assert (await saucenao._ensure_session()).timeout.total == 7
    async with GalleryClient(GalleryConfig(timeout=9)) as gallery:
        assert (await gallery._ensure_session()).timeout.total == 9

    assert saucenao._session is None
    assert gallery._session is None
