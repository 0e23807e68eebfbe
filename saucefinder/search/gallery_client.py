"""Secondary gallery lookups used when SauceNAO omits a direct link."""

from __future__ import annotations

import asyncio
from typing import Any, Dict

import aiohttp
from bs4 import BeautifulSoup, ParserRejectedMarkup

from saucefinder import logger
from saucefinder.config import GalleryConfig
from saucefinder.search.errors import ParseError, ResolutionMiss, TransportError, UnexpectedStatus
from saucefinder.search.http_session import HttpSessionOwner

EHENTAI_SEARCH_URL = "https://e-hentai.org/"
NHENTAI_URL = "https://nhentai.net"
NHENTAI_SEARCH_URL = f"{NHENTAI_URL}/search/"


def _soup(html: str, site: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Could not parse {site} search page: {exc}") from exc


def find_ehentai_gallery(html: str, title: str) -> str:
    """Return the href of the first listed gallery whose label equals ``title``."""
    soup = _soup(html, "e-hentai")
    for anchor in soup.select(".glname a"):
        label = anchor.select_one(".glink")
        if label is None or label.get_text() != title:
            continue
        href = anchor.get("href")
        if href:
            return href
    raise ResolutionMiss(f"No e-hentai gallery titled {title!r}")


def find_nhentai_gallery(html: str) -> str:
    """Return the absolute URL of the first gallery on an nhentai results page."""
    soup = _soup(html, "nhentai")
    anchor = soup.select_one(".gallery a")
    href = anchor.get("href") if anchor is not None else None
    if not href:
        raise ResolutionMiss("No nhentai gallery on the results page")
    return NHENTAI_URL + href


class GalleryClient(HttpSessionOwner):
    """Searches gallery sites by title and scrapes the listing HTML."""

    def __init__(
        self,
        config: GalleryConfig | None = None,
        ehentai_search_url: str = EHENTAI_SEARCH_URL,
        nhentai_search_url: str = NHENTAI_SEARCH_URL,
    ):
        self.config = config or GalleryConfig()
        super().__init__(self.config.timeout)
        self.ehentai_search_url = ehentai_search_url
        self.nhentai_search_url = nhentai_search_url

    async def search_ehentai(self, title: str) -> str:
        params = {"f_search": title, "advsearch": 1, "f_sname": "on"}
        html = await self.fetch_html(self.ehentai_search_url, params)
        return find_ehentai_gallery(html, title)

    async def search_nhentai(self, title: str) -> str:
        html = await self.fetch_html(self.nhentai_search_url, {"q": title})
        return find_nhentai_gallery(html)

    async def fetch_html(self, url: str, params: Dict[str, Any]) -> str:
        logger.get_logger().api_request("GET", url, params)
        session = await self._ensure_session()
        try:
            async with session.get(url, params=params) as response:
                if response.status != 200:
                    raise UnexpectedStatus(response.status, str(response.url), response.reason or "")
                return await response.text(errors="replace")
        except (asyncio.TimeoutError, aiohttp.ClientError) as exc:
            raise TransportError(url, exc) from exc
