"""Protocol definitions for match resolvers and gallery lookups."""

from __future__ import annotations

from typing import Protocol

from saucefinder.search.types import RawMatch


class MatchResolver(Protocol):
    """Turns one raw match into a canonical URL, or ``""`` when it cannot."""

    async def resolve(self, match: RawMatch, image_url: str = "") -> str:
        ...


class GalleryLookup(Protocol):
    """Minimal gallery search API used by the e-hentai and nhentai resolvers."""

    async def search_ehentai(self, title: str) -> str:
        ...

    async def search_nhentai(self, title: str) -> str:
        ...


class SearchClient(Protocol):
    """Minimal reverse-image-search client API used by the search service."""

    async def fetch(self, image_url: str, *, raise_for_status: bool = False) -> bytes:
        ...
