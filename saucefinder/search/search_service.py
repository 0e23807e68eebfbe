"""One reverse image search: query, parse, filter, resolve, aggregate."""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence

from saucefinder import logger
from saucefinder.config import SauceFinderConfig
from saucefinder.search.aggregator import aggregate
from saucefinder.search.errors import ParseError, TransportError
from saucefinder.search.gallery_client import GalleryClient
from saucefinder.search.parsers import parse_search_response
from saucefinder.search.protocols import SearchClient
from saucefinder.search.resolvers import ResolverRegistry, build_resolver_registry, database_name
from saucefinder.search.saucenao_client import SauceNAOClient
from saucefinder.search.similarity import filter_by_similarity
from saucefinder.search.types import RawMatch, ResolvedMatch, SearchResult


class SauceSearchService:
    """Stateless search pipeline over injected clients.

    Nothing is kept between calls to :meth:`search`; the only long-lived
    state is the HTTP sessions owned by the clients.
    """

    def __init__(
        self,
        client: SearchClient,
        resolvers: ResolverRegistry,
        max_concurrency: int = 1,
        owned: Sequence[object] = (),
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.client = client
        self.resolvers = resolvers
        self.max_concurrency = max_concurrency
        self._owned = tuple(owned)

    @classmethod
    def from_config(cls, config: SauceFinderConfig) -> "SauceSearchService":
        client = SauceNAOClient(config.saucenao)
        gallery = GalleryClient(config.gallery)
        return cls(
            client,
            build_resolver_registry(gallery),
            max_concurrency=config.gallery.max_concurrency,
            owned=(client, gallery),
        )

    async def search(self, image_url: str) -> Optional[SearchResult]:
        """Search ``image_url``; ``None`` means the primary request failed."""
        try:
            body = await self.client.fetch(image_url)
            parsed = parse_search_response(body)
        except (TransportError, ParseError) as exc:
            logger.error(f"SauceNAO search failed for {image_url}: {exc}")
            return None

        if parsed.status != 0:
            detail = f": {parsed.message}" if parsed.message else ""
            logger.warning(f"SauceNAO reported status {parsed.status}{detail}")
        logger.debug(f"Minimum similarity: {parsed.similarity_floor:g}, {len(parsed.matches)} result(s)")

        matches = filter_by_similarity(parsed.matches, parsed.similarity_floor)
        resolved = await self.resolve_all(matches, image_url)
        return SearchResult(
            similarity_floor=parsed.similarity_floor,
            short_remaining=parsed.short_remaining,
            long_remaining=parsed.long_remaining,
            source_to_url=aggregate(resolved),
        )

    async def resolve_all(self, matches: Sequence[RawMatch], image_url: str = "") -> List[ResolvedMatch]:
        """Resolve matches, keeping provider order in the returned list."""
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _resolve(match: RawMatch) -> Optional[ResolvedMatch]:
            async with semaphore:
                url = await self.resolvers.resolve(match, image_url)
            logger.debug(
                f"Database {database_name(match.database_index)} ({match.similarity:g}%): "
                f"{url or 'unresolved'}"
            )
            if not url:
                return None
            return ResolvedMatch(database_index=match.database_index, similarity=match.similarity, url=url)

        results = await asyncio.gather(*(_resolve(match) for match in matches))
        return [result for result in results if result is not None]

    async def close(self) -> None:
        for resource in self._owned:
            close = getattr(resource, "close", None)
            if close is not None:
                await close()

    async def __aenter__(self) -> "SauceSearchService":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
