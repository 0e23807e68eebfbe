"""Per-database resolution strategies for SauceNAO matches."""

from __future__ import annotations

import re
from typing import Awaitable, Callable, Mapping
from urllib.parse import urlparse

from saucefinder import logger
from saucefinder.search.errors import ResolutionMiss, SauceFinderError
from saucefinder.search.protocols import GalleryLookup, MatchResolver
from saucefinder.search.types import RawMatch

# https://saucenao.com/tools/examples/api/index_details.txt
DATABASE_INDEXES: dict[str, int] = {
    "h-mags": 0,
    "h-anime": 1,
    "hcg": 2,
    "ddb-objects": 3,
    "ddb-samples": 4,
    "Pixiv": 5,
    "PixivHistorical": 6,
    "anime": 7,
    "NicoNico Seiga": 8,
    "Danbooru": 9,
    "drawr": 10,
    "Nijie": 11,
    "yande.re": 12,
    "animeop": 13,
    "IMDb": 14,
    "Shutterstock": 15,
    "FAKKU": 16,
    "nhentai": 18,
    "2d_market": 19,
    "medibang": 20,
    "Anime": 21,
    "H-Anime": 22,
    "Movies": 23,
    "Shows": 24,
    "gelbooru": 25,
    "konochan": 26,
    "sankaku": 27,
    "anime-pictures": 28,
    "e621": 29,
    "idol complex": 30,
    "bcy illust": 31,
    "bcy cosplay": 32,
    "portalgraphics": 33,
    "dA": 34,
    "pawoo": 35,
    "madokami": 36,
    "mangadex": 37,
    "ehentai": 38,
    "ArtStation": 39,
    "FurAffinity": 40,
    "Twitter": 41,
    "Furry Network": 42,
}
DATABASE_NAMES: dict[int, str] = {index: name for name, index in DATABASE_INDEXES.items()}

PIXIV_IMAGE_HOST = "i.pximg.net"
PIXIV_ARTWORK_URL = "https://www.pixiv.net/artworks/{artwork_id}"
_PIXIV_PAGE_STEM = re.compile(r"^([0-9]+)_p[0-9]+")
_PIXIV_MEMBER_ILLUST = re.compile(r"www\.pixiv\.net/member_illust\.php\?mode=medium&illust_id=([0-9]+)")


def database_name(index: int) -> str:
    return DATABASE_NAMES.get(index, f"#{index}")


def rewrite_pixiv_url(url: str) -> str:
    """Rewrite Pixiv image and legacy illustration links to the artwork page.

    ``https://i.pximg.net/.../12345_p0.jpg`` and
    ``https://www.pixiv.net/member_illust.php?mode=medium&illust_id=12345``
    both become ``https://www.pixiv.net/artworks/12345``. Anything else is
    returned unchanged, so the rewrite is idempotent.
    """
    parsed = urlparse(url)
    if parsed.hostname == PIXIV_IMAGE_HOST:
        stem = parsed.path.rsplit("/", 1)[-1].split(".", 1)[0]
        page = _PIXIV_PAGE_STEM.match(stem)
        if page:
            return PIXIV_ARTWORK_URL.format(artwork_id=page.group(1))
    return _PIXIV_MEMBER_ILLUST.sub(r"www.pixiv.net/artworks/\1", url)


class DefaultResolver:
    """Pass-through: the first provider-supplied external URL."""

    async def resolve(self, match: RawMatch, image_url: str = "") -> str:
        if match.ext_urls:
            return match.ext_urls[0]
        logger.warning(
            f"Match from database {database_name(match.database_index)} has no ext_urls; "
            f"searched image: {image_url}"
        )
        return ""


class PixivResolver:
    def __init__(self, fallback: MatchResolver | None = None) -> None:
        self.fallback = fallback or DefaultResolver()

    async def resolve(self, match: RawMatch, image_url: str = "") -> str:
        if not match.ext_urls:
            return await self.fallback.resolve(match, image_url)
        return rewrite_pixiv_url(match.ext_urls[0])


class GalleryResolver:
    """Title-keyed secondary lookup; every failure degrades to an empty result."""

    def __init__(
        self,
        site: str,
        lookup: Callable[[str], Awaitable[str]],
        fallback: MatchResolver | None = None,
    ) -> None:
        self.site = site
        self.lookup = lookup
        self.fallback = fallback or DefaultResolver()

    async def resolve(self, match: RawMatch, image_url: str = "") -> str:
        title = match.title
        if not title:
            return await self.fallback.resolve(match, image_url)
        try:
            return await self.lookup(title)
        except ResolutionMiss as exc:
            logger.debug(str(exc))
        except SauceFinderError as exc:
            logger.get_logger().lookup_failed(self.site, title, exc)
        return ""


class ResolverRegistry:
    """Selects a resolution strategy by SauceNAO database index."""

    def __init__(self, resolvers: Mapping[int, MatchResolver], default: MatchResolver | None = None) -> None:
        self._resolvers = dict(resolvers)
        self.default = default or DefaultResolver()

    def for_index(self, database_index: int) -> MatchResolver:
        return self._resolvers.get(database_index, self.default)

    async def resolve(self, match: RawMatch, image_url: str = "") -> str:
        resolver = self.for_index(match.database_index)
        return await resolver.resolve(match, image_url)


def build_resolver_registry(gallery: GalleryLookup) -> ResolverRegistry:
    default = DefaultResolver()
    return ResolverRegistry(
        {
            DATABASE_INDEXES["Pixiv"]: PixivResolver(default),
            DATABASE_INDEXES["ehentai"]: GalleryResolver("e-hentai", gallery.search_ehentai, default),
            DATABASE_INDEXES["nhentai"]: GalleryResolver("nhentai", gallery.search_nhentai, default),
        },
        default,
    )
