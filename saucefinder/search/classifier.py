"""Map resolved URLs to the human-readable name of their source site."""

from __future__ import annotations

UNKNOWN_SOURCE = "Unknown"

# Checked in order, first substring contained in the URL wins. Order is significant.
SOURCE_PATTERNS: tuple[tuple[str, str], ...] = (
    ("pixiv.net", "Pixiv"),
    ("danbooru.donmai.us", "Danbooru"),
    ("gelbooru.com", "Gelbooru"),
    ("chan.sankakucomplex.com", "Sankaku"),
    ("anime-pictures.net", "Anime Pictures"),
    ("i.redd.it", "Reddit"),
    ("yande.re", "Yandere"),
    ("imdb.com", "IMDB"),
    ("deviantart.com", "Deviantart"),
    ("twitter.com", "Twitter"),
    ("nijie.info", "Nijie"),
    ("pawoo.net", "Pawoo"),
    ("seiga.nicovideo.jp", "Seiga Nicovideo"),
    ("tumblr.com", "Tumblr"),
    ("anidb.net", "Anidb"),
    ("mangadex.org", "MangaDex"),
    ("mangaupdates.com", "MangaUpdates"),
    ("myanimelist.net", "MyAnimeList"),
    ("furaffinity.net", "FurAffinity"),
    ("artstation.com", "ArtStation"),
    ("bcy.net", "BCY"),
    ("konachan.com", "Konachan"),
    ("fanbox.cc", "Pixiv Fanbox"),
    ("e621.net", "e621"),
    ("exhentai.org", "exhentai"),
    ("e-hentai.org", "e-hentai"),
    ("nhentai.net", "nhentai"),
    ("fantia.jp", "Fantia"),
)


def classify_url(url: str) -> str:
    for pattern, source in SOURCE_PATTERNS:
        if pattern in url:
            return source
    return UNKNOWN_SOURCE
