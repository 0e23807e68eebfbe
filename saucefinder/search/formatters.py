from __future__ import annotations

from rich.markup import escape
from rich.text import Text

from saucefinder import logger
from saucefinder.search.types import SearchResult

SEARCH_FAILED_MESSAGE = "Search failed. Please try again later."
NO_SOURCE_MESSAGE = "No source found for this image."


def emit(message: str, indent: int = 0) -> None:
    """Emit message to screen and log file via logger."""
    padding = " " * max(indent, 0)
    plain = Text.from_markup(message).plain
    logger.log(f"{padding}{plain}")


def is_low_similarity(result: SearchResult, warning_level: float) -> bool:
    return result.similarity_floor < warning_level


def format_reply_lines(result: SearchResult, warning_level: float) -> list[str]:
    """Reply lines ready for ``emit``, one per source followed by quota information.

    Source names and URLs come from the provider, so they are escaped and
    any square brackets in them survive markup rendering verbatim.
    """
    if not result.source_to_url:
        lines = [NO_SOURCE_MESSAGE]
    else:
        lines = [f"{escape(source)}: {escape(url)}" for source, url in result.source_to_url.items()]
    if result.source_to_url and is_low_similarity(result, warning_level):
        lines.append(
            f"Warning: minimum similarity is only {result.similarity_floor:g}%, "
            "these results may not be the original source."
        )
    lines.append(f"Remaining searches: {result.short_remaining} (30s), {result.long_remaining} (24h)")
    return lines
