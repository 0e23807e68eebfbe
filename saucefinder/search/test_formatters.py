from __future__ import annotations

import pytest

from saucefinder.search import formatters
from saucefinder.search.types import SearchResult


def _result(floor: float, sources: dict[str, str]) -> SearchResult:
    return SearchResult(similarity_floor=floor, short_remaining=4, long_remaining=150, source_to_url=sources)


def test_reply_lists_sources_and_quota() -> None:
    result = _result(72.5, {"Pixiv": "https://www.pixiv.net/artworks/1", "Danbooru": "https://danbooru.donmai.us/posts/2"})

    lines = formatters.format_reply_lines(result, warning_level=60.0)

    assert lines == [
        "Pixiv: https://www.pixiv.net/artworks/1",
        "Danbooru: https://danbooru.donmai.us/posts/2",
        "Remaining searches: 4 (30s), 150 (24h)",
    ]


def test_reply_warns_on_low_similarity() -> None:
    result = _result(45.0, {"Pixiv": "https://www.pixiv.net/artworks/1"})

    lines = formatters.format_reply_lines(result, warning_level=60.0)

    assert formatters.is_low_similarity(result, 60.0)
    assert lines[1].startswith("Warning: minimum similarity is only 45%")


def test_reply_without_sources() -> None:
    lines = formatters.format_reply_lines(_result(45.0, {}), warning_level=60.0)

    assert lines == [formatters.NO_SOURCE_MESSAGE, "Remaining searches: 4 (30s), 150 (24h)"]


def test_emit_strips_markup(monkeypatch) -> None:
    captured: list[str] = []
    monkeypatch.setattr(formatters.logger, "log", captured.append)

    formatters.emit("[green]Pixiv[/green]: url", indent=2)

    assert captured == ["  Pixiv: url"]


@pytest.mark.parametrize(
    "url",
    [
        "https://example.org/art/[wip]/1.png",
        "https://example.org/a[/b]",
        "https://example.org/[bold]x[/bold]",
    ],
)
def test_emitted_reply_keeps_bracketed_urls(monkeypatch, url: str) -> None:
    captured: list[str] = []
    monkeypatch.setattr(formatters.logger, "log", captured.append)

    for line in formatters.format_reply_lines(_result(80.0, {"Unknown": url}), warning_level=60.0):
        formatters.emit(line)

    assert captured[0] == f"Unknown: {url}"
