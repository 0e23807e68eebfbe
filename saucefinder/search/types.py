"""Shared data structures for the search pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class RawMatch:
    """One entry of the provider's ``results`` array."""

    database_index: int
    similarity: float
    ext_urls: Tuple[str, ...] = ()
    eng_name: str = ""
    jp_name: str = ""

    @property
    def title(self) -> str:
        """English title, falling back to the Japanese one."""
        return self.eng_name or self.jp_name


@dataclass(frozen=True)
class ParsedResponse:
    """Decoded provider response: header metadata plus matches in provider order."""

    similarity_floor: float
    short_remaining: int
    long_remaining: int
    status: int = 0
    message: str = ""
    matches: Tuple[RawMatch, ...] = ()


@dataclass(frozen=True)
class ResolvedMatch:
    database_index: int
    similarity: float
    url: str


@dataclass(frozen=True)
class SearchResult:
    """Final output of one search, handed to the front end."""

    similarity_floor: float
    short_remaining: int
    long_remaining: int
    source_to_url: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "source_to_url", MappingProxyType(dict(self.source_to_url)))
