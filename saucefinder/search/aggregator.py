"""Collapse resolved matches to one URL per logical source."""

from __future__ import annotations

from typing import Callable, Dict, Iterable

from saucefinder.search.classifier import classify_url
from saucefinder.search.types import ResolvedMatch


def select_best_matches(
    resolved: Iterable[ResolvedMatch],
    classify: Callable[[str], str] = classify_url,
) -> Dict[str, ResolvedMatch]:
    """Return the highest-similarity match per source.

    ``resolved`` must be in provider order: on equal similarity the first
    match seen is kept.
    """
    best: Dict[str, ResolvedMatch] = {}
    for match in resolved:
        source = classify(match.url)
        current = best.get(source)
        if current is None or match.similarity > current.similarity:
            best[source] = match
    return best


def aggregate(
    resolved: Iterable[ResolvedMatch],
    classify: Callable[[str], str] = classify_url,
) -> Dict[str, str]:
    return {source: match.url for source, match in select_best_matches(resolved, classify).items()}
