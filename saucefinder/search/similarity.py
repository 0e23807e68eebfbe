from __future__ import annotations

from typing import Iterable, List

from saucefinder import logger
from saucefinder.search.types import RawMatch


def filter_by_similarity(matches: Iterable[RawMatch], floor: float) -> List[RawMatch]:
    """Keep matches at or above the provider's minimum similarity, in order."""
    kept: List[RawMatch] = []
    for match in matches:
        if match.similarity >= floor:
            kept.append(match)
        else:
            logger.debug(f"Dropping match from database {match.database_index}: similarity {match.similarity:g} < {floor:g}")
    return kept
