"""Tolerant decoding of SauceNAO JSON responses.

SauceNAO's per-result ``data`` block differs by database, and numeric fields
sometimes arrive as strings. Every field is read defensively: a missing or
malformed value becomes a zero value instead of rejecting the whole response.
Only a body that is not a JSON object at all raises ``ParseError``.
"""

from __future__ import annotations

import json

from saucefinder.search.errors import ParseError
from saucefinder.search.types import ParsedResponse, RawMatch


def as_float(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return 0.0
    return 0.0


def as_int(value: object) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        cleaned = value.strip()
        if cleaned.lstrip("-").isdigit():
            return int(cleaned)
    return 0


def as_str(value: object) -> str:
    return value if isinstance(value, str) else ""


def optional_dict(container: dict, key: str) -> dict:
    value = container.get(key)
    return value if isinstance(value, dict) else {}


def optional_list(container: dict, key: str) -> list:
    value = container.get(key)
    return value if isinstance(value, list) else []


def parse_match(entry: object) -> RawMatch:
    entry = entry if isinstance(entry, dict) else {}
    header = optional_dict(entry, "header")
    data = optional_dict(entry, "data")
    ext_urls = tuple(url for url in optional_list(data, "ext_urls") if isinstance(url, str) and url)
    return RawMatch(
        database_index=as_int(header.get("index_id")),
        similarity=as_float(header.get("similarity")),
        ext_urls=ext_urls,
        eng_name=as_str(data.get("eng_name")),
        jp_name=as_str(data.get("jp_name")),
    )


def parse_search_response(body: bytes | str) -> ParsedResponse:
    """Decode a SauceNAO ``output_type=2`` body."""
    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"SauceNAO response is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ParseError(f"SauceNAO response has unexpected type '{type(payload).__name__}'")

    header = optional_dict(payload, "header")
    matches = tuple(parse_match(entry) for entry in optional_list(payload, "results"))
    return ParsedResponse(
        similarity_floor=as_float(header.get("minimum_similarity")),
        short_remaining=as_int(header.get("short_remaining")),
        long_remaining=as_int(header.get("long_remaining")),
        status=as_int(header.get("status")),
        message=as_str(header.get("message")),
        matches=matches,
    )
