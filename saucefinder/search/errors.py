"""Error taxonomy for the SauceNAO search pipeline."""

from __future__ import annotations


class SauceFinderError(Exception):
    """Base class for search pipeline failures."""


class TransportError(SauceFinderError):
    """Raised when an endpoint cannot be reached at the network level."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class UnexpectedStatus(SauceFinderError):
    """Raised (or logged) when an endpoint answers with a non-success status."""

    def __init__(self, status: int, url: str, reason: str = "") -> None:
        detail = f"{status} {reason}".strip()
        super().__init__(f"Request to {url} returned status {detail}, expected 200")
        self.status = status
        self.url = url


class ParseError(SauceFinderError):
    """Raised when a response body is structurally unusable."""


class ResolutionMiss(SauceFinderError):
    """A match could not be resolved to a canonical URL.

    Not a failure of the search: resolvers catch it and drop the match.
    """
