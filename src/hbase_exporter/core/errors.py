"""Errors raised while scraping and decoding JMX snapshots."""

from enum import Enum


class ParseFailure(Enum):
    """Why a JMX payload could not be decoded."""

    MALFORMED = "malformed"
    EMPTY_BEAN_ARRAY = "empty_bean_array"


class ScrapeError(Exception):
    """Base class for failures that mark a scrape cycle down."""


class TransportError(ScrapeError):
    """The JMX endpoint could not be reached (connection, DNS, timeout)."""


class HTTPStatusError(ScrapeError):
    """The JMX endpoint answered with a non-200 status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP request to {url} failed with code {status_code}")
        self.status_code = status_code
        self.url = url


class ParseError(ScrapeError):
    """The JMX payload was not a usable bean envelope."""

    def __init__(self, reason: ParseFailure, detail: str = "") -> None:
        message = reason.value if not detail else f"{reason.value}: {detail}"
        super().__init__(message)
        self.reason = reason
        self.detail = detail


class MalformedKeyError(ValueError):
    """A per-region attribute name does not have the composite key shape.

    Scoped to a single attribute: callers skip the key and keep going.
    """

    def __init__(self, key: str, separator: str, detail: str = "") -> None:
        reason = detail or f"missing {separator!r}"
        super().__init__(f"malformed region key {key!r}: {reason}")
        self.key = key
        self.separator = separator
