# File: paw_scout/errors.py
"""paw_scout.errors: per-source failure taxonomy.

Every error here is fatal to a single source only. The crawler catches them
at the fetch boundary, logs them and carries on with an empty mapping.
"""
from __future__ import annotations

from typing import Optional, Sequence

__all__: Sequence[str] = (
    "SourceError",
    "RequestConstructionError",
    "RequestError",
    "NetworkError",
    "HTTPStatusError",
    "DecodeError",
    "ExtractionError",
)


class SourceError(Exception):
    """Base class for failures tied to one source URL."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url

    def __str__(self) -> str:
        kind = type(self).__name__
        return f"{kind}: {self.args[0]}" if self.args else kind


class RequestConstructionError(SourceError):
    """The request could not be built (malformed URL or header)."""


# short name used by the fetcher contract
RequestError = RequestConstructionError


class NetworkError(SourceError):
    """Connection, transfer or timeout failure."""


class HTTPStatusError(SourceError):
    """The server answered with anything but 200 OK."""

    def __init__(self, status: int, reason: str = "", url: Optional[str] = None) -> None:
        super().__init__(f"{status} {reason}".strip(), url)
        self.status = status


class DecodeError(SourceError):
    """A compressed body could not be inflated."""


class ExtractionError(SourceError):
    """A structured body could not be parsed at all."""
