# paw_scout/crawler/models.py
"""
Data models for the PawScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from paw_scout.errors import SourceError
from paw_scout.parser.extractors import AnimalMap, Extractor


@dataclass(frozen=True, slots=True)
class SourceDescriptor:
    """One fetchable page: site root, page path, extra headers and the extractor for its body.

    ``position`` is the page's index in the configured source list; among pages
    of the same site the higher position wins when both list a pet.
    """

    site: str
    page: str
    extractor: Extractor
    headers: Mapping[str, str] = field(default_factory=dict)
    position: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def url(self) -> str:
        return self.site + self.page


@dataclass(slots=True)
class SourceResult:
    """Outcome of fetching one SourceDescriptor: the extracted animals or the error."""

    source: SourceDescriptor
    animals: AnimalMap = field(default_factory=dict)
    error: Optional[SourceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, source: SourceDescriptor, error: SourceError) -> SourceResult:
        return cls(source=source, animals={}, error=error)


__all__ = ["SourceDescriptor", "SourceResult", "AnimalMap"]
