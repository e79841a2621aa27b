# === FILE: paw_scout/parser/extractors.py ===
"""Extraction strategies: turn a raw response body into a ``pet id -> link`` mapping.

Every strategy is a plain callable ``bytes -> dict[str, str]`` and performs no
I/O. Three variants ship with PawScout:

* :class:`PatternExtractor`: a regular expression with a *link* and an *id*
  capture, for HTML pages whose markup is stable enough to match textually.
* :class:`StructuredExtractor`: a pydantic partial schema, for JSON APIs.
* :class:`MarkupExtractor`: a CSS selector evaluated with BeautifulSoup,
  for HTML pages where an element carries both the link and the id.

Finding nothing is a valid outcome and yields ``{}``. Only the structured
variant can fail, and only when the document cannot be parsed at all.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Dict, Protocol, Type, Union

from bs4 import BeautifulSoup
from bs4.element import Tag
from pydantic import ValidationError

from paw_scout.errors import ExtractionError
from paw_scout.parser.schemas import AnimalListing

__all__: Sequence[str] = (
    "AnimalMap",
    "Extractor",
    "PatternExtractor",
    "StructuredExtractor",
    "MarkupExtractor",
)

AnimalMap = Dict[str, str]


class Extractor(Protocol):
    """Anything that maps a response body to a pet id table."""

    def __call__(self, body: bytes) -> AnimalMap:  # pragma: no cover - protocol
        ...


def _compile(pattern: Union[str, re.Pattern[str]]) -> re.Pattern[str]:
    return re.compile(pattern) if isinstance(pattern, str) else pattern


class PatternExtractor:
    """Regex strategy.

    The pattern must expose two captures. Named groups ``link`` and ``id`` are
    used when present, otherwise group 1 is the link and group 2 the id.
    A later match for the same id replaces the earlier one.
    """

    def __init__(self, pattern: Union[str, re.Pattern[str]]) -> None:
        self.pattern = _compile(pattern)
        if self.pattern.groups < 2:
            raise ValueError(
                f"pattern needs a link and an id capture, got {self.pattern.groups} group(s)"
            )
        names = self.pattern.groupindex
        if "link" in names and "id" in names:
            self._link_group: Union[int, str] = "link"
            self._id_group: Union[int, str] = "id"
        else:
            self._link_group, self._id_group = 1, 2

    def __call__(self, body: bytes) -> AnimalMap:
        text = body.decode("utf-8", errors="replace")
        animals: AnimalMap = {}
        for match in self.pattern.finditer(text):
            pet_id = match.group(self._id_group)
            if not pet_id:
                continue
            animals[pet_id] = match.group(self._link_group) or ""
        return animals

    def __repr__(self) -> str:
        return f"PatternExtractor({self.pattern.pattern!r})"


class StructuredExtractor:
    """JSON strategy backed by a pydantic :class:`AnimalListing` schema."""

    def __init__(self, schema: Type[AnimalListing]) -> None:
        self.schema = schema

    def __call__(self, body: bytes) -> AnimalMap:
        try:
            listing = self.schema.model_validate_json(body)
        except ValidationError as exc:
            raise ExtractionError(
                f"{self.schema.__name__}: {exc.error_count()} validation error(s): "
                f"{exc.errors()[0]['msg']}"
            ) from exc
        return {pet_id: link for pet_id, link in listing.pet_links() if pet_id}

    def __repr__(self) -> str:
        return f"StructuredExtractor({self.schema.__name__})"


class MarkupExtractor:
    """CSS-selector strategy.

    Each element matched by *selector* contributes its ``href`` as the link and
    the first *id_pattern* match inside its text as the pet id (group 1 if the
    pattern has a group, the whole match otherwise).
    """

    def __init__(self, selector: str, id_pattern: Union[str, re.Pattern[str]]) -> None:
        try:
            BeautifulSoup("", "html.parser").select(selector)
        except Exception as exc:
            raise ValueError(f"invalid CSS selector {selector!r}: {exc}") from exc
        self.selector = selector
        self.id_pattern = _compile(id_pattern)

    def __call__(self, body: bytes) -> AnimalMap:
        soup = BeautifulSoup(body, "html.parser")
        animals: AnimalMap = {}
        for tag in soup.select(self.selector):
            if not isinstance(tag, Tag):
                continue
            href = tag.get("href")
            if not isinstance(href, str):
                continue
            found = self.id_pattern.search(tag.get_text(" ", strip=True))
            if not found:
                continue
            pet_id = found.group(1) if self.id_pattern.groups else found.group(0)
            animals[pet_id] = href.strip()
        return animals

    def __repr__(self) -> str:
        return f"MarkupExtractor({self.selector!r}, {self.id_pattern.pattern!r})"
