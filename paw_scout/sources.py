# === FILE: paw_scout/sources.py ===
"""
The compiled-in list of rescue sites PawScout cross-checks, and the factory
that turns a validated source config into a SourceDescriptor.

SEAACA spreads its listing over several pages; Adopt-a-Pet and Petfinder each
have one. Petfinder only answers with JSON when the XHR headers are present.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Dict, List

from paw_scout.crawler.models import SourceDescriptor
from paw_scout.parser.extractors import (
    Extractor,
    MarkupExtractor,
    PatternExtractor,
    StructuredExtractor,
)
from paw_scout.parser.schemas import SCHEMAS

if TYPE_CHECKING:  # pragma: no cover
    from paw_scout.config import SourceConfig

SEAACA_PATTERN = r'"(/adoptions/view-our-animals?[^"]*pet_id=(\d{2,}-\d{5,}))"'
ADOPTAPET_PATTERN = (
    r'href="([^"]+)"[^>]*>.*?<\w+ class="[^"]*periodic-base[^"]*"[^>]*>'
    r"\s*(\d{2,}-\d{5,})\s*<"
)

PETFINDER_HEADERS: Dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "X-Requested-With": "XMLHttpRequest",
    # br is left out: only gzip and deflate are inflated
    "Accept-Encoding": "gzip, deflate",
}

_SEAACA = "https://www.seaaca.org"

DEFAULT_SOURCE_SPECS: List[Dict[str, Any]] = [
    *(
        {
            "site": _SEAACA,
            "page": f"/adoptions/view-our-animals/?&page={n}",
            "kind": "pattern",
            "pattern": SEAACA_PATTERN,
        }
        for n in range(4)
    ),
    {
        "site": "https://www.adoptapet.com",
        "page": "/adoption_rescue/73843-seaaca-southeast-area-animal-control-authority-downey-california",
        "kind": "pattern",
        "pattern": ADOPTAPET_PATTERN,
    },
    {
        "site": "https://www.petfinder.com",
        "page": (
            "/search/?page=1&limit[]=40&status=adoptable&distance[]=Anywhere"
            "&sort[]=recently_added&shelter_id[]=CA990&include_transportable=true"
        ),
        "headers": PETFINDER_HEADERS,
        "kind": "structured",
        "schema_name": "petfinder",
    },
]


def build_extractor(cfg: SourceConfig) -> Extractor:
    """Pick the extraction strategy named by ``cfg.kind``."""
    if cfg.kind == "pattern":
        try:
            return PatternExtractor(re.compile(cfg.pattern or ""))
        except re.error as exc:
            raise ValueError(f"invalid pattern {cfg.pattern!r}: {exc}") from exc
    if cfg.kind == "structured":
        try:
            schema = SCHEMAS[cfg.schema_name or ""]
        except KeyError:
            raise ValueError(
                f"unknown schema {cfg.schema_name!r}, expected one of {sorted(SCHEMAS)}"
            ) from None
        return StructuredExtractor(schema)
    if cfg.kind == "markup":
        try:
            id_pattern = re.compile(cfg.id_pattern or "")
        except re.error as exc:
            raise ValueError(f"invalid id_pattern {cfg.id_pattern!r}: {exc}") from exc
        return MarkupExtractor(cfg.selector or "", id_pattern)
    raise ValueError(f"unknown extractor kind {cfg.kind!r}")


def build_source(cfg: SourceConfig, position: int = 0) -> SourceDescriptor:
    return SourceDescriptor(
        site=cfg.site,
        page=cfg.page,
        extractor=build_extractor(cfg),
        headers=cfg.headers,
        position=position,
    )


__all__ = [
    "DEFAULT_SOURCE_SPECS",
    "SEAACA_PATTERN",
    "ADOPTAPET_PATTERN",
    "PETFINDER_HEADERS",
    "build_extractor",
    "build_source",
]
