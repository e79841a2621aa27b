# File: paw_scout/aggregator.py
"""paw_scout.aggregator: merges per-source pet tables into a ranked presence report."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from paw_scout.crawler.models import SourceResult
from paw_scout.utils import qualify_link, site_label

GENERATED_FORMAT = "%a %Y/%m/%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class PresenceEntry:
    """One pet: its link on every site (``""`` where absent) and on how many sites it was found."""

    pet_id: str
    links: Tuple[str, ...]
    presence_count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "links", tuple(self.links))
        object.__setattr__(self, "presence_count", sum(1 for link in self.links if link))

    @property
    def rank_key(self) -> Tuple[int, str]:
        return (self.presence_count, self.pet_id)


@dataclass(slots=True)
class Report:
    """Merged crawl results, ready for the HTML/JSON renderers."""

    generated: datetime
    sites: List[str] = field(default_factory=list)
    pets: List[PresenceEntry] = field(default_factory=list)
    site_urls: Dict[str, str] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def generated_label(self) -> str:
        return self.generated.strftime(GENERATED_FORMAT)


def _merge_order(result: SourceResult) -> Tuple[str, int, str]:
    # pages of one site are applied in configured order; the later page wins on conflicts
    source = result.source
    return (site_label(source.site), source.position, source.url)


def _collect_sites(results: Sequence[SourceResult]) -> Dict[str, str]:
    """label -> base address; the first base in merge order names a shared label."""
    site_urls: Dict[str, str] = {}
    for result in results:
        site_urls.setdefault(site_label(result.source.site), result.source.site)
    return dict(sorted(site_urls.items()))


def _merge_animals(results: Sequence[SourceResult]) -> Dict[str, Dict[str, str]]:
    """pet id -> {site label -> absolute link}."""
    table: Dict[str, Dict[str, str]] = {}
    for result in results:
        label = site_label(result.source.site)
        for pet_id, link in result.animals.items():
            table.setdefault(pet_id, {})[label] = qualify_link(result.source.site, link)
    return table


def rank_entries(entries: Iterable[PresenceEntry]) -> List[PresenceEntry]:
    """Fewest presences first, then pet id, so likely omissions cluster at the top."""
    return sorted(entries, key=lambda entry: entry.rank_key)


def aggregate_results(
    results: Iterable[SourceResult], generated: Optional[datetime] = None
) -> Report:
    """Собирает результаты всех источников в Report."""
    ordered = sorted(results, key=_merge_order)
    site_urls = _collect_sites(ordered)
    sites = list(site_urls)
    table = _merge_animals(ordered)

    entries = (
        PresenceEntry(pet_id, tuple(links.get(site, "") for site in sites))
        for pet_id, links in table.items()
    )
    failures = {r.source.url: str(r.error) for r in ordered if r.error is not None}

    return Report(
        generated=generated or datetime.now(),
        sites=sites,
        pets=rank_entries(entries),
        site_urls=site_urls,
        failures=failures,
    )


__all__ = ["PresenceEntry", "Report", "aggregate_results", "rank_entries", "GENERATED_FORMAT"]
