# === FILE: paw_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional, Sequence

from aiohttp import ClientSession, ClientTimeout

from paw_scout.crawler.fetcher import Fetcher
from paw_scout.crawler.models import SourceDescriptor, SourceResult

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """
    Fans out one task per source over a shared session and waits for all of them.
    A failing source is logged and yields an empty mapping; the others carry on.
    """

    _ACCEPT_ENCODING = "gzip, deflate"

    def __init__(self, config) -> None:
        self.config = config
        self._validate_config()
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("PawScout")

    async def __aenter__(self) -> AsyncCrawler:
        timeout = ClientTimeout(total=self.config.timeout)
        self.session = ClientSession(
            timeout=timeout,
            headers={
                "User-Agent": self.config.user_agent,
                "Accept-Encoding": self._ACCEPT_ENCODING,
            },
            auto_decompress=False,
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, sources: Optional[Sequence[SourceDescriptor]] = None) -> List[SourceResult]:
        """Fetch every source concurrently; results come back in input order."""
        if not self.session:
            raise RuntimeError("Session not initialized")
        if sources is None:
            sources = self.config.build_sources()
        self.logger.info("Crawling %d source(s)", len(sources))
        start = time.monotonic()
        fetcher = Fetcher(self.session)
        results = await asyncio.gather(*(self._run_one(fetcher, src) for src in sources))
        duration = time.monotonic() - start
        failed = sum(1 for r in results if not r.ok)
        self.logger.info(
            "Finished: %d source(s), %d failed, %d listing(s) in %.2f s",
            len(results),
            failed,
            sum(len(r.animals) for r in results),
            duration,
        )
        return list(results)

    async def _run_one(self, fetcher: Fetcher, source: SourceDescriptor) -> SourceResult:
        result = await fetcher.fetch(source)
        if result.error is not None:
            self.logger.error("%s: %s", source.url, result.error)
        else:
            self.logger.debug("%s: %d listing(s)", source.url, len(result.animals))
        return result

    def _validate_config(self) -> None:
        required = ("timeout", "user_agent")
        for f in required:
            if not hasattr(self.config, f):
                raise AttributeError(f"config missing '{f}'")
        if self.config.timeout is not None and self.config.timeout <= 0:
            raise ValueError("timeout must be > 0")
