# File: paw_scout/engine.py
"""paw_scout.engine: orchestration layer: run the crawl, then merge the results into a Report."""

from __future__ import annotations

import asyncio
from typing import List, Optional

from paw_scout.aggregator import Report, aggregate_results
from paw_scout.config import ScoutConfig, load_config
from paw_scout.crawler.crawler import AsyncCrawler
from paw_scout.crawler.models import SourceResult
from paw_scout.logger import logger

__all__ = ["Engine", "start_crawl"]


async def start_crawl(cfg: ScoutConfig) -> List[SourceResult]:
    """
    Запускает асинхронный краулер в контексте и возвращает список SourceResult.

    Parameters
    ----------
    cfg : ScoutConfig
        Конфигурация обхода.

    Returns
    -------
    List[SourceResult]
        One result per configured source, failures included.
    """
    async with AsyncCrawler(cfg) as crawler:
        return await crawler.crawl(cfg.build_sources())


class Engine:
    """Фасад для CLI и тестов: загрузка конфига, обход источников и сборка отчёта."""

    @staticmethod
    def load_config(path: Optional[str]) -> ScoutConfig:
        """Загружает конфиг из YAML/JSON или использует встроенный список сайтов."""
        return load_config(path)

    def __init__(self, config: ScoutConfig) -> None:
        self.config = config

    def run(self, scan_timeout: Optional[float] = None) -> Report:
        """Crawl every source (optionally under an overall deadline) and return the ranked report."""
        logger.info("Starting crawl…")

        async def _runner() -> List[SourceResult]:
            if scan_timeout:
                return await asyncio.wait_for(start_crawl(self.config), timeout=scan_timeout)
            return await start_crawl(self.config)

        try:
            results = asyncio.run(_runner())
        except asyncio.TimeoutError:
            logger.error("Crawl did not finish within %s seconds", scan_timeout)
            raise
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise

        return self.build_report(results)

    @staticmethod
    def build_report(results: List[SourceResult]) -> Report:
        """Агрегирует результаты в Report через paw_scout.aggregator."""
        try:
            report = aggregate_results(results)
        except Exception as exc:
            logger.error("Aggregation failed: %s", exc)
            raise
        logger.info("Report: %d site(s), %d pet(s)", len(report.sites), len(report.pets))
        return report
