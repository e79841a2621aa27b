"""paw_scout.crawler: fetching sources and fanning the fetches out."""
from paw_scout.crawler.crawler import AsyncCrawler
from paw_scout.crawler.fetcher import Fetcher, decode_body
from paw_scout.crawler.models import SourceDescriptor, SourceResult

__all__ = ["AsyncCrawler", "Fetcher", "decode_body", "SourceDescriptor", "SourceResult"]
