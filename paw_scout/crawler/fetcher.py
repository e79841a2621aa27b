# paw_scout/crawler/fetcher.py
"""
Fetcher module: one GET per source, status check, explicit gzip/deflate inflation
and extraction. Every failure is captured in the returned SourceResult.
"""
from __future__ import annotations

import asyncio
import gzip
import zlib
from urllib.parse import urlparse

from aiohttp import ClientError, ClientSession, InvalidURL

from paw_scout.crawler.models import SourceDescriptor, SourceResult
from paw_scout.errors import (
    DecodeError,
    HTTPStatusError,
    NetworkError,
    RequestConstructionError,
    SourceError,
)

_GZIP_ENCODINGS = ("gzip", "x-gzip")


def decode_body(encoding: str, body: bytes) -> bytes:
    """Inflate *body* according to a Content-Encoding value; unknown encodings pass through."""
    encoding = encoding.strip().lower()
    try:
        if encoding in _GZIP_ENCODINGS:
            return gzip.decompress(body)
        if encoding == "deflate":
            try:
                return zlib.decompress(body)
            except zlib.error:
                # raw deflate stream without the zlib header
                return zlib.decompress(body, -zlib.MAX_WBITS)
    except (OSError, EOFError, zlib.error) as exc:
        raise DecodeError(f"cannot inflate {encoding} body: {exc}") from exc
    return body


class Fetcher:
    """Retrieves and extracts a single SourceDescriptor. No retries, no caching.

    The session must be created with ``auto_decompress=False`` so that the
    Content-Encoding handling below sees the bytes as sent.
    """

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, source: SourceDescriptor) -> SourceResult:
        """Return the SourceResult for *source*; never raises SourceError."""
        try:
            body = await self._download(source)
            animals = source.extractor(body)
        except SourceError as exc:
            if exc.url is None:
                exc.url = source.url
            return SourceResult.failed(source, exc)
        return SourceResult(source=source, animals=animals)

    async def _download(self, source: SourceDescriptor) -> bytes:
        url = source.url
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise RequestConstructionError(f"not an absolute http(s) URL: {url!r}", url)
        try:
            async with self.session.get(url, headers=dict(source.headers)) as resp:
                if resp.status != 200:
                    raise HTTPStatusError(resp.status, resp.reason or "", url)
                raw = await resp.read()
                encoding = resp.headers.get("Content-Encoding", "")
        except InvalidURL as exc:
            raise RequestConstructionError(str(exc), url) from exc
        except (ValueError, TypeError) as exc:
            # aiohttp rejects malformed header names/values before sending
            raise RequestConstructionError(str(exc), url) from exc
        except asyncio.TimeoutError as exc:
            raise NetworkError("request timed out", url) from exc
        except ClientError as exc:
            raise NetworkError(str(exc) or type(exc).__name__, url) from exc
        return decode_body(encoding, raw)
