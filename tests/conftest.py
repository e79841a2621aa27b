# File: tests/conftest.py
import logging
from collections.abc import AsyncIterator
from typing import Callable

import pytest
import pytest_asyncio

from paw_scout.config import ScoutConfig
from paw_scout.crawler.models import SourceResult
from paw_scout.errors import NetworkError

from .samples import make_result
from .servers import build_shelter_app, serve_app


@pytest.fixture()
def result_factory() -> Callable[..., SourceResult]:
    return make_result


@pytest.fixture()
def failed_result() -> SourceResult:
    return make_result("https://b.example", "/pets", error=NetworkError("connection refused"))


@pytest.fixture()
def scout_config() -> ScoutConfig:
    """Short timeout, built-in sources (tests pass their own descriptors)."""
    return ScoutConfig(timeout=2.0, user_agent="TestAgent/1.0")


@pytest_asyncio.fixture
async def shelter_server() -> AsyncIterator[str]:
    async for url in serve_app(build_shelter_app()):
        yield url


@pytest.fixture()
def scout_log(caplog):
    """caplog wired to the project logger, which does not propagate to root."""
    lg = logging.getLogger("PawScout")
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="PawScout")
    yield caplog
    lg.removeHandler(caplog.handler)
