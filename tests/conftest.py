"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from link_redirector.config import Config
from link_redirector.keygen import IdentifierGenerator, TimeToken
from link_redirector.service import LinkRedirectorService
from link_redirector.store import MemoryLinkStore
from link_redirector.common.logging_config import setup_logging
from link_redirector.web_app import create_app


SECRET = "S1"


class FixedClock:
    """Clock returning a settable millisecond value."""

    def __init__(self, millis: int = 1_700_000_000_000):
        self.millis = millis

    def __call__(self) -> int:
        return self.millis


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store():
    """Empty in-memory store."""
    return MemoryLinkStore()


@pytest.fixture
def generator():
    """Identifier generator with the system clock."""
    return IdentifierGenerator()


@pytest.fixture
def fixed_generator():
    """Identifier generator whose output is fully deterministic."""
    return IdentifierGenerator(
        time_token=TimeToken(clock=FixedClock()),
        random_bytes=lambda n: b"\x00" * n,
    )


@pytest.fixture
def service(store, generator, logger) -> LinkRedirectorService:
    """Create service instance."""
    return LinkRedirectorService(
        store=store,
        secret=SECRET,
        generator=generator,
        logger=logger,
    )


@pytest.fixture
def app(service):
    """Create test FastAPI app."""
    config = Config(secret=SECRET)
    return create_app(service_instance=service, config=config)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com",
        "https://github.com/user/repo?tab=readme#top",
        "https://stackoverflow.com/questions/123456",
    ]
