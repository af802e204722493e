"""
Pytest configuration and fixtures.
Provides test app client and a fresh DI container per test.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.deps.di_container import create_container, set_container
from app.main import app


@pytest.fixture(scope="function")
def container():
    """
    Install a fresh global container for the duration of a test.
    """
    test_container = create_container()
    set_container(test_container)
    yield test_container
    set_container(None)


@pytest.fixture(scope="function")
async def test_client(container):
    """
    Create a test HTTP client.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
