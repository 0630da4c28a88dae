"""
JSONPlaceholder Gateway - Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Tests must never reach the real upstream service.
How:   The upstream base URL points at a fake host, and respx intercepts
       every httpx call made by the upstream client.

Fixtures:
    ├── upstream:     respx router mounted on the upstream base URL
    └── test_client:  HTTPX AsyncClient talking to the app in-process
"""

import os

# Override settings BEFORE any app imports
UPSTREAM_BASE_URL = "https://upstream.test"
os.environ["UPSTREAM_BASE_URL"] = UPSTREAM_BASE_URL
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
import respx
from httpx import ASGITransport, AsyncClient


@pytest.fixture
def upstream():
    """
    Mocked upstream service.

    Usage:
        async def test_get_post(test_client, upstream):
            upstream.get("/posts/1").respond(200, json={"id": 1})
            response = await test_client.get("/posts/1")

    Unregistered upstream calls fail the test (assert_all_mocked).
    """
    with respx.mock(base_url=UPSTREAM_BASE_URL, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def test_client():
    """
    Async HTTP client routed straight into the FastAPI app.

    The upstream client's pool is closed after each test so no connection
    outlives the event loop that opened it.
    """
    from app.main import app
    from app.services.upstream import upstream_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await upstream_client.aclose()


@pytest.fixture
def post():
    """A post as JSONPlaceholder returns it."""
    return {
        "userId": 1,
        "id": 1,
        "title": "sunt aut facere repellat provident",
        "body": "quia et suscipit\nsuscipit recusandae",
    }


@pytest.fixture
def comments():
    return [
        {"postId": 3, "id": 11, "name": "fugit labore", "email": "Veronica_Goodwin@timmothy.net", "body": "ut dolorum"},
        {"postId": 3, "id": 12, "name": "modi ut eos", "email": "Oswald.Vandervort@leanne.org", "body": "expedita maiores"},
    ]
