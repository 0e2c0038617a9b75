import pytest
from httpx import ASGITransport, AsyncClient

from resource_console_api.app.main import create_app
from resource_console_api.app.services.storage import ResourceStore


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    """Empty store; every test starts with ids at 1."""
    return ResourceStore()


@pytest.fixture
def app(store):
    return create_app(store, seed=False)


@pytest.fixture
async def client(app):
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
