"""
Pytest fixtures - app client with a fake search backend (TDD/BDD support).
No live Elasticsearch cluster is needed: the backend factory is overridden.
"""

from dataclasses import dataclass, field

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from search_proxy.core.dependencies import get_backend_factory
from search_proxy.main import app
from search_proxy.search.elasticsearch_client import ClientConfig, SearchResult


@dataclass
class FakeBackend:
    """Records the search call and answers with a canned result (or raises)."""

    result: SearchResult | None = None
    error: Exception | None = None
    calls: list[dict] = field(default_factory=list)
    closed: bool = False

    async def search(self, indices, query_body, sort, size):
        self.calls.append({"indices": indices, "query_body": query_body, "sort": sort, "size": size})
        if self.error is not None:
            raise self.error
        return self.result

    async def close(self):
        self.closed = True


class FakeBackendFactory:
    """Stands in for open_backend; remembers every config it was asked to build."""

    def __init__(self):
        self.configs: list[ClientConfig] = []
        self.backends: list[FakeBackend] = []
        self.result = SearchResult(status=200, body=b'{"hits":{"total":1}}')
        self.search_error: Exception | None = None
        self.build_error: Exception | None = None

    def __call__(self, config: ClientConfig) -> FakeBackend:
        self.configs.append(config)
        if self.build_error is not None:
            raise self.build_error
        backend = FakeBackend(result=self.result, error=self.search_error)
        self.backends.append(backend)
        return backend


@pytest.fixture
def backend_factory() -> FakeBackendFactory:
    return FakeBackendFactory()


@pytest_asyncio.fixture
async def client(backend_factory: FakeBackendFactory):
    app.dependency_overrides[get_backend_factory] = lambda: backend_factory
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
