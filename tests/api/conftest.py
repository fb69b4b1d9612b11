"""
Fixtures for API tests: the gateway app wired to a mocked backend
"""
import json

import httpx
import pytest


class FakeBackend:
    """
    Мок REST бэкенда для httpx.MockTransport.

    routes: (method, path) -> (status, body); calls: список (method, path, query).
    """

    def __init__(self):
        self.routes = {}
        self.calls = []
        self.raw_params = []

    def add(self, method, path, body=None, status=200):
        self.routes[(method, path)] = (status, body)

    def count(self, method, path):
        return sum(1 for m, p, _ in self.calls if m == method and p == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.method, request.url.path, dict(request.url.params)))
        self.raw_params.append(list(request.url.params.multi_items()))
        status, body = self.routes.get((request.method, request.url.path), (404, {"message": "Not found"}))
        return httpx.Response(status, content=json.dumps(body).encode(), headers={"Content-Type": "application/json"})


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
async def runtime(test_settings, fake_backend):
    from catalog_gateway.runtime import GatewayRuntime

    rt = GatewayRuntime.from_settings(test_settings, transport=httpx.MockTransport(fake_backend.handler))
    yield rt
    await rt.stop()


@pytest.fixture
async def client(test_settings, runtime):
    """
    Async HTTP клиент к приложению.

    ASGITransport не запускает lifespan, поэтому runtime подставляется напрямую.
    """
    from httpx import ASGITransport, AsyncClient
    from catalog_gateway.main import create_app

    app = create_app(test_settings)
    app.state.runtime = runtime
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
