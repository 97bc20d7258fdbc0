"""
Pytest configuration and shared fixtures for the users proxy tests
"""
import anyio
import pytest
import httpx
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.api.deps import get_users_service
from app.main import app
from app.services.users_service import UsersService


USERS_PAGE = {
    "page": 1,
    "per_page": 6,
    "total": 12,
    "total_pages": 2,
    "data": [
        {
            "id": 1,
            "email": "george.bluth@reqres.in",
            "first_name": "George",
            "last_name": "Bluth",
            "avatar": "https://reqres.in/img/faces/1-image.jpg",
        },
        {
            "id": 2,
            "email": "janet.weaver@reqres.in",
            "first_name": "Janet",
            "last_name": "Weaver",
            "avatar": "https://reqres.in/img/faces/2-image.jpg",
        },
    ],
    "support": {
        "url": "https://reqres.in/#support-heading",
        "text": "To keep ReqRes free, contributions towards server costs are appreciated!",
    },
}


class FakeUpstream:
    """Stand-in for ReqRes: records requests and answers with a configurable handler."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(200, json=USERS_PAGE)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request reached the upstream"
        return self.requests[-1]


@pytest.fixture
def users_page():
    return USERS_PAGE


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def cfg(monkeypatch):
    """Settings with defaults only (no env vars, no .env file)"""
    for name in ("REQRES_BASE_URL", "REQRES_API_KEY", "REQRES_TIMEOUT_SECONDS", "REQRES_MAX_REDIRECTS"):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def make_service(upstream, cfg):
    """Build a UsersService wired to the fake upstream, optionally with other settings"""
    clients = []

    def _make(settings: Settings = None) -> UsersService:
        http = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
        clients.append(http)
        return UsersService(http, settings or cfg)

    yield _make
    for http in clients:
        anyio.run(http.aclose)


@pytest.fixture
def client(make_service):
    """Test client for the FastAPI app with the users service pointed at the fake upstream"""
    service = make_service()
    app.dependency_overrides[get_users_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
