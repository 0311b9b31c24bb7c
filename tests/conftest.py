"""
Test configuration and fixtures for the DUPR API client tests.
"""

import base64
import json
import time
from typing import Any, Callable, Optional

import httpx
import pytest

BASE_URL = "https://api.dupr.gg"


def make_jwt(exp: Optional[float] = None, **claims: Any) -> str:
    """Build a JWT with a dummy signature and unpadded base64url segments."""

    def segment(data: dict[str, Any]) -> str:
        raw = base64.urlsafe_b64encode(json.dumps(data).encode()).decode()
        return raw.rstrip("=")

    payload = dict(claims)
    if exp is not None:
        payload["exp"] = exp
    signature = base64.urlsafe_b64encode(b"signature").decode().rstrip("=")
    return f"{segment({'alg': 'HS256', 'typ': 'JWT'})}.{segment(payload)}.{signature}"


class MockApi:
    """
    Route table for ``httpx.MockTransport``.

    Responses queued for a route are served in order; the last one repeats.
    Every request is recorded for later assertions.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], list[Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        status: int = 200,
        text: Optional[str] = None,
    ) -> None:
        self.routes.setdefault((method, path), []).append((status, json, text))

    def add_handler(
        self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]
    ) -> None:
        self.routes.setdefault((method, path), []).append(handler)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"message": "no mock for this route"})

        entry = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(entry):
            return entry(request)

        status, body, text = entry
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, json=body)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests if r.method == method and r.url.path == path
        ]


@pytest.fixture
def mock_api():
    """Fake DUPR API."""
    return MockApi()


@pytest.fixture
def http_client(mock_api):
    """Async HTTP client wired to the fake API."""
    return httpx.AsyncClient(
        base_url=BASE_URL, transport=httpx.MockTransport(mock_api.handle)
    )


@pytest.fixture
def token_path(tmp_path):
    return tmp_path / "cache" / "dupr" / ".tokens"


@pytest.fixture
def token_store(token_path):
    from dupr.auth import TokenStore

    return TokenStore(token_path)


@pytest.fixture
def fresh_tokens():
    """Token pair valid for another hour."""
    from dupr.auth import TokenPair

    now = time.time()
    return TokenPair(
        access_token=make_jwt(now + 3600, sub="access"),
        refresh_token=make_jwt(now + 86400, sub="refresh"),
    )


@pytest.fixture
def mock_settings(monkeypatch, token_path):
    """Mock settings for testing."""
    from dupr.config import Settings

    for name in ("DUPR_EMAIL", "DUPR_PASSWORD", "DUPR_REFRESH_TOKEN"):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setenv("DUPR_BASE_URL", BASE_URL)
    monkeypatch.setenv("DUPR_TOKEN_PATH", str(token_path))
    monkeypatch.setenv("DUPR_CACHE_TOKENS", "true")
    monkeypatch.setenv("DUPR_TIMEOUT", "5")

    return Settings()


@pytest.fixture
def sample_player_data():
    """Sample player record as returned by the API."""
    return {
        "id": 42,
        "fullName": "Jane Doe",
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@example.com",
        "enablePrivacy": False,
        "verifiedEmail": True,
        "doubles": "4.512",
        "singles": "NR",
        "doublesReliability": 87.5,
        "shortAddress": "Austin, TX, US",
        "latitude": 30.27,
        "longitude": -97.74,
        "sponsor": {
            "id": 7,
            "buttonText": "Shop",
            "imageURL": "https://example.com/sponsor.png",
        },
        "someNewServerField": {"nested": True},
    }


@pytest.fixture
def sample_club_data():
    """Sample club record as returned by the club listing."""
    return {
        "clubId": 123,
        "clubName": "Downtown Picklers",
        "clubType": "PUBLIC",
        "mediaUrl": "https://example.com/club.png",
        "clubMemberCount": 58,
        "created": "2023-04-01T12:00:00Z",
        "clubJoinType": "REQUEST",
        "pendingRequestList": [5, 6],
        "address": {
            "id": 9,
            "shortAddress": "Austin, TX",
            "formattedAddress": "100 Main St, Austin, TX 78701, USA",
        },
    }


def player_hits(start: int, count: int) -> list[dict[str, Any]]:
    """Minimal player records with consecutive IDs."""
    return [
        {"id": i, "fullName": f"Player {i}"} for i in range(start, start + count)
    ]


# Markers for tests that need the live API
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring network access"
    )
