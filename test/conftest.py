"""Pytest configuration and fixtures

Provides shared fixtures for all tests: test settings, an in-memory key-value
store, and a recording fake of the ClickUp API built on httpx.MockTransport.
No test talks to the real ClickUp service.
"""

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from taskmaster.config import Settings
from taskmaster.logger import session_logger
from taskmaster.mcp_server.components import initialize_components
from taskmaster.storage import MemoryKeyValueStore


# ============================================================================
# SETTINGS
# ============================================================================

TEST_API_URL = "https://clickup.test/api/v2"
TEST_TOKEN_URL = "https://clickup.test/api/v2/oauth/token"
TEST_AUTH_URL = "https://app.clickup.test/api"
TEST_STATIC_TOKEN = "pk_static_token"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with a static token and OAuth configured."""
    return Settings(
        api_url=TEST_API_URL,
        default_list_id="list-default",
        default_team_id="team-default",
        api_token=TEST_STATIC_TOKEN,
        client_id="client-id",
        client_secret="client-secret",
        encryption_key="test-encryption-key",
        auth_url=TEST_AUTH_URL,
        token_url=TEST_TOKEN_URL,
        data_dir=tmp_path,
        request_timeout=5.0,
    )


@pytest.fixture
def bare_settings(tmp_path) -> Settings:
    """Settings with no credential of any kind."""
    return Settings(api_url=TEST_API_URL, data_dir=tmp_path)


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


# ============================================================================
# FAKE CLICKUP
# ============================================================================

Responder = Callable[[httpx.Request], httpx.Response]


class FakeClickUp:
    """Route table of (method, path) -> response, recording every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], Responder] = {}
        self.transport = httpx.MockTransport(self._handle)

    def add(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        status_code: int = 200,
        responder: Optional[Responder] = None,
    ) -> None:
        """Register a response for ``method`` on ``path`` (full URL path)."""
        if responder is None:

            def responder(request: httpx.Request) -> httpx.Response:
                return httpx.Response(status_code, json=json_body)

        self._routes[(method.upper(), path)] = responder

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self._routes.get((request.method, request.url.path))
        if responder is None:
            return httpx.Response(404, json={"err": "Route not found", "ECODE": "TEST_404"})
        return responder(request)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_clickup() -> FakeClickUp:
    return FakeClickUp()


@pytest.fixture
def components(settings, store, fake_clickup):
    """Server components wired to the fake ClickUp API."""
    return initialize_components(
        settings=settings,
        logger=session_logger,
        store=store,
        transport=fake_clickup.transport,
    )


def result_payload(result) -> Any:
    """Parse the JSON text of a CallToolResult."""
    assert len(result.content) == 1
    return json.loads(result.content[0].text)
