"""Shared test fixtures for nexugpt tests."""

import json
import pytest
from typing import Any, Optional


# ─────────────────────────────────────────────────────────────────────
# MOCK DATA
# ─────────────────────────────────────────────────────────────────────

MOCK_HOST = "proxy.test"
MOCK_API_URL = f"https://{MOCK_HOST}/"

MOCK_CATALOG_RESPONSE = {
    "success": True,
    "models": [
        {"id": "openrouter/free", "name": "OpenRouter Free"},
        {"id": "gpt-x", "name": "GPT X"},
        {"id": "llama-3.2-3b-instruct", "name": "Llama 3.2 3B Instruct"},
    ],
}


# ─────────────────────────────────────────────────────────────────────
# FAKE FETCH CAPABILITY
# ─────────────────────────────────────────────────────────────────────

class FakeResponse:
    """FetchResponse with a canned status and body."""

    def __init__(self, status: int = 200, body: str = ""):
        self.status = status
        self.ok = 200 <= status < 300
        self._body = body

    def text(self) -> str:
        return self._body

    def json(self) -> Any:
        return json.loads(self._body)


class FakeFetch:
    """
    In-memory FetchCapability.

    Replies are consumed in order; an Exception instance in the queue is raised
    instead of returned. Every call is recorded in .calls.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls: list[dict] = []
        self.observed_loading: list[bool] = []
        self.session = None

    def queue(self, *replies) -> None:
        self.replies.extend(replies)

    async def __call__(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Optional[dict] = None,
        body: Optional[str] = None,
    ):
        self.calls.append({"url": url, "method": method, "headers": headers, "body": body})
        if self.session is not None:
            self.observed_loading.append(self.session.is_loading())
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


# ─────────────────────────────────────────────────────────────────────
# FIXTURES
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def endpoint():
    """Return a ServiceEndpoint pointing at the mock proxy."""
    from nexugpt.config import ServiceEndpoint
    return ServiceEndpoint(url=MOCK_API_URL)


@pytest.fixture
def fake_fetch():
    return FakeFetch()


@pytest.fixture
def fake_response():
    """Return the FakeResponse class for building canned replies."""
    return FakeResponse


@pytest.fixture
def session(endpoint, fake_fetch):
    """Return a ConversationSession wired to the fake fetch."""
    from nexugpt.session import ConversationSession
    session = ConversationSession(endpoint, fake_fetch)
    fake_fetch.session = session
    return session


@pytest.fixture
def catalog(endpoint, fake_fetch):
    from nexugpt.catalog import ModelCatalog
    return ModelCatalog(endpoint, fake_fetch)


@pytest.fixture
def catalog_response():
    """Return a mock models payload."""
    return json.loads(json.dumps(MOCK_CATALOG_RESPONSE))
