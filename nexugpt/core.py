"""
Core request plumbing: error taxonomy and the tagged reply used by the session.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from nexugpt.adapters.base import FetchCapability, FetchResponse

logger = logging.getLogger(__name__)


class ProxyError(Exception):
    """Human-readable error from the proxy service."""
    pass


class ProxyHTTPError(ProxyError):
    """Proxy answered with a non-2xx status."""

    def __init__(self, status: int):
        super().__init__(f"HTTP {status}")
        self.status = status


def describe_error(error: Exception) -> str:
    """Short message for an exception; falls back to the class name when empty."""
    return str(error) or type(error).__name__


def ensure_ok(response: FetchResponse) -> FetchResponse:
    """Raise ProxyHTTPError unless the response has a 2xx status."""
    if not response.ok:
        raise ProxyHTTPError(response.status)
    return response


# ─────────────────────────────────────────────────────────────────────
# TAGGED REPLY
# ─────────────────────────────────────────────────────────────────────

class ProxyReply(BaseModel):
    """
    Outcome of one request to the proxy.

    Either ok with the response text, or failed with an error message.
    render() produces the string callers see.
    """
    ok: bool
    text: str = ""
    error: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> "ProxyReply":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, error: str) -> "ProxyReply":
        return cls(ok=False, error=error)

    def render(self) -> str:
        if self.ok:
            return self.text
        return f"Error: {self.error}"


async def send_request(
    fetch: FetchCapability,
    url: str,
    method: str = "GET",
    headers: Optional[dict[str, str]] = None,
    body: Optional[str] = None,
) -> ProxyReply:
    """
    Issue one request and read the body as text.

    Never raises: HTTP statuses and transport errors come back as failed replies.
    """
    try:
        response = ensure_ok(
            await fetch(url, method=method, headers=headers, body=body)
        )
        return ProxyReply.success(response.text())
    except Exception as e:
        logger.warning(f"{method} {url} failed: {describe_error(e)}")
        return ProxyReply.failure(describe_error(e))
