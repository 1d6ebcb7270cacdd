"""
HttpxFetch - httpx implementation of FetchCapability.

One AsyncClient per call; the proxy is the only host we talk to and
calls are strictly one at a time, so there is no pool to manage.
"""

import logging
from typing import Any, Optional

import httpx

from nexugpt.config import get_timeout_seconds

logger = logging.getLogger(__name__)


class HttpxFetchResponse:
    """FetchResponse backed by a fully-read httpx.Response."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def ok(self) -> bool:
        return self._response.is_success

    @property
    def status(self) -> int:
        return self._response.status_code

    def text(self) -> str:
        return self._response.text

    def json(self) -> Any:
        return self._response.json()


class HttpxFetch:
    """
    httpx implementation of FetchCapability protocol.

    Raises httpx.HTTPError subclasses on transport failure (connect errors,
    timeouts). Non-2xx statuses are returned, not raised.
    """

    def __init__(self, timeout_seconds: Optional[float] = None):
        if timeout_seconds is None:
            timeout_seconds = get_timeout_seconds()
        self._timeout = timeout_seconds

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    async def __call__(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Optional[dict[str, str]] = None,
        body: Optional[str] = None,
    ) -> HttpxFetchResponse:
        logger.debug(f"{method} {url}")
        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            response = await client.request(method, url, headers=headers, content=body)
        return HttpxFetchResponse(response)
