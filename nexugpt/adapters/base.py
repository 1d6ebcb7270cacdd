"""
FetchCapability Protocol - defines the contract for the HTTP transport.

This is the WHAT (interface), not the HOW (implementation).
See httpx_fetch.py for the concrete implementation.
"""

from typing import Any, Optional, Protocol


class FetchResponse(Protocol):
    """
    A completed HTTP response.

    The body has already been received when the fetch call returns,
    so text() and json() do not suspend.
    """

    ok: bool
    status: int

    def text(self) -> str:
        ...

    def json(self) -> Any:
        """
        Decode the body as JSON.

        Raises:
            ValueError (or a subclass) if the body is not valid JSON
        """
        ...


class FetchCapability(Protocol):
    """
    Contract for the injected HTTP transport.

    Implementations own any timeout policy. Transport failures are raised
    as exceptions; HTTP error statuses are returned as responses with ok=False.
    """

    async def __call__(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Optional[dict[str, str]] = None,
        body: Optional[str] = None,
    ) -> FetchResponse:
        ...
