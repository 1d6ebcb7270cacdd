"""
ProxyExtension - composition root for a host embedding nexugpt.

Wires one ServiceEndpoint, one fetch capability, one ConversationSession
and one ModelCatalog together, and owns the background catalog refreshes.

Usage:
    ext = create_extension()
    reply = await ext.session.ask_with_history("Hello!")
    ext.set_endpoint("http://localhost:8000/")   # catalog reloads in background
"""

import asyncio
import logging
from typing import Optional

from dotenv import load_dotenv

from nexugpt.adapters.base import FetchCapability
from nexugpt.adapters.httpx_fetch import HttpxFetch
from nexugpt.catalog import ModelCatalog
from nexugpt.config import ServiceEndpoint, get_api_url
from nexugpt.session import ConversationSession

logger = logging.getLogger(__name__)


class ProxyExtension:
    """
    Session, catalog and the endpoint they share.

    When constructed inside a running event loop the catalog starts loading
    immediately in the background. Outside a loop nothing is scheduled and
    the catalog stays empty until refresh_models() is awaited.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        fetch: Optional[FetchCapability] = None,
        load_models: bool = True,
    ):
        self.endpoint = ServiceEndpoint(url=api_url or get_api_url())
        self._fetch = fetch or HttpxFetch()
        self.session = ConversationSession(self.endpoint, self._fetch)
        self.catalog = ModelCatalog(self.endpoint, self._fetch)
        self._refresh_tasks: set[asyncio.Task] = set()

        if load_models:
            self._schedule_refresh()

    def set_endpoint(self, url: str) -> None:
        """Point both components at a new proxy and reload the catalog."""
        self.endpoint.url = url
        self._schedule_refresh()

    async def refresh_models(self) -> None:
        await self.catalog.refresh()

    async def wait_for_catalog(self) -> None:
        """Wait for any background catalog refreshes still in flight."""
        while True:
            pending = [task for task in self._refresh_tasks if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending)

    def _schedule_refresh(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, catalog refresh not scheduled")
            return

        task = loop.create_task(self.catalog.refresh())
        self._refresh_tasks.add(task)
        task.add_done_callback(self._refresh_tasks.discard)


def create_extension(
    fetch: Optional[FetchCapability] = None,
    load_models: bool = True,
) -> ProxyExtension:
    """Build a ProxyExtension configured from the environment (.env included)."""
    load_dotenv()
    return ProxyExtension(fetch=fetch, load_models=load_models)
