"""
ConversationSession - prompt operations and the conversation state they touch.
"""

import json
import logging
from typing import Optional

from nexugpt.adapters.base import FetchCapability
from nexugpt.adapters.schema import ChatRequest
from nexugpt.config import (
    JSON_HEADERS,
    NO_PROMPT_MESSAGE,
    NO_RESPONSE_MESSAGE,
    SERVER_DEFAULT_LABEL,
    ServiceEndpoint,
    Turn,
)
from nexugpt.core import ProxyReply, describe_error, send_request

logger = logging.getLogger(__name__)


class ConversationSession:
    """
    Owns conversation history, the model override, the last response and
    the loading flag.

    One request at a time per session. ask() and ask_with_history() always
    return a string; failures come back as "Error: <message>".
    """

    def __init__(self, endpoint: ServiceEndpoint, fetch: FetchCapability):
        self._endpoint = endpoint
        self._fetch = fetch
        self._history: list[Turn] = []
        self._model: Optional[str] = None
        self._last_response = ""
        self._is_loading = False

    # ─────────────────────────────────────────────────────────────────
    # PROMPTING
    # ─────────────────────────────────────────────────────────────────

    async def ask(self, prompt: Optional[str]) -> str:
        """Single-turn prompt. History is neither read nor written."""
        if not prompt:
            return NO_PROMPT_MESSAGE

        try:
            url = self._endpoint.prompt_url(prompt, self._model)
        except UnicodeError as e:
            logger.warning(f"Could not encode prompt URL: {describe_error(e)}")
            return ProxyReply.failure(describe_error(e)).render()
        reply = await self._send(url)
        if reply.ok:
            self._last_response = reply.text
        return reply.render()

    async def ask_with_history(self, prompt: Optional[str]) -> str:
        """
        Multi-turn prompt carrying the whole conversation.

        The user turn is recorded before the request goes out. On failure
        history is cut back to where it was, so no unanswered user turn
        is ever left behind.
        """
        if not prompt:
            return NO_PROMPT_MESSAGE

        mark = len(self._history)
        self._history.append(Turn(role="user", content=prompt))

        request = ChatRequest(
            messages=[turn.model_dump() for turn in self._history],
            model=self._model or None,
        )
        reply = await self._send(
            self._endpoint.url,
            method="POST",
            headers=JSON_HEADERS,
            body=json.dumps(request.to_payload()),
        )

        if reply.ok:
            self._last_response = reply.text
            self._history.append(Turn(role="assistant", content=reply.text))
        else:
            del self._history[mark:]
        return reply.render()

    async def _send(self, url: str, **kwargs) -> ProxyReply:
        self._is_loading = True
        try:
            return await send_request(self._fetch, url, **kwargs)
        finally:
            self._is_loading = False

    # ─────────────────────────────────────────────────────────────────
    # MODEL SELECTION
    # ─────────────────────────────────────────────────────────────────

    def set_model(self, model_id: str) -> None:
        """Select a model override. Not checked against the catalog."""
        self._model = model_id

    def current_model(self) -> str:
        return self._model or SERVER_DEFAULT_LABEL

    def reset_model(self) -> None:
        self._model = None

    # ─────────────────────────────────────────────────────────────────
    # STATE ACCESSORS
    # ─────────────────────────────────────────────────────────────────

    def last_response(self) -> str:
        return self._last_response or NO_RESPONSE_MESSAGE

    def clear_history(self) -> None:
        """Forget the conversation and the last response. Model override is kept."""
        self._history = []
        self._last_response = ""

    def is_loading(self) -> bool:
        return self._is_loading

    def history_length(self) -> int:
        """Number of turns, not exchanges."""
        return len(self._history)

    def history(self) -> list[Turn]:
        return list(self._history)
