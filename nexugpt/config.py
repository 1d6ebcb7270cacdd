"""
Configuration constants and Pydantic models for nexugpt.
"""

import os
from typing import Literal, Optional
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict


# ─────────────────────────────────────────────────────────────────────
# DEFAULTS
# ─────────────────────────────────────────────────────────────────────

DEFAULT_API_URL: str = "https://nexuproxy.onrender.com/"
DEFAULT_TEMPERATURE: float = 0.7
DEFAULT_MAX_TOKENS: int = 100000
DEFAULT_TIMEOUT_SECONDS: int = 300  # 5 minutes

JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


# ─────────────────────────────────────────────────────────────────────
# USER-FACING MESSAGES
# ─────────────────────────────────────────────────────────────────────

NO_PROMPT_MESSAGE: str = "Please provide a prompt"
SERVER_DEFAULT_LABEL: str = "(server default)"
NO_RESPONSE_MESSAGE: str = "No response yet"
MODELS_NOT_LOADED_HINT: str = "Models not loaded yet. Use refresh models block."
MODELS_NOT_LOADED: str = "Models not loaded"


# ─────────────────────────────────────────────────────────────────────
# ENVIRONMENT LOADING
# ─────────────────────────────────────────────────────────────────────

def get_api_url() -> str:
    """
    Get the proxy base URL from environment or default.

    Set NEXUGPT_API_URL in .env to point at another deployment.
    """
    value = os.environ.get("NEXUGPT_API_URL", "").strip()
    return value or DEFAULT_API_URL


def get_timeout_seconds() -> float:
    """
    Get the HTTP timeout applied by the default fetch capability.

    Set NEXUGPT_TIMEOUT_SECONDS in .env (default: 300).
    """
    try:
        return float(os.environ.get("NEXUGPT_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))
    except ValueError:
        return float(DEFAULT_TIMEOUT_SECONDS)


# ─────────────────────────────────────────────────────────────────────
# DATA MODELS
# ─────────────────────────────────────────────────────────────────────

class ServiceEndpoint(BaseModel):
    """Base URL of the proxy service, shared by the session and the catalog.

    The URL is mutable at runtime; callers read it when building each request.
    """
    url: str = DEFAULT_API_URL

    @property
    def models_url(self) -> str:
        return f"{self.url}models"

    def prompt_url(self, prompt: str, model: Optional[str] = None) -> str:
        """Build the single-turn GET URL with percent-encoded query values."""
        params = {"prompt": prompt}
        if model:
            params["model"] = model
        # same unreserved set as encodeURIComponent
        query = urlencode(params, safe="!'()*", quote_via=quote)
        return f"{self.url}?{query}"


class Turn(BaseModel):
    """A single message in a conversation."""
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class Model(BaseModel):
    """An entry in the service's model catalog."""
    id: str
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.id
