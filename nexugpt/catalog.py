"""
ModelCatalog - cached list of models offered by the proxy.

Refresh is best-effort: any failure is logged and the previous list kept.
"""

import logging
import re
from typing import Optional, Union

from pydantic import ValidationError

from nexugpt.adapters.base import FetchCapability
from nexugpt.adapters.schema import CatalogResponse
from nexugpt.config import (
    JSON_HEADERS,
    MODELS_NOT_LOADED,
    MODELS_NOT_LOADED_HINT,
    Model,
    ServiceEndpoint,
)
from nexugpt.core import ProxyError, describe_error, ensure_ok

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_index(value: Union[int, float, str, None]) -> Optional[int]:
    """
    Coerce a user-supplied index the way a lenient integer parse would.

    "3" -> 3, " 2nd" -> 2, 2.9 -> 2, "abc" -> None.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


class ModelCatalog:
    """
    Models in the order the service returned them, 1-based for callers.

    Empty until the first successful refresh; each successful refresh
    replaces the whole list.
    """

    def __init__(self, endpoint: ServiceEndpoint, fetch: FetchCapability):
        self._endpoint = endpoint
        self._fetch = fetch
        self._models: list[Model] = []

    async def refresh(self) -> None:
        """Reload the catalog. Never raises."""
        url = self._endpoint.models_url
        try:
            models = await self._fetch_models(url)
        except ValidationError as e:
            logger.warning(f"Malformed model list from {url}: {e.error_count()} validation errors")
            return
        except Exception as e:
            logger.warning(f"Failed to load models from {url}: {describe_error(e)}")
            return

        self._models = models
        logger.info(f"Loaded {len(models)} models from {url}")

    async def _fetch_models(self, url: str) -> list[Model]:
        response = ensure_ok(
            await self._fetch(url, method="POST", headers=JSON_HEADERS, body="{}")
        )
        payload = CatalogResponse.model_validate(response.json())
        if not payload.success:
            raise ProxyError("service reported success=false")
        if not payload.models:
            raise ProxyError("service returned an empty model list")
        return payload.models

    # ─────────────────────────────────────────────────────────────────
    # LOOKUP
    # ─────────────────────────────────────────────────────────────────

    def count(self) -> int:
        return len(self._models)

    def models(self) -> list[Model]:
        return list(self._models)

    def list_as_text(self) -> str:
        """Human-readable numbered listing, one block per model."""
        if not self._models:
            return MODELS_NOT_LOADED_HINT

        lines = [f"{len(self._models)} models available:\n\n"]
        for i, model in enumerate(self._models, start=1):
            lines.append(f"{i}. {model.display_name}\n   ID: {model.id}\n\n")
        return "".join(lines)

    def get_by_index(self, index: Union[int, float, str, None]) -> str:
        """Return the id of the model at a 1-based position, or a message."""
        if not self._models:
            return MODELS_NOT_LOADED

        position = parse_index(index)
        if position is None or not 1 <= position <= len(self._models):
            return f"Invalid index. Use 1-{len(self._models)}"
        return self._models[position - 1].id
