from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field

from nexugpt.config import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, Model


class ChatRequest(BaseModel):
    """
    Request body for the multi-turn POST to the proxy.
    The model key is omitted entirely when no override is selected,
    so the proxy falls back to its own default.
    """
    messages: List[Dict[str, Any]]
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    model: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CatalogResponse(BaseModel):
    """
    Response body of POST {endpoint}models.
    """
    success: bool
    models: List[Model] = Field(default_factory=list)
