"""
nexugpt - client for the NexuGPT chat-completion proxy.
"""

from nexugpt.catalog import ModelCatalog
from nexugpt.config import Model, ServiceEndpoint, Turn
from nexugpt.extension import ProxyExtension, create_extension
from nexugpt.session import ConversationSession

__all__ = [
    "ConversationSession",
    "Model",
    "ModelCatalog",
    "ProxyExtension",
    "ServiceEndpoint",
    "Turn",
    "create_extension",
]
