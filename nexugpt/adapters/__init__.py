"""
Adapters for the HTTP transport used to reach the proxy.

Protocol defines WHAT, implementations define HOW.
"""

from .base import FetchCapability, FetchResponse
from .httpx_fetch import HttpxFetch

__all__ = ["FetchCapability", "FetchResponse", "HttpxFetch"]
