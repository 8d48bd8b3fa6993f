"""HTTP utilities package for the adapter layer.

Exposes pooled httpx clients shared by SDK handles.
"""

from .client import get_httpx_client, close_all_clients

__all__ = ["get_httpx_client", "close_all_clients"]
