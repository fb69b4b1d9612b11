"""
Backend REST API client.
"""
from catalog_gateway.client.backend_client import BackendClient
from catalog_gateway.client.exceptions import (
    BackendError,
    BackendResponseError,
    BackendUnavailableError,
)

__all__ = [
    "BackendClient",
    "BackendError",
    "BackendResponseError",
    "BackendUnavailableError",
]
