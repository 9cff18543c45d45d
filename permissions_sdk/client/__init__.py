"""Offer the HTTP client of the remote permissions service."""

from permissions_sdk.client.client_api import PermissionsClient

__all__ = [
    "PermissionsClient",
]
