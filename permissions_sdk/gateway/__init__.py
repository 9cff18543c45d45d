"""Offer the remote permissions gateway contract."""

from permissions_sdk.gateway.base_gateway import BasePermissionGateway

__all__ = [
    "BasePermissionGateway",
]
