"""Offer the settings to reach the remote permissions service."""

from permissions_sdk.settings.base_settings import PermissionsSettings

__all__ = [
    "PermissionsSettings",
]
