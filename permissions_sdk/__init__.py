"""Offer a package to manage the permissions of projects on a remote service."""

__version__ = "0.1.0"

from permissions_sdk.client import PermissionsClient
from permissions_sdk.gateway import BasePermissionGateway
from permissions_sdk.identifier import decode_identifier, encode_identifier
from permissions_sdk.models import (
    Capability,
    DeclaredGrant,
    GranteeCapability,
    GroupGrantee,
    UserGrantee,
)
from permissions_sdk.reconcilers import (
    ProjectPermissionReconciler,
    ProjectPermissionsReader,
)
from permissions_sdk.settings import PermissionsSettings

__all__ = [
    # Models
    "Capability",
    "DeclaredGrant",
    "GranteeCapability",
    "GroupGrantee",
    "UserGrantee",
    # Identifier
    "decode_identifier",
    "encode_identifier",
    # Gateway
    "BasePermissionGateway",
    "PermissionsClient",
    # Reconcilers
    "ProjectPermissionReconciler",
    "ProjectPermissionsReader",
    # Settings
    "PermissionsSettings",
]
