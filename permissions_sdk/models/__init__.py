"""Offer project permission models."""

from permissions_sdk.models.capability import CapabilitiesWrapper, Capability
from permissions_sdk.models.enums import CapabilityMode, CapabilityName
from permissions_sdk.models.grant import DeclaredGrant
from permissions_sdk.models.grantee import (
    Grantee,
    GroupGrantee,
    Owner,
    UserGrantee,
    grantee_from_ids,
)
from permissions_sdk.models.permissions import (
    GranteeCapability,
    PermissionsEnvelope,
    Project,
    ProjectPermissions,
)

__all__ = [
    "CapabilitiesWrapper",
    "Capability",
    "CapabilityMode",
    "CapabilityName",
    "DeclaredGrant",
    "Grantee",
    "GranteeCapability",
    "GroupGrantee",
    "Owner",
    "PermissionsEnvelope",
    "Project",
    "ProjectPermissions",
    "UserGrantee",
    "grantee_from_ids",
]
