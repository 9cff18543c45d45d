"""Offer enums for project permission models."""

from enum import StrEnum

__all__ = [
    "CapabilityMode",
    "CapabilityName",
]


class CapabilityName(StrEnum):
    """Capability names that can be granted on a project.

    Values are matched case-sensitively against the remote service.
    """

    READ = "Read"
    WRITE = "Write"


class CapabilityMode(StrEnum):
    """Whether a capability is allowed or denied."""

    ALLOW = "Allow"
    DENY = "Deny"
