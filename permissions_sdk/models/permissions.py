"""Permission documents exchanged with the remote service.

The remote service wraps the permissions of a project in an envelope:

    {"permissions": {"project": {...}, "granteeCapabilities": [
        {"group": {"id": "..."}, "capabilities": {"capability": [
            {"name": "Read", "mode": "Allow"}]}}]}}
"""

from typing import Any

from permissions_sdk.models.capability import CapabilitiesWrapper, Capability
from permissions_sdk.models.grantee import (
    GroupGrantee,
    Owner,
    UserGrantee,
)
from pydantic import BaseModel, ConfigDict, Field


class GranteeCapability(BaseModel):
    """Capabilities granted to one grantee on a project (the actual state).

    Entries come from the remote service and are not trusted to be well formed:
    `group` and `user` are both optional and are never both checked against one
    declared grantee.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    group: Owner | None = Field(default=None)
    user: Owner | None = Field(default=None)
    capabilities: CapabilitiesWrapper = Field(default_factory=CapabilitiesWrapper)

    @classmethod
    def for_grant(
        cls, grantee: GroupGrantee | UserGrantee, capability: Capability
    ) -> "GranteeCapability":
        """Build an entry granting exactly one capability to one grantee."""
        return cls.model_validate(
            {
                **grantee.to_wire(),
                "capabilities": {"capability": [capability.model_dump()]},
            }
        )

    def grants(self, name: str, mode: str) -> bool:
        """Return True if one of the capabilities exactly matches name and mode."""
        return any(
            capability.matches(name, mode)
            for capability in self.capabilities.capability
        )


class Project(BaseModel):
    """Project summary optionally returned along with its permissions."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str | None = Field(default=None)
    name: str | None = Field(default=None)


class ProjectPermissions(BaseModel):
    """All the grantee capabilities of one project."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    project: Project | None = Field(default=None)
    grantee_capabilities: list[GranteeCapability] = Field(
        default_factory=list, alias="granteeCapabilities"
    )


class PermissionsEnvelope(BaseModel):
    """Top-level document of the project permissions endpoints."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    permissions: ProjectPermissions = Field(default_factory=ProjectPermissions)

    @classmethod
    def for_upsert(
        cls, grantee: GroupGrantee | UserGrantee, capability: Capability
    ) -> "PermissionsEnvelope":
        """Build the minimal upsert document: one grantee entry, one capability."""
        return cls(
            permissions=ProjectPermissions(
                grantee_capabilities=[GranteeCapability.for_grant(grantee, capability)]
            )
        )

    def to_wire(self) -> dict[str, Any]:
        """Dump the envelope as the JSON document expected by the remote service."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
