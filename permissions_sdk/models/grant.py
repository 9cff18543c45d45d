"""DeclaredGrant."""

from typing import Any

from permissions_sdk.exceptions import GrantValidationError, InvalidCapabilityError
from permissions_sdk.models.capability import Capability
from permissions_sdk.models.enums import CapabilityMode, CapabilityName
from permissions_sdk.models.grantee import (
    GroupGrantee,
    UserGrantee,
    grantee_from_ids,
)
from pydantic import BaseModel, ConfigDict, Field, field_validator


class DeclaredGrant(BaseModel):
    """Represent the desired state of one permission grant on a project.

    A grant is immutable: any change of one of its fields makes it another grant,
    which must be realized as a delete of the old one followed by a create.

    The grantee ids and the capability pair are stored as declared. They are only
    checked when the grant is submitted to a reconciler, so that an imported
    identifier can always be decoded first.

    Examples:
        >>> grant = DeclaredGrant(
        ...     project_id="p1",
        ...     group_id="g1",
        ...     capability_name="Read",
        ...     capability_mode="Allow",
        ... )
        >>> str(grant.grantee)
        'group:g1'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    project_id: str = Field(description="The ID of the project.")
    group_id: str | None = Field(
        default=None,
        description="The ID of the group to grant the capability to.",
    )
    user_id: str | None = Field(
        default=None,
        description="The ID of the user to grant the capability to.",
    )
    capability_name: str = Field(description="The capability name, Read or Write.")
    capability_mode: str = Field(
        description="Allow or Deny. This value is case sensitive."
    )

    @field_validator("group_id", "user_id", mode="before")
    @classmethod
    def _empty_as_unset(cls, value: Any) -> Any:
        """Consider an empty grantee id as unset."""
        return value or None

    @classmethod
    def for_grantee(
        cls,
        project_id: str,
        grantee: GroupGrantee | UserGrantee,
        capability: Capability,
    ) -> "DeclaredGrant":
        """Build a grant from an already built grantee and capability."""
        return cls.model_validate(
            {
                "project_id": project_id,
                f"{grantee.kind}_id": grantee.id,
                "capability_name": capability.name,
                "capability_mode": capability.mode,
            }
        )

    @property
    def grantee(self) -> GroupGrantee | UserGrantee:
        """The grantee of the grant.

        Raises:
            ConflictingGranteeError: If both or none of group_id and user_id are set.
        """
        return grantee_from_ids(self.group_id, self.user_id, grant=self)

    def validated_capability(self) -> Capability:
        """Return the capability after checking it against the enumerations.

        Raises:
            InvalidCapabilityError: If the name is not Read/Write or the mode is not
                Allow/Deny. The comparison is case-sensitive.
        """
        try:
            name = CapabilityName(self.capability_name)
        except ValueError as e:
            raise InvalidCapabilityError(
                f"capability_name must be one of {[n.value for n in CapabilityName]}",
                self,
            ) from e
        try:
            mode = CapabilityMode(self.capability_mode)
        except ValueError as e:
            raise InvalidCapabilityError(
                f"capability_mode must be one of {[m.value for m in CapabilityMode]}",
                self,
            ) from e
        return Capability(name=name.value, mode=mode.value)

    def validate_address(self) -> GroupGrantee | UserGrantee:
        """Check the project and the grantee addressing the grant remotely.

        Returns:
            GroupGrantee | UserGrantee: The grantee of the grant.

        Raises:
            GrantValidationError: If the project id is empty.
            ConflictingGranteeError: If both or none of group_id and user_id are set.
        """
        if not self.project_id:
            raise GrantValidationError("project_id is required", self)
        return self.grantee

    def validate_for_submission(self) -> tuple[GroupGrantee | UserGrantee, Capability]:
        """Check the whole grant before any remote call.

        Returns:
            tuple: The grantee and the validated capability.

        Raises:
            GrantValidationError: If the project id is empty, the grantee is
                conflicting or the capability is invalid.
        """
        return self.validate_address(), self.validated_capability()

    def describe_grantee(self) -> str:
        """Describe the declared grantee without validating it."""
        parts = []
        if self.group_id:
            parts.append(f"group:{self.group_id}")
        if self.user_id:
            parts.append(f"user:{self.user_id}")
        return "+".join(parts) or "none"
