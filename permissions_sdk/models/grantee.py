"""Grantees a capability can be granted to.

A grantee is exactly one of a group or a user. It is modelled as a tagged union
discriminated on `kind`, so that a grantee with both or neither identity cannot be
built. `grantee_from_ids` is the single place turning the two optional ids of a
declared grant into a grantee.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Annotated, Any, Literal, Union

from permissions_sdk.exceptions import ConflictingGranteeError
from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from permissions_sdk.models.grant import DeclaredGrant
    from permissions_sdk.models.permissions import GranteeCapability


class Owner(BaseModel):
    """Reference to a group or a user, as nested in permission documents."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(description="The ID of the group or user.")


class _BaseGrantee(BaseModel, ABC):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: str
    id: str = Field(min_length=1, description="The ID of the group or user.")

    @abstractmethod
    def owns(self, entry: "GranteeCapability") -> bool:
        """Return True if the grantee capability entry belongs to this grantee."""

    def to_wire(self) -> dict[str, Any]:
        """Return the grantee as it is nested in a permission document."""
        return {self.kind: {"id": self.id}}

    def __str__(self) -> str:
        """Return the `kind:id` representation of the grantee."""
        return f"{self.kind}:{self.id}"


class GroupGrantee(_BaseGrantee):
    """A group grantee."""

    kind: Literal["group"] = "group"

    def owns(self, entry: "GranteeCapability") -> bool:
        """Match on the group of the entry only."""
        return entry.group is not None and entry.group.id == self.id


class UserGrantee(_BaseGrantee):
    """A user grantee."""

    kind: Literal["user"] = "user"

    def owns(self, entry: "GranteeCapability") -> bool:
        """Match on the user of the entry only."""
        return entry.user is not None and entry.user.id == self.id


Grantee = Annotated[Union[GroupGrantee, UserGrantee], Field(discriminator="kind")]


def grantee_from_ids(
    group_id: str | None,
    user_id: str | None,
    grant: "DeclaredGrant | None" = None,
) -> GroupGrantee | UserGrantee:
    """Build the grantee from a group id and a user id, exactly one being set.

    Args:
        group_id (str | None): The group id, empty or None when unset.
        user_id (str | None): The user id, empty or None when unset.
        grant (DeclaredGrant | None): The grant the ids come from, for error context.

    Returns:
        GroupGrantee | UserGrantee: The grantee.

    Raises:
        ConflictingGranteeError: If both ids are set or neither is.
    """
    if group_id and user_id:
        raise ConflictingGranteeError(
            "group_id and user_id are mutually exclusive", grant
        )
    if group_id:
        return GroupGrantee(id=group_id)
    if user_id:
        return UserGrantee(id=user_id)
    raise ConflictingGranteeError("one of group_id or user_id is required", grant)
