"""Capability."""

from pydantic import BaseModel, ConfigDict, Field


class Capability(BaseModel):
    """Represent a capability, i.e. a (name, mode) pair such as (Read, Allow).

    Name and mode are kept as raw strings because capabilities returned by the
    remote service must be compared exactly as received: a fetched mode of "allow"
    is not the declared mode "Allow".
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(description="The capability name, e.g. 'Read'.")
    mode: str = Field(description="The capability mode, e.g. 'Allow'.")

    def matches(self, name: str, mode: str) -> bool:
        """Return True if both name and mode are exactly equal (case-sensitive)."""
        return self.name == name and self.mode == mode

    def __str__(self) -> str:
        """Return the `name:mode` representation of the capability."""
        return f"{self.name}:{self.mode}"


class CapabilitiesWrapper(BaseModel):
    """Wrapper grouping the capabilities of one grantee, as the API nests them."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    capability: list[Capability] = Field(
        default_factory=list,
        description="Capabilities granted to the grantee, in remote order.",
    )
