"""Offers a collection of custom exceptions to manage project permissions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from permissions_sdk.models.grant import DeclaredGrant


def _describe(grant: "DeclaredGrant | None") -> str:
    if grant is None:
        return ""
    return (
        f" [project_id={grant.project_id!r}, grantee={grant.describe_grantee()}, "
        f"capability={grant.capability_name}:{grant.capability_mode}]"
    )


class ConfigError(Exception):
    """Base class for configuration-related errors.

    This exception is raised when there is an issue with the configuration, either the
    settings used to reach the remote service or a declared permission grant.
    It signals an actionable, non-retryable problem and allows the user to respond
    appropriately immediately.
    """


class ConfigValidationError(ConfigError):
    """Raised when the settings cannot be validated."""


class MalformedIdentifierError(ConfigError):
    """Raised when a compound identifier does not split into exactly 5 fields."""

    def __init__(self, identifier: str) -> None:
        """Initialize the error with the offending identifier."""
        self.identifier = identifier
        super().__init__(
            "Expected import identifier with format: "
            "`project_id:group_id:user_id:capability_name:capability_mode`. "
            f"Got: {identifier!r}"
        )


class GrantValidationError(ConfigError):
    """Base class for declared grants rejected before any remote call."""

    def __init__(self, message: str, grant: "DeclaredGrant | None" = None) -> None:
        """Initialize the error with the grant it concerns."""
        self.grant = grant
        super().__init__(message + _describe(grant))


class ConflictingGranteeError(GrantValidationError):
    """Raised when a grant declares both a group and a user, or neither."""


class InvalidCapabilityError(GrantValidationError):
    """Raised when a capability name or mode is outside its enumeration."""


class DataRetrievalError(Exception):
    """Base class for data retrieval-related errors.

    This exception is raised when there is an issue while talking to the remote service.
    It indicates that the library is not responsible for the encountered error,
    but rather the remote service or the network is.
    """


class GatewayError(DataRetrievalError):
    """Base class for any failure of a remote permissions call."""


class TransportError(GatewayError):
    """Raised when the remote service cannot be reached (network, timeout, TLS)."""


class UpstreamError(GatewayError):
    """Raised when the remote service answers with an error or an unreadable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize the error with the HTTP status code when there is one."""
        self.status_code = status_code
        super().__init__(message)


class UseCaseError(Exception):
    """Base class for reconciliation-related errors.

    This error signals that a declared grant could not be converged with the remote
    state. It is never swallowed by the library and always carries the grant it
    concerns so the caller can diagnose it without re-deriving it.
    """


class ReconcileError(UseCaseError):
    """Base class for errors raised by reconcilers."""

    def __init__(self, message: str, grant: "DeclaredGrant | None" = None) -> None:
        """Initialize the error with the grant it concerns."""
        self.grant = grant
        super().__init__(message + _describe(grant))


class UpstreamFailureError(ReconcileError):
    """Raised when the gateway fails during a reconciliation.

    The original `GatewayError` is available as `gateway_error` and as `__cause__`.
    """

    def __init__(
        self,
        message: str,
        grant: "DeclaredGrant | None" = None,
        gateway_error: GatewayError | None = None,
    ) -> None:
        """Initialize the error with the gateway error it wraps."""
        self.gateway_error = gateway_error
        if gateway_error is not None:
            message = f"{message}: {gateway_error}"
        super().__init__(message, grant)


class GrantNotFoundError(ReconcileError):
    """Raised when a grant expected to be present is missing from the remote state."""


class UnsupportedOperationError(ReconcileError):
    """Raised when an in-place update of a grant is requested."""
