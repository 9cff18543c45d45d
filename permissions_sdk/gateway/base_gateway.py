"""Base gateway to the remote permissions service.

The gateway is the only component talking to the remote service. Reconcilers
receive a gateway instance at construction time and never build one themselves.

Architecture:
- BasePermissionGateway: fetch, upsert and remove grants of a project
- PermissionsClient: HTTP implementation of the gateway (see `permissions_sdk.client`)
- ProjectPermissionReconciler: converge declared grants using a gateway
"""

from abc import ABC, abstractmethod

from permissions_sdk.models import (
    Capability,
    GranteeCapability,
    GroupGrantee,
    UserGrantee,
)


class BasePermissionGateway(ABC):
    """Contract of the remote permissions service.

    Every method performs exactly one remote call and raises a
    `permissions_sdk.exceptions.GatewayError` on failure. Retries, timeouts and
    authentication belong to the implementation.
    """

    @abstractmethod
    def fetch_all(self, project_id: str) -> list[GranteeCapability]:
        """Return every grantee capability currently granted on a project.

        The order is the one of the remote service, which is neither stable nor sorted.
        """
        raise NotImplementedError

    @abstractmethod
    def upsert(
        self,
        project_id: str,
        grantee: GroupGrantee | UserGrantee,
        capability: Capability,
    ) -> None:
        """Grant exactly one capability to one grantee on a project.

        The call is idempotent. How the capability is merged with the ones the
        grantee already has is decided by the remote service.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(
        self,
        project_id: str,
        grantee: GroupGrantee | UserGrantee,
        capability_name: str,
        capability_mode: str,
    ) -> None:
        """Remove the grant addressed by (project, grantee, name, mode)."""
        raise NotImplementedError
