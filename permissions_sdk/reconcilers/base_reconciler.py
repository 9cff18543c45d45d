"""Base reconciler for declared resources.

A reconciler converges one declared resource with the remote state. It exposes the
operations a hosting shell (command line, orchestration tool) needs, and makes no
assumption about who calls it or how results are persisted.
All reconcilers should subclass `BaseReconciler` and implement its methods.

Architecture:
- BaseReconciler: create, read, update, delete and import one declared resource
- BasePermissionGateway: communicate with the remote service (injected)
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from permissions_sdk.gateway import BasePermissionGateway

T = TypeVar("T")


class BaseReconciler(ABC, Generic[T]):
    """Base reconciler.
    MUST be subclassed to implement the `create`, `read`, `update`, `delete` and
    `import_state` methods. Each operation handles one declared resource and issues
    its remote calls exactly once, without retry.
    """

    def __init__(self, gateway: "BasePermissionGateway"):
        """Initialize the reconciler with its gateway."""
        self.gateway = gateway

    @abstractmethod
    def create(self, declared: T) -> T:
        """Create the declared resource remotely and return the state to persist."""
        raise NotImplementedError

    @abstractmethod
    def read(self, declared: T) -> T:
        """Refresh a resource expected to exist remotely.

        Notes:
            - A resource missing remotely MUST be reported as an error, drift is
              never silently healed.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, current: T, desired: T) -> T:
        """Update a resource in place, when the resource supports it."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, declared: T) -> None:
        """Delete the declared resource remotely."""
        raise NotImplementedError

    @abstractmethod
    def import_state(self, identifier: str) -> T:
        """Build the state of an existing remote resource from its identifier."""
        raise NotImplementedError
