"""Offer reconcilers converging declared grants with the remote state."""

from permissions_sdk.reconcilers.base_reconciler import BaseReconciler
from permissions_sdk.reconcilers.project_permission import (
    ProjectPermissionReconciler,
    find_grant,
)
from permissions_sdk.reconcilers.project_permissions_reader import (
    ProjectPermissionsReader,
)

__all__ = [
    "BaseReconciler",
    "ProjectPermissionReconciler",
    "ProjectPermissionsReader",
    "find_grant",
]
