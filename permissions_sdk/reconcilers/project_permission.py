"""Reconciler of project permission grants.

A declared grant is converged with the remote state with the smallest number of
remote calls:
- create: one upsert of a single-capability document
- read: one fetch of every grantee capability of the project, searched for the grant
- delete: one remove addressed by (project, grantee, capability name, capability mode)

Grants cannot be updated in place. A change of any field is a new grant, realized
by `replace`, i.e. a delete followed by a create.
"""

import logging
from typing import Any, Iterable

from permissions_sdk.exceptions import (
    GatewayError,
    GrantNotFoundError,
    UnsupportedOperationError,
    UpstreamError,
    UpstreamFailureError,
)
from permissions_sdk.gateway import BasePermissionGateway
from permissions_sdk.identifier import decode_identifier
from permissions_sdk.models import (
    DeclaredGrant,
    GranteeCapability,
    GroupGrantee,
    UserGrantee,
)
from permissions_sdk.reconcilers.base_reconciler import BaseReconciler

logger = logging.getLogger(__name__)


def find_grant(
    entries: Iterable[GranteeCapability],
    grantee: GroupGrantee | UserGrantee,
    capability_name: str,
    capability_mode: str,
) -> GranteeCapability | None:
    """Return the first entry granting the capability to the grantee, if any.

    A group grantee is only compared with the group of each entry, and a user grantee
    with its user. Name and mode are compared case-sensitively.
    """
    for entry in entries:
        if entry.grants(capability_name, capability_mode) and grantee.owns(entry):
            return entry
    return None


class ProjectPermissionReconciler(BaseReconciler[DeclaredGrant]):
    """Create, verify and delete one project permission grant at a time.

    Examples:
        >>> client = PermissionsClient.from_settings(PermissionsSettings())
        >>> reconciler = ProjectPermissionReconciler(client)
        >>> grant = decode_identifier("p1:g1::Read:Allow")
        >>> reconciler.create(grant)
        >>> reconciler.verify(grant)
        True
    """

    def __init__(
        self,
        gateway: BasePermissionGateway,
        ignore_missing_on_delete: bool = True,
    ):
        """Initialize the reconciler.

        Args:
            gateway (BasePermissionGateway): The gateway to the remote service.
            ignore_missing_on_delete (bool): Whether a delete answered with a 404
                (grant already absent) is a success.
        """
        super().__init__(gateway)
        self.ignore_missing_on_delete = ignore_missing_on_delete

    @staticmethod
    def _log_context(grant: DeclaredGrant) -> dict[str, Any]:
        return {
            "project_id": grant.project_id,
            "grantee": grant.describe_grantee(),
            "capability": f"{grant.capability_name}:{grant.capability_mode}",
        }

    def create(self, declared: DeclaredGrant) -> DeclaredGrant:
        """Grant the declared capability.

        Raises:
            GrantValidationError: If the grant is invalid. No remote call is made.
            UpstreamFailureError: If the gateway fails.
        """
        grantee, capability = declared.validate_for_submission()

        logger.info(
            "[RECONCILER] Creating project permission",
            extra=self._log_context(declared),
        )
        try:
            self.gateway.upsert(declared.project_id, grantee, capability)
        except GatewayError as e:
            raise UpstreamFailureError(
                "Could not create project permission", declared, e
            ) from e
        return declared

    def verify(self, declared: DeclaredGrant) -> bool:
        """Return whether the declared grant is present in the remote state.

        This is a non-mutating probe: a missing grant is reported as False, and the
        caller decides whether it is an error.

        Raises:
            GrantValidationError: If the project is empty or the grantee is conflicting.
                No remote call is made.
            UpstreamFailureError: If the gateway fails.
        """
        grantee = declared.validate_address()
        try:
            entries = self.gateway.fetch_all(declared.project_id)
        except GatewayError as e:
            raise UpstreamFailureError(
                "Could not read project permissions", declared, e
            ) from e

        entry = find_grant(
            entries, grantee, declared.capability_name, declared.capability_mode
        )
        logger.debug(
            "[RECONCILER] Project permission searched",
            extra={
                **self._log_context(declared),
                "entries_count": len(entries),
                "found": entry is not None,
            },
        )
        return entry is not None

    def read(self, declared: DeclaredGrant) -> DeclaredGrant:
        """Refresh a grant expected to be present.

        Raises:
            GrantNotFoundError: If the grant is missing remotely (drift).
        """
        if not self.verify(declared):
            logger.warning(
                "[RECONCILER] Project permission not found in existing permissions",
                extra=self._log_context(declared),
            )
            raise GrantNotFoundError(
                "No permission in the existing permissions", declared
            )
        return declared

    def update(self, current: DeclaredGrant, desired: DeclaredGrant) -> DeclaredGrant:
        """Project permissions do not support updates.

        Raises:
            UnsupportedOperationError: If the desired grant differs from the current one.
                Use `replace` to delete the current grant and create the desired one.
        """
        if current == desired:
            logger.info(
                "[RECONCILER] Project permissions do not support updates, nothing to do",
                extra=self._log_context(current),
            )
            return current
        raise UnsupportedOperationError(
            "Project permissions do not support updates, the grant must be replaced",
            desired,
        )

    def replace(self, current: DeclaredGrant, desired: DeclaredGrant) -> DeclaredGrant:
        """Delete the current grant then create the desired one.

        The desired grant is validated first, so that an invalid grant never causes
        the current one to be deleted.
        """
        desired.validate_for_submission()
        self.delete(current)
        return self.create(desired)

    def delete(self, declared: DeclaredGrant) -> None:
        """Remove the declared grant.

        No read is issued beforehand. A grant already absent (404) is a success
        unless `ignore_missing_on_delete` is False.

        Raises:
            GrantValidationError: If the project is empty or the grantee is conflicting.
                No remote call is made.
            UpstreamFailureError: If the gateway fails.
        """
        grantee = declared.validate_address()

        logger.info(
            "[RECONCILER] Deleting project permission",
            extra=self._log_context(declared),
        )
        try:
            self.gateway.remove(
                declared.project_id,
                grantee,
                declared.capability_name,
                declared.capability_mode,
            )
        except UpstreamError as e:
            if e.status_code == 404 and self.ignore_missing_on_delete:
                logger.info(
                    "[RECONCILER] Project permission already absent",
                    extra=self._log_context(declared),
                )
                return
            raise UpstreamFailureError(
                "Could not delete project permission", declared, e
            ) from e
        except GatewayError as e:
            raise UpstreamFailureError(
                "Could not delete project permission", declared, e
            ) from e

    def import_state(self, identifier: str) -> DeclaredGrant:
        """Decode a compound identifier and check the grant exists.

        Raises:
            MalformedIdentifierError: If the identifier does not have 5 fields.
            GrantValidationError: If the project is empty or the grantee is conflicting.
            GrantNotFoundError: If the grant does not exist remotely.
        """
        return self.read(decode_identifier(identifier))
