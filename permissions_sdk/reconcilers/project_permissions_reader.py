"""Read-only access to all the permissions of a project."""

import logging

from permissions_sdk.exceptions import GatewayError, UpstreamFailureError
from permissions_sdk.gateway import BasePermissionGateway
from permissions_sdk.models import GranteeCapability

logger = logging.getLogger(__name__)


class ProjectPermissionsReader:
    """List the grantee capabilities of a project, without any filtering."""

    def __init__(self, gateway: BasePermissionGateway):
        self.gateway = gateway

    def list(self, project_id: str) -> list[GranteeCapability]:
        """Return every grantee capability of the project, in remote order."""
        try:
            entries = self.gateway.fetch_all(project_id)
        except GatewayError as e:
            raise UpstreamFailureError(
                f"Could not read permissions of project {project_id!r}",
                gateway_error=e,
            ) from e
        logger.info(
            "[RECONCILER] Project permissions listed",
            extra={"project_id": project_id, "entries_count": len(entries)},
        )
        return entries
