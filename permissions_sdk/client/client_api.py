"""HTTP client for the project permissions endpoints of the remote service."""

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import requests
from permissions_sdk.exceptions import TransportError, UpstreamError
from permissions_sdk.gateway import BasePermissionGateway
from permissions_sdk.models import (
    Capability,
    GranteeCapability,
    GroupGrantee,
    PermissionsEnvelope,
    UserGrantee,
)
from pydantic import ValidationError

if TYPE_CHECKING:
    from permissions_sdk.settings import PermissionsSettings

logger = logging.getLogger(__name__)

AUTH_HEADER = "X-Tableau-Auth"
API_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class PermissionsClient(BasePermissionGateway):
    """Gateway implementation using the REST API of the remote service."""

    def __init__(
        self,
        api_base_url: str,
        token: str,
        timeout: float = 30,
        verify_ssl: bool = True,
    ):
        """
        Initialize the client with necessary configurations

        Args:
            api_base_url (str): Base URL of the site, e.g. `https://host/api/3.19/sites/<site_id>`.
            token (str): The authentication token sent along with every request.
            timeout (float): Timeout of one request, in seconds.
            verify_ssl (bool): Whether to verify the TLS certificate of the server.
        """
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl

        # Define headers in session and update when needed
        self.session = requests.Session()
        self.session.headers.update({**API_HEADERS, AUTH_HEADER: token})

    @classmethod
    def from_settings(cls, settings: "PermissionsSettings") -> "PermissionsClient":
        """Build the client from the `tableau` settings section."""
        return cls(
            api_base_url=settings.tableau.api_base_url,
            token=settings.tableau.token,
            timeout=settings.tableau.timeout,
            verify_ssl=settings.tableau.verify_ssl,
        )

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self) -> "PermissionsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _request_data(
        self, method: str, url_path: str, json_data: dict[str, Any] | None = None
    ) -> requests.Response:
        """
        Internal method to handle API requests
        :return: HTTP response, with a 2xx status code
        """
        url = self.api_base_url + url_path
        try:
            response = self.session.request(
                method,
                url,
                json=json_data,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
            logger.info(
                "[API] HTTP %s Request to endpoint",
                method,
                extra={"url_path": url_path},
            )

            response.raise_for_status()
            return response

        except requests.HTTPError as err:
            status_code = err.response.status_code if err.response is not None else None
            # Some error statuses are expected by callers, e.g. 404 on delete
            logger.warning(
                "[API] Error response from the remote service",
                extra={"url_path": url_path, "status_code": status_code},
            )
            raise UpstreamError(
                f"{method} {url_path} failed with status {status_code}: {err}",
                status_code=status_code,
            ) from err
        except requests.RequestException as err:
            logger.error(
                "[API] Error while reaching the remote service",
                extra={"url_path": url_path, "error": str(err)},
            )
            raise TransportError(f"{method} {url_path} failed: {err}") from err

    @staticmethod
    def _permissions_path(project_id: str) -> str:
        return f"/projects/{quote(project_id, safe='')}/permissions"

    def fetch_all(self, project_id: str) -> list[GranteeCapability]:
        """Get the permissions of a project.

        Doc: GET /projects/<project_id>/permissions
        """
        url_path = self._permissions_path(project_id)
        response = self._request_data("GET", url_path)
        try:
            envelope = PermissionsEnvelope.model_validate(response.json())
        except (ValidationError, ValueError) as err:
            raise UpstreamError(
                f"GET {url_path} returned an unexpected body: {err}",
                status_code=response.status_code,
            ) from err
        return envelope.permissions.grantee_capabilities

    def upsert(
        self,
        project_id: str,
        grantee: GroupGrantee | UserGrantee,
        capability: Capability,
    ) -> None:
        """Add one capability to a grantee.

        Doc: PUT /projects/<project_id>/permissions
        """
        body = PermissionsEnvelope.for_upsert(grantee, capability).to_wire()
        self._request_data("PUT", self._permissions_path(project_id), json_data=body)

    def remove(
        self,
        project_id: str,
        grantee: GroupGrantee | UserGrantee,
        capability_name: str,
        capability_mode: str,
    ) -> None:
        """Delete one capability of a grantee.

        Doc: DELETE /projects/<project_id>/permissions/<groups|users>/<id>/<name>/<mode>
        """
        segments = [
            f"{grantee.kind}s",
            grantee.id,
            capability_name,
            capability_mode,
        ]
        url_path = self._permissions_path(project_id) + "".join(
            "/" + quote(segment, safe="") for segment in segments
        )
        self._request_data("DELETE", url_path)
