# isort: skip_file
# type: ignore
"""Provide fixtures for pytest."""
import pytest

from permissions_sdk.exceptions import GatewayError
from permissions_sdk.gateway import BasePermissionGateway
from permissions_sdk.models import DeclaredGrant, GranteeCapability


class FakeGateway(BasePermissionGateway):
    """In-memory gateway recording every call it receives."""

    def __init__(self, entries=None, error: GatewayError | None = None):
        self.entries = list(entries or [])
        self.error = error
        self.calls = []

    def fetch_all(self, project_id):
        self.calls.append(("fetch_all", project_id))
        if self.error:
            raise self.error
        return list(self.entries)

    def upsert(self, project_id, grantee, capability):
        self.calls.append(("upsert", project_id, grantee, capability))
        if self.error:
            raise self.error

    def remove(self, project_id, grantee, capability_name, capability_mode):
        self.calls.append(
            ("remove", project_id, grantee, capability_name, capability_mode)
        )
        if self.error:
            raise self.error

    def calls_named(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def fake_gateway():
    """Fixture to create an empty fake gateway."""
    return FakeGateway()


@pytest.fixture
def fake_group_grant() -> DeclaredGrant:
    """Fixture to create a grant addressed to a group."""
    return DeclaredGrant(
        project_id="p1",
        group_id="g1",
        capability_name="Read",
        capability_mode="Allow",
    )


@pytest.fixture
def fake_user_grant() -> DeclaredGrant:
    """Fixture to create a grant addressed to a user."""
    return DeclaredGrant(
        project_id="p1",
        user_id="u1",
        capability_name="Write",
        capability_mode="Deny",
    )


@pytest.fixture
def fake_conflicting_grant() -> DeclaredGrant:
    """Fixture to create a grant addressed to both a group and a user."""
    return DeclaredGrant(
        project_id="p1",
        group_id="g1",
        user_id="u1",
        capability_name="Read",
        capability_mode="Allow",
    )


@pytest.fixture
def fake_project_entries() -> list[GranteeCapability]:
    """Fixture to create the grantee capabilities of project p1."""
    return [
        GranteeCapability.model_validate(
            {
                "group": {"id": "g1"},
                "capabilities": {"capability": [{"name": "Read", "mode": "Allow"}]},
            }
        ),
        GranteeCapability.model_validate(
            {
                "user": {"id": "u1"},
                "capabilities": {
                    "capability": [
                        {"name": "Read", "mode": "Allow"},
                        {"name": "Write", "mode": "Deny"},
                    ]
                },
            }
        ),
    ]


@pytest.fixture
def make_gateway():
    """Fixture to create fake gateways with entries or a failure."""
    return FakeGateway
