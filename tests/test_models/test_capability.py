"""Offer tests for capabilities and permission documents."""

import pytest
from permissions_sdk.models import (
    Capability,
    GranteeCapability,
    GroupGrantee,
    PermissionsEnvelope,
    UserGrantee,
)
from pydantic import ValidationError


def test_capability_should_compare_exact_pairs():
    """Test that Capability equality is exact field equality."""
    # Given two capabilities with the same name and mode
    # When comparing them
    # Then they should be equal, and differ as soon as one field differs
    assert Capability(name="Read", mode="Allow") == Capability(
        name="Read", mode="Allow"
    )
    assert Capability(name="Read", mode="Allow") != Capability(name="Read", mode="Deny")


@pytest.mark.parametrize(
    "name,mode,expected",
    [
        pytest.param("Read", "Allow", True, id="same_pair"),
        pytest.param("Read", "allow", False, id="lower_case_mode"),
        pytest.param("read", "Allow", False, id="lower_case_name"),
        pytest.param("Write", "Allow", False, id="other_name"),
    ],
)
def test_capability_matches_should_be_case_sensitive(name, mode, expected):
    """Test that Capability.matches compares name and mode case-sensitively."""
    # Given a capability
    capability = Capability(name="Read", mode="Allow")
    # When matching it against a name and a mode
    # Then only the exact pair should match
    assert capability.matches(name, mode) is expected


def test_capability_should_be_immutable():
    """Test that Capability cannot be modified."""
    # Given a capability
    capability = Capability(name="Read", mode="Allow")
    # When modifying one of its fields
    # Then it should raise a ValidationError
    with pytest.raises(ValidationError):
        capability.mode = "Deny"


def test_grantee_capability_should_parse_remote_entry():
    """Test that GranteeCapability parses a remote entry with extra fields."""
    # Given a remote entry
    entry = GranteeCapability.model_validate(
        {
            "group": {"id": "g1", "name": "Analysts"},
            "capabilities": {
                "capability": [
                    {"name": "Read", "mode": "Allow"},
                    {"name": "Write", "mode": "Deny"},
                ]
            },
        }
    )
    # When checking its content
    # Then the group and capabilities should be available
    assert entry.group.id == "g1"
    assert entry.user is None
    assert entry.grants("Write", "Deny")
    assert not entry.grants("Write", "Allow")


def test_grantee_capability_should_allow_missing_capabilities():
    """Test that a remote entry without capabilities grants nothing."""
    # Given a remote entry without capabilities
    entry = GranteeCapability.model_validate({"user": {"id": "u1"}})
    # When checking a capability
    # Then it should not be granted
    assert entry.capabilities.capability == []
    assert not entry.grants("Read", "Allow")


def test_upsert_envelope_should_contain_single_group_entry():
    """Test the upsert document sent for a group grant."""
    # Given a group and a capability
    grantee = GroupGrantee(id="g1")
    capability = Capability(name="Read", mode="Allow")
    # When building the upsert document
    body = PermissionsEnvelope.for_upsert(grantee, capability).to_wire()
    # Then it should contain exactly one entry with exactly one capability
    assert body == {
        "permissions": {
            "granteeCapabilities": [
                {
                    "group": {"id": "g1"},
                    "capabilities": {
                        "capability": [{"name": "Read", "mode": "Allow"}]
                    },
                }
            ]
        }
    }


def test_upsert_envelope_should_contain_single_user_entry():
    """Test the upsert document sent for a user grant."""
    # Given a user and a capability
    grantee = UserGrantee(id="u1")
    capability = Capability(name="Write", mode="Deny")
    # When building the upsert document
    body = PermissionsEnvelope.for_upsert(grantee, capability).to_wire()
    # Then the entry should only address the user
    (entry,) = body["permissions"]["granteeCapabilities"]
    assert entry == {
        "user": {"id": "u1"},
        "capabilities": {"capability": [{"name": "Write", "mode": "Deny"}]},
    }


def test_envelope_should_parse_project_permissions_response():
    """Test that the envelope parses a full fetch response."""
    # Given a fetch response
    response = {
        "permissions": {
            "project": {"id": "p1", "name": "Finance"},
            "granteeCapabilities": [
                {
                    "group": {"id": "g1"},
                    "capabilities": {
                        "capability": [{"name": "Read", "mode": "Allow"}]
                    },
                }
            ],
        }
    }
    # When parsing it
    envelope = PermissionsEnvelope.model_validate(response)
    # Then project and entries should be available
    assert envelope.permissions.project.name == "Finance"
    assert len(envelope.permissions.grantee_capabilities) == 1
    assert envelope.permissions.grantee_capabilities[0].group.id == "g1"
