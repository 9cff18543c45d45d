"""Offer tests for declared grants."""

import pytest
from permissions_sdk.exceptions import (
    ConflictingGranteeError,
    GrantValidationError,
    InvalidCapabilityError,
)
from permissions_sdk.models import Capability, DeclaredGrant, GroupGrantee, UserGrantee
from pydantic import ValidationError


def test_declared_grant_should_consider_empty_ids_as_unset():
    """Test that empty grantee ids are stored as unset."""
    # Given a grant declared with an empty user id
    grant = DeclaredGrant(
        project_id="p1",
        group_id="g1",
        user_id="",
        capability_name="Read",
        capability_mode="Allow",
    )
    # When reading its ids
    # Then the user id should be unset
    assert grant.user_id is None
    assert grant.grantee == GroupGrantee(id="g1")


def test_declared_grant_should_be_immutable(fake_group_grant):
    """Test that a declared grant cannot be modified."""
    # Given a declared grant
    # When modifying one of its fields
    # Then it should raise a ValidationError
    with pytest.raises(ValidationError):
        fake_group_grant.capability_mode = "Deny"


def test_declared_grant_should_reject_conflicting_grantee(fake_conflicting_grant):
    """Test that the grantee of a grant with a group and a user is rejected."""
    # Given a grant with both a group and a user
    # When reading its grantee
    # Then it should raise a ConflictingGranteeError carrying the grant
    with pytest.raises(ConflictingGranteeError) as exc_info:
        _ = fake_conflicting_grant.grantee
    assert exc_info.value.grant is fake_conflicting_grant
    assert "group:g1+user:u1" in str(exc_info.value)


@pytest.mark.parametrize(
    "capability_name,capability_mode",
    [
        pytest.param("Read", "Allow", id="read_allow"),
        pytest.param("Read", "Deny", id="read_deny"),
        pytest.param("Write", "Allow", id="write_allow"),
        pytest.param("Write", "Deny", id="write_deny"),
    ],
)
def test_validated_capability_should_accept_enumerated_values(
    capability_name, capability_mode
):
    """Test that enumerated capability names and modes are accepted."""
    # Given a grant with a valid capability
    grant = DeclaredGrant(
        project_id="p1",
        user_id="u1",
        capability_name=capability_name,
        capability_mode=capability_mode,
    )
    # When validating its capability
    # Then it should return the capability
    assert grant.validated_capability() == Capability(
        name=capability_name, mode=capability_mode
    )


@pytest.mark.parametrize(
    "capability_name,capability_mode",
    [
        pytest.param("Delete", "Allow", id="unknown_name"),
        pytest.param("read", "Allow", id="lower_case_name"),
        pytest.param("Read", "allow", id="lower_case_mode"),
        pytest.param("Read", "", id="empty_mode"),
    ],
)
def test_validated_capability_should_reject_other_values(
    capability_name, capability_mode
):
    """Test that capability names and modes are checked case-sensitively."""
    # Given a grant with an invalid capability
    grant = DeclaredGrant(
        project_id="p1",
        user_id="u1",
        capability_name=capability_name,
        capability_mode=capability_mode,
    )
    # When validating its capability
    # Then it should raise an InvalidCapabilityError
    with pytest.raises(InvalidCapabilityError):
        grant.validated_capability()


def test_validate_for_submission_should_require_project():
    """Test that a grant without project is rejected."""
    # Given a grant with an empty project id
    grant = DeclaredGrant(
        project_id="",
        group_id="g1",
        capability_name="Read",
        capability_mode="Allow",
    )
    # When validating it for submission
    # Then it should raise a GrantValidationError
    with pytest.raises(GrantValidationError):
        grant.validate_for_submission()


def test_validate_address_should_require_project():
    """Test that a grant without project has no remote address."""
    # Given a grant with an empty project id and a valid grantee
    grant = DeclaredGrant(
        project_id="",
        group_id="g1",
        capability_name="Read",
        capability_mode="Allow",
    )
    # When validating its address
    # Then it should raise a GrantValidationError naming the project
    with pytest.raises(GrantValidationError) as exc_info:
        grant.validate_address()
    assert "project_id is required" in str(exc_info.value)


def test_validate_address_should_not_check_capability():
    """Test that the address of a grant does not depend on its capability."""
    # Given a grant with an unknown capability
    grant = DeclaredGrant(
        project_id="p1",
        group_id="g1",
        capability_name="Delete",
        capability_mode="Allow",
    )
    # When validating its address
    # Then the group grantee should be returned
    assert grant.validate_address() == GroupGrantee(id="g1")


def test_for_grantee_should_set_matching_id():
    """Test that a grant built from a grantee sets the matching id only."""
    # Given a user grantee and a capability
    # When building a grant from them
    grant = DeclaredGrant.for_grantee(
        "p1", UserGrantee(id="u1"), Capability(name="Write", mode="Allow")
    )
    # Then only the user id should be set
    assert grant == DeclaredGrant(
        project_id="p1",
        user_id="u1",
        capability_name="Write",
        capability_mode="Allow",
    )
