"""Compound identifier of a permission grant.

A grant is named, for import and for deletion, by the string:

    <project_id>:<group_id>:<user_id>:<capability_name>:<capability_mode>

where exactly one of group_id and user_id is not empty, e.g. `p1:g1::Read:Allow`.
"""

from permissions_sdk.exceptions import MalformedIdentifierError
from permissions_sdk.models.grant import DeclaredGrant

SEPARATOR = ":"
FIELDS_COUNT = 5


def encode_identifier(grant: DeclaredGrant) -> str:
    """Compose the compound identifier of a grant.

    An unset group_id or user_id is written as an empty field.
    """
    return SEPARATOR.join(
        [
            grant.project_id,
            grant.group_id or "",
            grant.user_id or "",
            grant.capability_name,
            grant.capability_mode,
        ]
    )


def decode_identifier(identifier: str) -> DeclaredGrant:
    """Parse a compound identifier into a declared grant.

    Only the number of fields is checked here. Grantee exclusivity and capability
    enumerations are checked when the grant is submitted to a reconciler, so an
    identifier setting both a group and a user decodes successfully.

    Raises:
        MalformedIdentifierError: If the identifier does not split into 5 fields.
    """
    parts = identifier.split(SEPARATOR)
    if len(parts) != FIELDS_COUNT:
        raise MalformedIdentifierError(identifier)

    project_id, group_id, user_id, capability_name, capability_mode = parts
    return DeclaredGrant(
        project_id=project_id,
        group_id=group_id or None,
        user_id=user_id or None,
        capability_name=capability_name,
        capability_mode=capability_mode,
    )
