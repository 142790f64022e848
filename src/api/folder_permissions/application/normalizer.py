"""Conversion between declared permission entries and wire grants.

Only managed, non-inherited grants are surfaced as entries: permissions
coming from fixed or custom roles, or inherited from a parent folder, are
outside the scope of a declared permission set.
"""

from __future__ import annotations

from collections.abc import Iterable

from folder_permissions.domain.value_objects import PermissionEntry, PermissionSet
from shared_kernel.authorization.models import GrantCommand, RemoteGrant


def to_command(entry: PermissionEntry) -> GrantCommand:
    """Map a declared entry to a grant command.

    Non-positive subject IDs are treated as unset. Never rejects an entry.
    """
    return GrantCommand(
        built_in_role=entry.role or "",
        team_id=entry.team_id if entry.team_id > 0 else 0,
        user_id=entry.user_id if entry.user_id > 0 else 0,
        permission=entry.permission,
    )


def to_entry(grant: RemoteGrant) -> PermissionEntry | None:
    """Map a remote grant to a declared entry.

    Returns:
        The entry, or None when the grant is unmanaged or inherited
    """
    if not grant.is_managed or grant.is_inherited:
        return None
    return PermissionEntry(
        role=grant.built_in_role,
        team_id=grant.team_id,
        user_id=grant.user_id,
        permission=grant.permission,
    )


def to_commands(permissions: Iterable[PermissionEntry]) -> list[GrantCommand]:
    return [to_command(entry) for entry in permissions]


def to_permission_set(grants: Iterable[RemoteGrant]) -> PermissionSet:
    entries = (to_entry(grant) for grant in grants)
    return PermissionSet(entry for entry in entries if entry is not None)
