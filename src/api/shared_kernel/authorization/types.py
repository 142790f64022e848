"""Authorization type definitions for Grafana access control.

Defines resource types, built-in roles and permission levels that map to the
Grafana access-control API. These enums keep wire strings in one place.
"""

from enum import StrEnum


class ResourceType(StrEnum):
    """Resource types addressable through the access-control API.

    Each value is the path segment used in
    ``/api/access-control/{resource_type}/{resource_uid}``.
    """

    FOLDERS = "folders"


class BuiltInRole(StrEnum):
    """Built-in organization roles that can be granted on a folder."""

    VIEWER = "Viewer"
    EDITOR = "Editor"


class PermissionLevel(StrEnum):
    """Capability levels a grant can carry."""

    VIEW = "View"
    EDIT = "Edit"
    ADMIN = "Admin"
