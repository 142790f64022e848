"""Domain layer for the Folder Permissions bounded context."""

from folder_permissions.domain.exceptions import (
    MalformedIdentifierError,
    ReplacementRequiredError,
    ResourceGoneError,
)
from folder_permissions.domain.value_objects import (
    DEFAULT_ORG_ID,
    FolderPermissionId,
    FolderPermissionIdCodec,
    PermissionDiff,
    PermissionEntry,
    PermissionSet,
    parse_subject_id,
)

__all__ = [
    "DEFAULT_ORG_ID",
    "FolderPermissionId",
    "FolderPermissionIdCodec",
    "MalformedIdentifierError",
    "PermissionDiff",
    "PermissionEntry",
    "PermissionSet",
    "ReplacementRequiredError",
    "ResourceGoneError",
    "parse_subject_id",
]
