"""Presentation layer for the Folder Permissions bounded context.

Exposes the declaration-facing models and the lifecycle adapter that a
declarative-config runner drives (create, read, update, delete, import).
"""

from folder_permissions.presentation.models import (
    DeclaredPermissionItem,
    FolderPermissionDeclaration,
    FolderPermissionState,
    PermissionItem,
)
from folder_permissions.presentation.resource import FolderPermissionResource

__all__ = [
    "DeclaredPermissionItem",
    "FolderPermissionDeclaration",
    "FolderPermissionResource",
    "FolderPermissionState",
    "PermissionItem",
]
