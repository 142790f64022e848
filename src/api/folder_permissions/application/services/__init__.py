"""Application services for the Folder Permissions bounded context."""

from folder_permissions.application.services.folder_permission_service import (
    FolderPermissionService,
)

__all__ = [
    "FolderPermissionService",
]
