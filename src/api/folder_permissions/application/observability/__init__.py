"""Domain-Oriented Observability for the Folder Permissions application layer."""

from folder_permissions.application.observability.folder_permission_service_probe import (
    DefaultFolderPermissionServiceProbe,
    FolderPermissionServiceProbe,
)

__all__ = [
    "FolderPermissionServiceProbe",
    "DefaultFolderPermissionServiceProbe",
]
