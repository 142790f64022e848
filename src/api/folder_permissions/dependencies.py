"""Dependency wiring for the Folder Permissions bounded context.

Plain factory functions that build the client, service and lifecycle
adapter from settings. Callers may pass their own collaborators instead.
"""

from __future__ import annotations

from folder_permissions.application.observability import (
    DefaultFolderPermissionServiceProbe,
    FolderPermissionServiceProbe,
)
from folder_permissions.application.services import FolderPermissionService
from folder_permissions.domain.value_objects import FolderPermissionIdCodec
from folder_permissions.presentation.resource import FolderPermissionResource
from infrastructure.settings import GrafanaSettings, get_grafana_settings
from shared_kernel.authorization.grafana import GrafanaAccessControlClient
from shared_kernel.authorization.protocols import AccessControlClient


def get_folder_permission_service_probe() -> FolderPermissionServiceProbe:
    """Get FolderPermissionServiceProbe instance.

    Returns:
        DefaultFolderPermissionServiceProbe instance for observability
    """
    return DefaultFolderPermissionServiceProbe()


def get_access_control_client(
    settings: GrafanaSettings | None = None,
) -> GrafanaAccessControlClient:
    """Get a Grafana access-control client.

    The returned client is not org-scoped; the service binds the org of
    each folder with ``with_org`` per call.
    """
    settings = settings or get_grafana_settings()
    return GrafanaAccessControlClient(
        url=settings.url,
        auth=settings.auth.get_secret_value(),
        timeout_seconds=settings.timeout_seconds,
        verify_tls=settings.verify_tls,
    )


def get_folder_permission_id_codec(
    settings: GrafanaSettings | None = None,
) -> FolderPermissionIdCodec:
    settings = settings or get_grafana_settings()
    return FolderPermissionIdCodec(default_org_id=settings.org_id)


def get_folder_permission_service(
    client: AccessControlClient | None = None,
    settings: GrafanaSettings | None = None,
) -> FolderPermissionService:
    """Get FolderPermissionService instance.

    Args:
        client: Access-control client; built from settings when omitted
        settings: Grafana settings; loaded from the environment when omitted

    Returns:
        FolderPermissionService wired with the default probe
    """
    settings = settings or get_grafana_settings()
    return FolderPermissionService(
        client=client or get_access_control_client(settings),
        codec=get_folder_permission_id_codec(settings),
        probe=get_folder_permission_service_probe(),
    )


def get_folder_permission_resource(
    client: AccessControlClient | None = None,
    settings: GrafanaSettings | None = None,
    request_id: str | None = None,
) -> FolderPermissionResource:
    """Get FolderPermissionResource instance.

    ``request_id`` identifies the driving run in every event the resource
    logs.
    """
    return FolderPermissionResource(
        service=get_folder_permission_service(client=client, settings=settings),
        request_id=request_id,
    )
