"""Application entry point.

Wires logging and settings and hands out the folder permission resource
for a declarative-config runner to drive.
"""

import structlog

from folder_permissions.dependencies import get_folder_permission_resource
from folder_permissions.presentation.resource import FolderPermissionResource
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings
from infrastructure.version import __version__


def create_folder_permission_resource(
    request_id: str | None = None,
) -> FolderPermissionResource:
    """Configure logging from settings and build the resource.

    Args:
        request_id: Identifier of the driving run, attached to every event
    """
    settings = get_settings()
    configure_logging(debug=settings.debug)

    structlog.get_logger().info(
        "folder_permissions_starting",
        app_name=settings.app_name,
        version=__version__,
        grafana_url=settings.grafana.url,
        default_org_id=settings.grafana.org_id,
        request_id=request_id,
    )
    return get_folder_permission_resource(
        settings=settings.grafana, request_id=request_id
    )
