"""Authorization primitives for folder access control.

This module provides shared authorization types and abstractions used to
talk to the Grafana access-control API.
"""

from shared_kernel.authorization.exceptions import (
    AccessControlError,
    UpstreamNotFoundError,
    UpstreamRejectedError,
)
from shared_kernel.authorization.models import GrantCommand, RemoteGrant
from shared_kernel.authorization.protocols import AccessControlClient
from shared_kernel.authorization.types import (
    BuiltInRole,
    PermissionLevel,
    ResourceType,
)

__all__ = [
    "AccessControlClient",
    "AccessControlError",
    "BuiltInRole",
    "GrantCommand",
    "PermissionLevel",
    "RemoteGrant",
    "ResourceType",
    "UpstreamNotFoundError",
    "UpstreamRejectedError",
]
