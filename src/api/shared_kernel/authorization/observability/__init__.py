"""Observability for access-control operations."""

from shared_kernel.authorization.observability.access_control_probe import (
    AccessControlProbe,
    DefaultAccessControlProbe,
)

__all__ = [
    "AccessControlProbe",
    "DefaultAccessControlProbe",
]
