"""Grafana client implementation for folder access control.

This module provides the Grafana HTTP client that implements the
AccessControlClient protocol.
"""

from shared_kernel.authorization.grafana.client import GrafanaAccessControlClient

__all__ = [
    "GrafanaAccessControlClient",
]
