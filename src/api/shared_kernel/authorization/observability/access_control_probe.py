"""Domain probe for access-control client operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to reading and replacing resource
permissions on the authorization service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AccessControlProbe(Protocol):
    """Domain probe for access-control client operations."""

    def resource_lookup_completed(
        self,
        resource_uid: str,
        org_id: int,
        exists: bool,
    ) -> None:
        """Record the outcome of a resource existence lookup."""
        ...

    def permissions_fetched(
        self,
        resource_type: str,
        resource_uid: str,
        org_id: int,
        count: int,
    ) -> None:
        """Record that permissions were fetched for a resource."""
        ...

    def permissions_replaced(
        self,
        resource_type: str,
        resource_uid: str,
        org_id: int,
        count: int,
    ) -> None:
        """Record that the permission list of a resource was replaced."""
        ...

    def request_rejected(
        self,
        method: str,
        path: str,
        org_id: int,
        status_code: int,
        detail: str,
    ) -> None:
        """Record that the server answered with an error status."""
        ...

    def connection_failed(
        self,
        method: str,
        path: str,
        org_id: int,
        error: Exception,
    ) -> None:
        """Record that a request could not reach the server."""
        ...

    def with_context(self, context: ObservationContext) -> AccessControlProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAccessControlProbe:
    """Default implementation of AccessControlProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAccessControlProbe:
        """Create a new probe with observation context bound."""
        return DefaultAccessControlProbe(logger=self._logger, context=context)

    def resource_lookup_completed(
        self,
        resource_uid: str,
        org_id: int,
        exists: bool,
    ) -> None:
        self._logger.debug(
            "access_control_resource_lookup_completed",
            resource_uid=resource_uid,
            org_id=org_id,
            exists=exists,
            **self._get_context_kwargs(),
        )

    def permissions_fetched(
        self,
        resource_type: str,
        resource_uid: str,
        org_id: int,
        count: int,
    ) -> None:
        self._logger.debug(
            "access_control_permissions_fetched",
            resource_type=resource_type,
            resource_uid=resource_uid,
            org_id=org_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def permissions_replaced(
        self,
        resource_type: str,
        resource_uid: str,
        org_id: int,
        count: int,
    ) -> None:
        self._logger.info(
            "access_control_permissions_replaced",
            resource_type=resource_type,
            resource_uid=resource_uid,
            org_id=org_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def request_rejected(
        self,
        method: str,
        path: str,
        org_id: int,
        status_code: int,
        detail: str,
    ) -> None:
        self._logger.error(
            "access_control_request_rejected",
            method=method,
            path=path,
            org_id=org_id,
            status_code=status_code,
            detail=detail,
            **self._get_context_kwargs(),
        )

    def connection_failed(
        self,
        method: str,
        path: str,
        org_id: int,
        error: Exception,
    ) -> None:
        self._logger.error(
            "access_control_connection_failed",
            method=method,
            path=path,
            org_id=org_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
