"""Protocol for folder permission service observability.

Defines the interface for domain probes that capture application-level
domain events for folder permission reconciliation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class FolderPermissionServiceProbe(Protocol):
    """Domain probe for folder permission reconciliation.

    Records domain-significant events of the apply/read/clear cycle.
    """

    def permissions_applied(
        self,
        org_id: int,
        folder_uid: str,
        count: int,
    ) -> None:
        """Record that the declared set replaced the remote grants."""
        ...

    def permissions_apply_failed(
        self,
        org_id: int,
        folder_uid: str,
        error: Exception,
    ) -> None:
        """Record that replacing the remote grants failed."""
        ...

    def permissions_read(
        self,
        org_id: int,
        folder_uid: str,
        count: int,
        ignored_count: int,
    ) -> None:
        """Record that managed grants were read back."""
        ...

    def permissions_read_failed(
        self,
        org_id: int,
        folder_uid: str,
        error: Exception,
    ) -> None:
        """Record that reading the remote grants failed."""
        ...

    def permissions_cleared(
        self,
        org_id: int,
        folder_uid: str,
    ) -> None:
        """Record that every managed grant was revoked."""
        ...

    def permission_changes_planned(
        self,
        org_id: int,
        folder_uid: str,
        to_grant: int,
        to_revoke: int,
    ) -> None:
        """Record the difference between stored and declared sets."""
        ...

    def folder_gone(
        self,
        org_id: int,
        folder_uid: str,
        operation: str,
    ) -> None:
        """Record that the folder backing a permission set no longer exists."""
        ...

    def malformed_identifier(
        self,
        identifier: str,
        error: str,
    ) -> None:
        """Record that a stored identifier could not be decoded."""
        ...

    def with_context(self, context: ObservationContext) -> FolderPermissionServiceProbe:
        """Return a new probe with additional context."""
        ...


class DefaultFolderPermissionServiceProbe:
    """Default implementation of FolderPermissionServiceProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultFolderPermissionServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultFolderPermissionServiceProbe(logger=self._logger, context=context)

    def permissions_applied(
        self,
        org_id: int,
        folder_uid: str,
        count: int,
    ) -> None:
        self._logger.info(
            "folder_permissions_applied",
            org_id=org_id,
            folder_uid=folder_uid,
            count=count,
            **self._get_context_kwargs(),
        )

    def permissions_apply_failed(
        self,
        org_id: int,
        folder_uid: str,
        error: Exception,
    ) -> None:
        self._logger.error(
            "folder_permissions_apply_failed",
            org_id=org_id,
            folder_uid=folder_uid,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def permissions_read(
        self,
        org_id: int,
        folder_uid: str,
        count: int,
        ignored_count: int,
    ) -> None:
        self._logger.debug(
            "folder_permissions_read",
            org_id=org_id,
            folder_uid=folder_uid,
            count=count,
            ignored_count=ignored_count,
            **self._get_context_kwargs(),
        )

    def permissions_read_failed(
        self,
        org_id: int,
        folder_uid: str,
        error: Exception,
    ) -> None:
        self._logger.error(
            "folder_permissions_read_failed",
            org_id=org_id,
            folder_uid=folder_uid,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def permissions_cleared(
        self,
        org_id: int,
        folder_uid: str,
    ) -> None:
        self._logger.info(
            "folder_permissions_cleared",
            org_id=org_id,
            folder_uid=folder_uid,
            **self._get_context_kwargs(),
        )

    def permission_changes_planned(
        self,
        org_id: int,
        folder_uid: str,
        to_grant: int,
        to_revoke: int,
    ) -> None:
        self._logger.info(
            "folder_permission_changes_planned",
            org_id=org_id,
            folder_uid=folder_uid,
            to_grant=to_grant,
            to_revoke=to_revoke,
            **self._get_context_kwargs(),
        )

    def folder_gone(
        self,
        org_id: int,
        folder_uid: str,
        operation: str,
    ) -> None:
        self._logger.warning(
            "folder_permissions_folder_gone",
            org_id=org_id,
            folder_uid=folder_uid,
            operation=operation,
            **self._get_context_kwargs(),
        )

    def malformed_identifier(
        self,
        identifier: str,
        error: str,
    ) -> None:
        self._logger.error(
            "folder_permissions_malformed_identifier",
            identifier=identifier,
            error=error,
            **self._get_context_kwargs(),
        )
