"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures run-scoped and domain-relevant metadata that should be included
    with all instrumentation events of one lifecycle operation.

    Attributes:
        request_id: Identifier of the run driving the operation.
        operation: Lifecycle operation (create, read, update, delete, import).
        org_id: Organization the operation is scoped to (if known).
        folder_uid: UID of the folder being reconciled (if known).

    Example:
        context = ObservationContext(request_id="run-123", operation="update")
        service = service.with_context(context.with_folder("abc123", org_id=1))
    """

    request_id: str | None = None
    operation: str | None = None
    org_id: int | None = None
    folder_uid: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean. Org and folder are
        prefixed so they never collide with event arguments of the same name.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.operation is not None:
            result["context_operation"] = self.operation
        if self.org_id is not None:
            result["context_org_id"] = self.org_id
        if self.folder_uid is not None:
            result["context_folder_uid"] = self.folder_uid
        return result

    def with_folder(
        self, folder_uid: str, org_id: int | None = None
    ) -> ObservationContext:
        """Create a new context scoped to a folder (and optionally its org)."""
        return ObservationContext(
            request_id=self.request_id,
            operation=self.operation,
            org_id=self.org_id if org_id is None else org_id,
            folder_uid=folder_uid,
        )
