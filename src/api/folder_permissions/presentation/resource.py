"""Lifecycle adapter for the folder permission resource.

Maps the create/read/update/delete/import callbacks of a declarative-config
runner onto FolderPermissionService. The runner owns persistence of
FolderPermissionState between invocations.
"""

from __future__ import annotations

from folder_permissions.application.services import FolderPermissionService
from folder_permissions.domain.exceptions import (
    ReplacementRequiredError,
    ResourceGoneError,
)
from folder_permissions.presentation.models import (
    FolderPermissionDeclaration,
    FolderPermissionState,
)
from shared_kernel.observability_context import ObservationContext


class FolderPermissionResource:
    """Manages the entire set of permissions for a folder.

    Permissions that aren't declared are removed on apply. Deleting the
    resource revokes every managed permission but keeps the folder, leaving
    it accessible to admins only.

    Each operation runs against a service bound to an ObservationContext
    naming the run, the operation and the folder, so every event it logs
    can be correlated.
    """

    def __init__(
        self,
        service: FolderPermissionService,
        request_id: str | None = None,
    ):
        self._service = service
        self._request_id = request_id

    def create(self, declaration: FolderPermissionDeclaration) -> FolderPermissionState:
        service = self._scoped(
            "create", declaration.folder_uid, org_id=declaration.org_id
        )
        identifier = service.apply(
            declaration.folder_uid,
            declaration.entries(),
            org_id=declaration.org_id,
        )
        return self._read_state(service, identifier)

    def read(self, state: FolderPermissionState) -> FolderPermissionState | None:
        """Refresh stored state from the server.

        Returns:
            The refreshed state, or None when the folder is gone and the
            state should be dropped
        """
        service = self._scoped("read", state.folder_uid, org_id=state.org_id)
        return self._read_or_drop(service, state.id)

    def update(
        self,
        state: FolderPermissionState,
        declaration: FolderPermissionDeclaration,
    ) -> FolderPermissionState:
        """Apply a changed declaration to an existing permission set.

        The full declared set is always written, even when it matches the
        stored one, so drift the stored state doesn't show is corrected too.

        Raises:
            ReplacementRequiredError: If the folder UID or org changed
        """
        if declaration.folder_uid != state.folder_uid:
            raise ReplacementRequiredError(
                "folder_uid", state.folder_uid, declaration.folder_uid
            )
        if declaration.org_id is not None and declaration.org_id != state.org_id:
            raise ReplacementRequiredError("org_id", state.org_id, declaration.org_id)

        service = self._scoped("update", state.folder_uid, org_id=state.org_id)
        entries = declaration.entries()
        # Logged only; the write below does not depend on the diff.
        service.plan(state.id, state.permission_set(), entries)
        identifier = service.apply(
            state.folder_uid,
            entries,
            org_id=state.org_id,
        )
        return self._read_state(service, identifier)

    def delete(self, state: FolderPermissionState) -> None:
        self._scoped("delete", state.folder_uid, org_id=state.org_id).clear(state.id)

    def import_state(self, identifier: str) -> FolderPermissionState | None:
        """Import an existing permission set by ``<org_id>:<folder_uid>``."""
        return self._read_or_drop(self._scoped("import"), identifier)

    def _scoped(
        self,
        operation: str,
        folder_uid: str | None = None,
        org_id: int | None = None,
    ) -> FolderPermissionService:
        context = ObservationContext(request_id=self._request_id, operation=operation)
        if folder_uid is not None:
            context = context.with_folder(folder_uid, org_id=org_id)
        return self._service.with_context(context)

    @staticmethod
    def _read_state(
        service: FolderPermissionService, identifier: str
    ) -> FolderPermissionState:
        permissions, identifier = service.read(identifier)
        return FolderPermissionState.from_domain(
            service.codec.decode(identifier), permissions
        )

    def _read_or_drop(
        self, service: FolderPermissionService, identifier: str
    ) -> FolderPermissionState | None:
        try:
            return self._read_state(service, identifier)
        except ResourceGoneError:
            return None
