"""Folder permission application service.

Reconciles a declared permission set with the remote access-control API.
Every write is a full replace of the folder's managed grants: anything not
declared is revoked by the server as part of the same call.
"""

from __future__ import annotations

from collections.abc import Iterable

from folder_permissions.application.normalizer import (
    to_commands,
    to_entry,
    to_permission_set,
)
from folder_permissions.application.observability import (
    DefaultFolderPermissionServiceProbe,
    FolderPermissionServiceProbe,
)
from folder_permissions.domain.exceptions import (
    MalformedIdentifierError,
    ResourceGoneError,
)
from folder_permissions.domain.value_objects import (
    FolderPermissionId,
    FolderPermissionIdCodec,
    PermissionDiff,
    PermissionEntry,
    PermissionSet,
)
from shared_kernel.authorization.exceptions import (
    UpstreamNotFoundError,
    UpstreamRejectedError,
)
from shared_kernel.authorization.protocols import AccessControlClient
from shared_kernel.authorization.types import ResourceType
from shared_kernel.observability_context import ObservationContext


class FolderPermissionService:
    """Application service for folder permission reconciliation.

    States of a folder's permission set are {absent, declared}; ``apply``
    and ``clear`` move between them with a single full-replace call.
    """

    def __init__(
        self,
        client: AccessControlClient,
        codec: FolderPermissionIdCodec | None = None,
        probe: FolderPermissionServiceProbe | None = None,
    ):
        """Initialize FolderPermissionService with dependencies.

        Args:
            client: Access-control client used for reads and writes
            codec: Identifier codec carrying the default org
            probe: Optional domain probe for observability
        """
        self._client = client
        self._codec = codec or FolderPermissionIdCodec()
        self._probe = probe or DefaultFolderPermissionServiceProbe()

    @property
    def codec(self) -> FolderPermissionIdCodec:
        return self._codec

    def with_context(self, context: ObservationContext) -> FolderPermissionService:
        """Return a service whose probes, and its client's, carry ``context``."""
        return FolderPermissionService(
            client=self._client.with_context(context),
            codec=self._codec,
            probe=self._probe.with_context(context),
        )

    def _decode(self, identifier: str) -> FolderPermissionId:
        try:
            return self._codec.decode(identifier)
        except MalformedIdentifierError as e:
            self._probe.malformed_identifier(identifier=identifier, error=str(e))
            raise

    def apply(
        self,
        folder_uid: str,
        permissions: Iterable[PermissionEntry],
        org_id: int | None = None,
    ) -> str:
        """Replace the folder's managed grants with the declared set.

        Args:
            folder_uid: UID of the folder
            permissions: Declared entries; duplicates collapse by identity
            org_id: Org of the folder, defaults to the codec's default org

        Returns:
            The encoded identifier to persist

        Raises:
            MalformedIdentifierError: If folder_uid is empty or org_id negative
            UpstreamRejectedError: If the server rejects the write
        """
        identity = FolderPermissionId(
            org_id=self._codec.default_org_id if org_id is None else org_id,
            folder_uid=folder_uid,
        )
        commands = to_commands(PermissionSet(permissions))

        try:
            self._client.with_org(identity.org_id).set_resource_permissions(
                identity.folder_uid, ResourceType.FOLDERS, commands
            )
        except UpstreamRejectedError as e:
            self._probe.permissions_apply_failed(
                org_id=identity.org_id,
                folder_uid=identity.folder_uid,
                error=e,
            )
            raise

        self._probe.permissions_applied(
            org_id=identity.org_id,
            folder_uid=identity.folder_uid,
            count=len(commands),
        )
        return identity.encode()

    def read(self, identifier: str) -> tuple[PermissionSet, str]:
        """Read the folder's managed, non-inherited grants.

        Args:
            identifier: Stored identifier from a previous ``apply``

        Returns:
            The managed permission set and the re-encoded identifier

        Raises:
            MalformedIdentifierError: If the identifier cannot be decoded
            ResourceGoneError: If the folder no longer exists
            UpstreamRejectedError: If the server rejects a read
        """
        identity = self._decode(identifier)
        client = self._client.with_org(identity.org_id)

        try:
            if not client.resource_exists(identity.folder_uid):
                self._probe.folder_gone(
                    org_id=identity.org_id,
                    folder_uid=identity.folder_uid,
                    operation="read",
                )
                raise ResourceGoneError(identity.org_id, identity.folder_uid)

            grants = client.get_resource_permissions(
                identity.folder_uid, ResourceType.FOLDERS
            )
        except UpstreamNotFoundError as e:
            # Folder removed between the lookup and the permission read
            self._probe.folder_gone(
                org_id=identity.org_id,
                folder_uid=identity.folder_uid,
                operation="read",
            )
            raise ResourceGoneError(identity.org_id, identity.folder_uid) from e
        except UpstreamRejectedError as e:
            self._probe.permissions_read_failed(
                org_id=identity.org_id,
                folder_uid=identity.folder_uid,
                error=e,
            )
            raise

        permissions = to_permission_set(grants)
        self._probe.permissions_read(
            org_id=identity.org_id,
            folder_uid=identity.folder_uid,
            count=len(permissions),
            ignored_count=sum(1 for grant in grants if to_entry(grant) is None),
        )
        return permissions, identity.encode()

    def clear(self, identifier: str) -> None:
        """Revoke every managed grant on the folder.

        Unmanaged and inherited grants, and the folder itself, are left
        untouched. A folder that is already gone counts as cleared.

        Raises:
            MalformedIdentifierError: If the identifier cannot be decoded
            UpstreamRejectedError: If the server rejects the write
        """
        identity = self._decode(identifier)

        try:
            self._client.with_org(identity.org_id).set_resource_permissions(
                identity.folder_uid, ResourceType.FOLDERS, []
            )
        except UpstreamNotFoundError:
            self._probe.folder_gone(
                org_id=identity.org_id,
                folder_uid=identity.folder_uid,
                operation="clear",
            )
            return
        except UpstreamRejectedError as e:
            self._probe.permissions_apply_failed(
                org_id=identity.org_id,
                folder_uid=identity.folder_uid,
                error=e,
            )
            raise

        self._probe.permissions_cleared(
            org_id=identity.org_id,
            folder_uid=identity.folder_uid,
        )

    def plan(
        self,
        identifier: str,
        current: PermissionSet,
        desired: Iterable[PermissionEntry],
    ) -> PermissionDiff:
        """Compute and record what applying ``desired`` would change.

        The result is informational: ``apply`` always submits the full
        desired set regardless of the diff.
        """
        identity = self._decode(identifier)
        diff = current.diff(PermissionSet(desired))
        self._probe.permission_changes_planned(
            org_id=identity.org_id,
            folder_uid=identity.folder_uid,
            to_grant=len(diff.to_grant),
            to_revoke=len(diff.to_revoke),
        )
        return diff
