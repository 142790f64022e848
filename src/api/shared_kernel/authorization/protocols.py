"""Access-control client protocol.

Defines the interface for access-control clients, allowing for swappable
implementations (Grafana HTTP API, mocks in tests).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from shared_kernel.authorization.models import GrantCommand, RemoteGrant
from shared_kernel.authorization.types import ResourceType

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AccessControlClient(Protocol):
    """Protocol for access-control clients.

    Implementations fetch and replace the permission list of a resource and
    report whether the resource itself still exists. All calls are scoped to
    the organization the client was bound to with ``with_org``.
    """

    def with_org(self, org_id: int) -> AccessControlClient:
        """Return a client scoped to the given organization.

        Args:
            org_id: Organization ID; 0 means the server's default org

        Returns:
            A client whose calls target ``org_id``
        """
        ...

    def with_context(self, context: ObservationContext) -> AccessControlClient:
        """Return a client whose events carry the given observation context."""
        ...

    def resource_exists(self, resource_uid: str) -> bool:
        """Check whether the underlying resource (folder) exists.

        Args:
            resource_uid: UID of the folder

        Returns:
            True if the folder exists, False if the server reports it missing

        Raises:
            UpstreamRejectedError: If the lookup fails for any other reason
        """
        ...

    def get_resource_permissions(
        self,
        resource_uid: str,
        resource_type: ResourceType,
    ) -> list[RemoteGrant]:
        """Fetch every permission visible on a resource.

        Args:
            resource_uid: UID of the resource
            resource_type: Type of the resource (e.g., folders)

        Returns:
            All grants, including unmanaged and inherited ones

        Raises:
            UpstreamRejectedError: If the read fails
        """
        ...

    def set_resource_permissions(
        self,
        resource_uid: str,
        resource_type: ResourceType,
        commands: list[GrantCommand],
    ) -> None:
        """Replace the managed permissions of a resource.

        The call is a total overwrite: any managed grant not included in
        ``commands`` is revoked by the server.

        Args:
            resource_uid: UID of the resource
            resource_type: Type of the resource (e.g., folders)
            commands: The complete desired grant list

        Raises:
            UpstreamNotFoundError: If the resource does not exist
            UpstreamRejectedError: If the write fails
        """
        ...
