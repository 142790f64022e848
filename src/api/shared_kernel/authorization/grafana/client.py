"""Grafana access-control client implementation.

Provides a synchronous httpx client for the Grafana HTTP API that
implements the AccessControlClient protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from shared_kernel.authorization.exceptions import (
    UpstreamNotFoundError,
    UpstreamRejectedError,
)
from shared_kernel.authorization.models import GrantCommand, RemoteGrant
from shared_kernel.authorization.observability import (
    AccessControlProbe,
    DefaultAccessControlProbe,
)
from shared_kernel.authorization.types import ResourceType

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext

ORG_ID_HEADER = "X-Grafana-Org-Id"


def _auth_from_string(auth: str | None) -> httpx.Auth | None:
    """Build httpx auth from a Grafana-style credential string.

    ``user:password`` selects basic auth, anything else is sent as a bearer
    token (API key or service account token). An empty value or
    ``anonymous`` disables authentication.
    """
    if not auth or auth == "anonymous":
        return None
    if ":" in auth:
        username, password = auth.split(":", 1)
        return httpx.BasicAuth(username, password)
    return _BearerAuth(auth)


class _BearerAuth(httpx.Auth):
    def __init__(self, token: str):
        self._token = token

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "message" in body:
        return str(body["message"])
    return response.text


class GrafanaAccessControlClient:
    """Grafana implementation of the AccessControlClient protocol.

    A single underlying ``httpx.Client`` is shared between org-scoped copies
    returned by ``with_org``; the org is sent per request through the
    ``X-Grafana-Org-Id`` header.
    """

    def __init__(
        self,
        url: str,
        auth: str | None = None,
        org_id: int = 0,
        timeout_seconds: float = 30.0,
        verify_tls: bool = True,
        probe: AccessControlProbe | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initialize Grafana client.

        Args:
            url: Base URL of the Grafana instance (e.g., "http://localhost:3000")
            auth: ``user:password`` or an API token
            org_id: Organization to scope calls to; 0 leaves it to the server
            timeout_seconds: Per-request timeout
            verify_tls: Whether to verify TLS certificates
            probe: Optional domain probe for observability
            http_client: Pre-built httpx client (mainly for tests)
        """
        self._url = url.rstrip("/")
        self._org_id = org_id
        self._probe = probe or DefaultAccessControlProbe()
        self._http = http_client or httpx.Client(
            base_url=self._url,
            auth=_auth_from_string(auth),
            timeout=timeout_seconds,
            verify=verify_tls,
            headers={"Accept": "application/json"},
        )

    @property
    def org_id(self) -> int:
        return self._org_id

    def with_org(self, org_id: int) -> GrafanaAccessControlClient:
        """Return a client scoped to ``org_id`` sharing this connection pool."""
        return GrafanaAccessControlClient(
            url=self._url,
            org_id=org_id,
            probe=self._probe,
            http_client=self._http,
        )

    def with_context(self, context: ObservationContext) -> GrafanaAccessControlClient:
        """Return a copy whose probe events carry ``context``."""
        return GrafanaAccessControlClient(
            url=self._url,
            org_id=self._org_id,
            probe=self._probe.with_context(context),
            http_client=self._http,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> GrafanaAccessControlClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        headers = {}
        if self._org_id > 0:
            headers[ORG_ID_HEADER] = str(self._org_id)

        try:
            response = self._http.request(method, path, json=payload, headers=headers)
        except httpx.HTTPError as e:
            self._probe.connection_failed(
                method=method,
                path=path,
                org_id=self._org_id,
                error=e,
            )
            raise UpstreamRejectedError(f"{method} {path} failed: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise UpstreamNotFoundError(
                f"{method} {path}: not found",
                status_code=response.status_code,
            )

        if response.is_error:
            detail = _error_detail(response)
            self._probe.request_rejected(
                method=method,
                path=path,
                org_id=self._org_id,
                status_code=response.status_code,
                detail=detail,
            )
            raise UpstreamRejectedError(
                f"{method} {path}: HTTP {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        return response

    def resource_exists(self, resource_uid: str) -> bool:
        try:
            self._send("GET", f"/api/folders/{resource_uid}")
        except UpstreamNotFoundError:
            exists = False
        else:
            exists = True

        self._probe.resource_lookup_completed(
            resource_uid=resource_uid,
            org_id=self._org_id,
            exists=exists,
        )
        return exists

    def get_resource_permissions(
        self,
        resource_uid: str,
        resource_type: ResourceType,
    ) -> list[RemoteGrant]:
        path = f"/api/access-control/{resource_type}/{resource_uid}"
        response = self._send("GET", path)

        try:
            grants = [RemoteGrant.model_validate(item) for item in response.json()]
        except (ValueError, TypeError, ValidationError) as e:
            raise UpstreamRejectedError(
                f"GET {path}: unexpected response body: {e}",
                status_code=response.status_code,
            ) from e

        self._probe.permissions_fetched(
            resource_type=str(resource_type),
            resource_uid=resource_uid,
            org_id=self._org_id,
            count=len(grants),
        )
        return grants

    def set_resource_permissions(
        self,
        resource_uid: str,
        resource_type: ResourceType,
        commands: list[GrantCommand],
    ) -> None:
        path = f"/api/access-control/{resource_type}/{resource_uid}"
        payload = {"permissions": [command.to_payload() for command in commands]}
        self._send("POST", path, payload=payload)

        self._probe.permissions_replaced(
            resource_type=str(resource_type),
            resource_uid=resource_uid,
            org_id=self._org_id,
            count=len(commands),
        )
