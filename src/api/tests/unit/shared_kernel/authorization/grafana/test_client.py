"""Unit tests for the Grafana access-control client."""

from __future__ import annotations

import json
from unittest.mock import create_autospec

import httpx
import pytest

from shared_kernel.authorization.exceptions import (
    UpstreamNotFoundError,
    UpstreamRejectedError,
)
from shared_kernel.authorization.grafana.client import (
    ORG_ID_HEADER,
    GrafanaAccessControlClient,
    _auth_from_string,
)
from shared_kernel.authorization.models import GrantCommand, RemoteGrant
from shared_kernel.authorization.observability import AccessControlProbe
from shared_kernel.authorization.types import ResourceType
from shared_kernel.observability_context import ObservationContext

BASE_URL = "http://grafana.test"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses."""

    def __init__(self, responses: dict[tuple[str, str], httpx.Response]):
        self._responses = responses
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self._responses:
            return httpx.Response(404, json={"message": "not found"})
        return self._responses[key]


@pytest.fixture
def mock_probe():
    return create_autospec(AccessControlProbe, instance=True)


def make_client(handler, probe, org_id: int = 0) -> GrafanaAccessControlClient:
    http_client = httpx.Client(
        base_url=BASE_URL, transport=httpx.MockTransport(handler)
    )
    return GrafanaAccessControlClient(
        url=BASE_URL, org_id=org_id, probe=probe, http_client=http_client
    )


class TestAuthFromString:
    """Tests for credential parsing."""

    def test_basic_auth_for_user_password(self):
        assert isinstance(_auth_from_string("admin:secret"), httpx.BasicAuth)

    def test_bearer_for_token(self):
        request = httpx.Request("GET", BASE_URL)
        flow = _auth_from_string("glsa_token").auth_flow(request)
        assert next(flow).headers["Authorization"] == "Bearer glsa_token"

    @pytest.mark.parametrize("auth", [None, "", "anonymous"])
    def test_no_auth(self, auth):
        assert _auth_from_string(auth) is None


class TestWithOrg:
    """Tests for org scoping."""

    def test_sends_org_header(self, mock_probe):
        handler = RecordingHandler(
            {("GET", "/api/folders/abc123"): httpx.Response(200, json={"uid": "abc123"})}
        )
        client = make_client(handler, mock_probe).with_org(3)

        client.resource_exists("abc123")

        assert client.org_id == 3
        assert handler.requests[0].headers[ORG_ID_HEADER] == "3"

    def test_org_zero_omits_header(self, mock_probe):
        handler = RecordingHandler(
            {("GET", "/api/folders/abc123"): httpx.Response(200, json={})}
        )
        make_client(handler, mock_probe).resource_exists("abc123")

        assert ORG_ID_HEADER not in handler.requests[0].headers


class TestWithContext:
    """Tests for observation context binding."""

    def test_events_go_to_context_bound_probe(self, mock_probe):
        bound_probe = create_autospec(AccessControlProbe, instance=True)
        mock_probe.with_context.return_value = bound_probe
        handler = RecordingHandler(
            {("GET", "/api/folders/abc123"): httpx.Response(200, json={})}
        )
        context = ObservationContext(request_id="run-1", operation="read")

        client = make_client(handler, mock_probe, org_id=2).with_context(context)
        client.resource_exists("abc123")

        mock_probe.with_context.assert_called_once_with(context)
        bound_probe.resource_lookup_completed.assert_called_once_with(
            resource_uid="abc123", org_id=2, exists=True
        )
        assert client.org_id == 2
        assert handler.requests[0].headers[ORG_ID_HEADER] == "2"


class TestResourceExists:
    """Tests for resource_exists."""

    def test_true_on_success(self, mock_probe):
        handler = RecordingHandler(
            {("GET", "/api/folders/abc123"): httpx.Response(200, json={})}
        )
        assert make_client(handler, mock_probe).resource_exists("abc123") is True

    def test_false_on_not_found(self, mock_probe):
        handler = RecordingHandler({})
        assert make_client(handler, mock_probe, org_id=1).resource_exists("gone") is False
        mock_probe.resource_lookup_completed.assert_called_once_with(
            resource_uid="gone", org_id=1, exists=False
        )

    def test_raises_on_other_errors(self, mock_probe):
        handler = RecordingHandler(
            {
                ("GET", "/api/folders/abc123"): httpx.Response(
                    401, json={"message": "Unauthorized"}
                )
            }
        )
        with pytest.raises(UpstreamRejectedError) as exc_info:
            make_client(handler, mock_probe).resource_exists("abc123")

        assert exc_info.value.status_code == 401
        assert "Unauthorized" in str(exc_info.value)


class TestGetResourcePermissions:
    """Tests for get_resource_permissions."""

    def test_parses_grants(self, mock_probe):
        handler = RecordingHandler(
            {
                ("GET", "/api/access-control/folders/abc123"): httpx.Response(
                    200,
                    json=[
                        {
                            "teamId": 5,
                            "permission": "View",
                            "isManaged": True,
                            "isInherited": False,
                        },
                        {"builtInRole": "Admin", "permission": "Admin"},
                    ],
                )
            }
        )
        client = make_client(handler, mock_probe, org_id=1)

        grants = client.get_resource_permissions("abc123", ResourceType.FOLDERS)

        assert grants == [
            RemoteGrant(team_id=5, permission="View", is_managed=True),
            RemoteGrant(built_in_role="Admin", permission="Admin"),
        ]
        mock_probe.permissions_fetched.assert_called_once_with(
            resource_type="folders", resource_uid="abc123", org_id=1, count=2
        )

    def test_rejects_unexpected_body(self, mock_probe):
        handler = RecordingHandler(
            {
                ("GET", "/api/access-control/folders/abc123"): httpx.Response(
                    200, text="<html>"
                )
            }
        )
        with pytest.raises(UpstreamRejectedError, match="unexpected response body"):
            make_client(handler, mock_probe).get_resource_permissions(
                "abc123", ResourceType.FOLDERS
            )

    def test_not_found(self, mock_probe):
        with pytest.raises(UpstreamNotFoundError):
            make_client(RecordingHandler({}), mock_probe).get_resource_permissions(
                "abc123", ResourceType.FOLDERS
            )


class TestSetResourcePermissions:
    """Tests for set_resource_permissions."""

    def test_posts_full_list(self, mock_probe):
        handler = RecordingHandler(
            {
                ("POST", "/api/access-control/folders/abc123"): httpx.Response(
                    200, json={"message": "Permissions updated"}
                )
            }
        )
        client = make_client(handler, mock_probe, org_id=2)

        client.set_resource_permissions(
            "abc123",
            ResourceType.FOLDERS,
            [
                GrantCommand(built_in_role="Editor", permission="Edit"),
                GrantCommand(team_id=5, permission="View"),
            ],
        )

        body = json.loads(handler.requests[0].content)
        assert body == {
            "permissions": [
                {"builtInRole": "Editor", "permission": "Edit"},
                {"teamId": 5, "permission": "View"},
            ]
        }
        mock_probe.permissions_replaced.assert_called_once_with(
            resource_type="folders", resource_uid="abc123", org_id=2, count=2
        )

    def test_empty_list_revokes_all(self, mock_probe):
        handler = RecordingHandler(
            {
                ("POST", "/api/access-control/folders/abc123"): httpx.Response(
                    200, json={}
                )
            }
        )
        make_client(handler, mock_probe).set_resource_permissions(
            "abc123", ResourceType.FOLDERS, []
        )

        assert json.loads(handler.requests[0].content) == {"permissions": []}

    def test_rejection_is_reported(self, mock_probe):
        handler = RecordingHandler(
            {
                ("POST", "/api/access-control/folders/abc123"): httpx.Response(
                    400, json={"message": "invalid permission"}
                )
            }
        )
        with pytest.raises(UpstreamRejectedError) as exc_info:
            make_client(handler, mock_probe).set_resource_permissions(
                "abc123", ResourceType.FOLDERS, []
            )

        assert exc_info.value.status_code == 400
        mock_probe.request_rejected.assert_called_once_with(
            method="POST",
            path="/api/access-control/folders/abc123",
            org_id=0,
            status_code=400,
            detail="invalid permission",
        )
        mock_probe.permissions_replaced.assert_not_called()

    def test_missing_folder_raises_not_found(self, mock_probe):
        with pytest.raises(UpstreamNotFoundError):
            make_client(RecordingHandler({}), mock_probe).set_resource_permissions(
                "gone", ResourceType.FOLDERS, []
            )

    def test_transport_error_is_wrapped(self, mock_probe):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamRejectedError) as exc_info:
            make_client(handler, mock_probe).set_resource_permissions(
                "abc123", ResourceType.FOLDERS, []
            )

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        mock_probe.connection_failed.assert_called_once()
