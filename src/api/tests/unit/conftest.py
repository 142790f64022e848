"""Unit test fixtures with mocked dependencies."""

import pytest


@pytest.fixture
def grafana_settings():
    """Provide test Grafana settings."""
    from infrastructure.settings import GrafanaSettings

    return GrafanaSettings(
        url="http://grafana.test:3000/",
        auth="admin:admin",
        org_id=1,
        timeout_seconds=5,
    )
