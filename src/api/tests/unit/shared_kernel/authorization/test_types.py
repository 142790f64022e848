"""Unit tests for authorization types."""

from shared_kernel.authorization.types import (
    BuiltInRole,
    PermissionLevel,
    ResourceType,
)


class TestResourceType:
    """Tests for ResourceType enum."""

    def test_has_folders_type(self):
        """Test that FOLDERS matches the API path segment."""
        assert ResourceType.FOLDERS == "folders"
        assert f"/api/access-control/{ResourceType.FOLDERS}/x" == (
            "/api/access-control/folders/x"
        )


class TestBuiltInRole:
    """Tests for BuiltInRole enum."""

    def test_declarable_roles(self):
        assert {role.value for role in BuiltInRole} == {"Viewer", "Editor"}


class TestPermissionLevel:
    """Tests for PermissionLevel enum."""

    def test_levels(self):
        assert [level.value for level in PermissionLevel] == ["View", "Edit", "Admin"]

    def test_levels_are_strings(self):
        for level in PermissionLevel:
            assert isinstance(level, str)
