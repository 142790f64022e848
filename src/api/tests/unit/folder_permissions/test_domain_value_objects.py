"""Unit tests for Folder Permissions domain value objects."""

import pytest

from folder_permissions.domain.exceptions import MalformedIdentifierError
from folder_permissions.domain.value_objects import (
    DEFAULT_ORG_ID,
    FolderPermissionId,
    FolderPermissionIdCodec,
    PermissionEntry,
    PermissionSet,
    parse_subject_id,
)


class TestFolderPermissionIdCodec:
    """Tests for encoding and decoding org-scoped identifiers."""

    @pytest.fixture
    def codec(self) -> FolderPermissionIdCodec:
        return FolderPermissionIdCodec(default_org_id=1)

    def test_encodes_org_and_uid(self, codec):
        """Should join org ID and folder UID with a colon."""
        assert codec.encode(1, "abc123") == "1:abc123"

    def test_decodes_org_and_uid(self, codec):
        """Should split the token back into its parts."""
        identity = codec.decode("7:abc123")
        assert identity == FolderPermissionId(org_id=7, folder_uid="abc123")

    @pytest.mark.parametrize(
        "org_id,folder_uid",
        [
            (0, "abc123"),
            (1, "abc123"),
            (42, "nested-folder_uid"),
            (3, "uid:with:colons"),
        ],
    )
    def test_round_trip(self, codec, org_id, folder_uid):
        """Decoding an encoded identifier should return the original parts."""
        identity = codec.decode(codec.encode(org_id, folder_uid))
        assert (identity.org_id, identity.folder_uid) == (org_id, folder_uid)

    def test_legacy_token_uses_configured_default_org(self):
        """A token without org segment should resolve to the codec's default org."""
        codec = FolderPermissionIdCodec(default_org_id=5)
        identity = codec.decode("abc123")
        assert identity.org_id == 5
        assert identity.folder_uid == "abc123"

    def test_default_codec_uses_default_org(self):
        """Should fall back to the well-known default org."""
        assert FolderPermissionIdCodec().decode("abc").org_id == DEFAULT_ORG_ID

    @pytest.mark.parametrize(
        "token",
        ["", "abc:def", "-1:abc", " 1:abc", "1:", "1.5:abc"],
    )
    def test_rejects_malformed_tokens(self, codec, token):
        """Should raise MalformedIdentifierError when the org is unrecoverable."""
        with pytest.raises(MalformedIdentifierError):
            codec.decode(token)

    def test_malformed_identifier_is_value_error(self, codec):
        """MalformedIdentifierError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            codec.decode("x:y")


class TestFolderPermissionId:
    """Tests for FolderPermissionId validation."""

    def test_str_is_encoded_form(self):
        assert str(FolderPermissionId(org_id=2, folder_uid="f")) == "2:f"

    def test_rejects_negative_org(self):
        with pytest.raises(MalformedIdentifierError, match="Invalid org ID"):
            FolderPermissionId(org_id=-1, folder_uid="abc")

    def test_rejects_empty_uid(self):
        with pytest.raises(MalformedIdentifierError, match="must not be empty"):
            FolderPermissionId(org_id=1, folder_uid="")


class TestParseSubjectId:
    """Tests for parse_subject_id."""

    def test_parses_plain_id(self):
        assert parse_subject_id("5") == 5

    def test_strips_org_qualifier(self):
        """The org prefix on team/user IDs should be ignored."""
        assert parse_subject_id("2:5") == 5

    def test_unparseable_is_unset(self):
        assert parse_subject_id("not-a-number") == 0
        assert parse_subject_id("") == 0

    def test_passes_integers_through(self):
        assert parse_subject_id(9) == 9

    def test_accepts_signed_ids(self):
        assert parse_subject_id("+7") == 7
        assert parse_subject_id("-1") == -1

    @pytest.mark.parametrize(
        "raw",
        [" 5", "5 ", "5\n", "1_0", "١", "2: 5", "0x10"],
    )
    def test_loose_integer_forms_are_unset(self, raw):
        """Forms int() tolerates but a strict integer parse rejects mean 0."""
        assert parse_subject_id(raw) == 0


class TestPermissionSet:
    """Tests for set semantics over permission entries."""

    def test_identical_entries_collapse(self):
        """Two entries with the same fields should count once."""
        entry = PermissionEntry(permission="View", team_id=5)
        permissions = PermissionSet([entry, PermissionEntry(permission="View", team_id=5)])
        assert len(permissions) == 1
        assert entry in permissions

    def test_equality_ignores_order(self):
        first = PermissionEntry(permission="View", team_id=5)
        second = PermissionEntry(permission="Edit", role="Editor")
        assert PermissionSet([first, second]) == PermissionSet([second, first])
        assert hash(PermissionSet([first, second])) == hash(PermissionSet([second, first]))

    def test_identity_key_separates_fields(self):
        """Adjacent IDs should not collide when concatenated."""
        left = PermissionEntry(permission="View", team_id=1, user_id=23)
        right = PermissionEntry(permission="View", team_id=12, user_id=3)
        assert left.identity_key != right.identity_key
        assert len(PermissionSet([left, right])) == 2

    def test_empty_set_is_falsy(self):
        assert not PermissionSet()
        assert len(PermissionSet()) == 0

    def test_contains_rejects_other_types(self):
        assert "View" not in PermissionSet([PermissionEntry(permission="View")])

    def test_diff_reports_grants_and_revocations(self):
        """Diff should list entries only in desired as grants and only in current as revokes."""
        kept = PermissionEntry(permission="View", team_id=5)
        removed = PermissionEntry(permission="Admin", user_id=3)
        added = PermissionEntry(permission="Edit", role="Editor")

        diff = PermissionSet([kept, removed]).diff(PermissionSet([kept, added]))

        assert diff.to_grant == (added,)
        assert diff.to_revoke == (removed,)
        assert not diff.is_empty

    def test_diff_of_equal_sets_is_empty(self):
        entry = PermissionEntry(permission="View", team_id=5)
        assert PermissionSet([entry]).diff(PermissionSet([entry])).is_empty
