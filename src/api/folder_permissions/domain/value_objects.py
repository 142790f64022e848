"""Value objects for the Folder Permissions domain.

Covers the composite ``org_id:folder_uid`` identifier and the permission
entries that make up a declared permission set.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from folder_permissions.domain.exceptions import MalformedIdentifierError

DEFAULT_ORG_ID = 1
ID_SEPARATOR = ":"

_SUBJECT_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_subject_id(raw: str | int) -> int:
    """Parse a team or user ID as declared.

    Accepts a bare integer string (``"5"``) or an org-qualified one
    (``"2:5"``); the org qualifier is discarded. Unparseable values yield 0,
    which means "not set". Only ASCII digits with an optional sign are
    accepted; whitespace, digit separators and non-ASCII digits are not.

    Example:
        >>> parse_subject_id("2:5")
        5
    """
    if isinstance(raw, int):
        return raw
    if ID_SEPARATOR in raw:
        _, raw = raw.split(ID_SEPARATOR, 1)
    if not raw.isascii() or not _SUBJECT_ID_PATTERN.fullmatch(raw):
        return 0
    return int(raw)


@dataclass(frozen=True)
class FolderPermissionId:
    """Durable identity of a folder's permission set.

    Attributes:
        org_id: Organization the folder lives in (0 = server default org)
        folder_uid: UID of the folder
    """

    org_id: int
    folder_uid: str

    def __post_init__(self) -> None:
        if self.org_id < 0:
            raise MalformedIdentifierError(f"Invalid org ID: {self.org_id}")
        if not self.folder_uid:
            raise MalformedIdentifierError("Folder UID must not be empty")

    def __str__(self) -> str:
        return self.encode()

    def encode(self) -> str:
        """Encode as ``<org_id>:<folder_uid>``."""
        return f"{self.org_id}{ID_SEPARATOR}{self.folder_uid}"


@dataclass(frozen=True)
class FolderPermissionIdCodec:
    """Encodes and decodes folder permission identifiers.

    Attributes:
        default_org_id: Org assigned to legacy identifiers that carry no
            org segment
    """

    default_org_id: int = DEFAULT_ORG_ID

    def encode(self, org_id: int, folder_uid: str) -> str:
        return FolderPermissionId(org_id=org_id, folder_uid=folder_uid).encode()

    def decode(self, token: str) -> FolderPermissionId:
        """Decode an identifier token.

        Args:
            token: ``<org_id>:<folder_uid>`` or a bare folder UID

        Returns:
            The decoded FolderPermissionId

        Raises:
            MalformedIdentifierError: If the org segment is not a
                non-negative integer or the folder UID is empty
        """
        if not token:
            raise MalformedIdentifierError("Identifier must not be empty")

        if ID_SEPARATOR not in token:
            return FolderPermissionId(org_id=self.default_org_id, folder_uid=token)

        org_part, folder_uid = token.split(ID_SEPARATOR, 1)
        if not (org_part.isascii() and org_part.isdigit()):
            raise MalformedIdentifierError(
                f"Invalid identifier {token!r}: org segment {org_part!r} "
                f"is not a non-negative integer"
            )
        return FolderPermissionId(org_id=int(org_part), folder_uid=folder_uid)


@dataclass(frozen=True)
class PermissionEntry:
    """A single declared permission grant on a folder.

    Subject fields are not mutually exclusive: several may be set and are
    passed through unchanged for the server to resolve.

    Attributes:
        permission: Capability level (View, Edit or Admin)
        role: Built-in role subject, "" when unset
        team_id: Team subject, 0 when unset
        user_id: User or service account subject, 0 when unset
    """

    permission: str
    role: str = ""
    team_id: int = 0
    user_id: int = 0

    @property
    def identity_key(self) -> str:
        """Composite key that defines set membership."""
        return "|".join(
            (self.role, str(self.team_id), str(self.user_id), self.permission)
        )


@dataclass(frozen=True)
class PermissionDiff:
    """Changes needed to turn one permission set into another."""

    to_grant: tuple[PermissionEntry, ...]
    to_revoke: tuple[PermissionEntry, ...]

    @property
    def is_empty(self) -> bool:
        return not self.to_grant and not self.to_revoke


class PermissionSet:
    """Unordered collection of permission entries, unique by identity key.

    Entries with the same identity key collapse to the first one seen.
    Equality compares membership only, so ordering never matters.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[PermissionEntry] = ()):
        self._entries: dict[str, PermissionEntry] = {}
        for entry in entries:
            self._entries.setdefault(entry.identity_key, entry)

    def __iter__(self) -> Iterator[PermissionEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry: object) -> bool:
        if not isinstance(entry, PermissionEntry):
            return False
        return entry.identity_key in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionSet):
            return NotImplemented
        return self._entries.keys() == other._entries.keys()

    def __hash__(self) -> int:
        return hash(frozenset(self._entries))

    def __repr__(self) -> str:
        return f"PermissionSet({list(self._entries.values())!r})"

    def diff(self, desired: PermissionSet) -> PermissionDiff:
        """Compute what a full replace with ``desired`` grants and revokes."""
        return PermissionDiff(
            to_grant=tuple(
                entry for key, entry in desired._entries.items()
                if key not in self._entries
            ),
            to_revoke=tuple(
                entry for key, entry in self._entries.items()
                if key not in desired._entries
            ),
        )
