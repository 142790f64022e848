"""Pydantic models for folder permission declarations and stored state."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from folder_permissions.domain.value_objects import (
    FolderPermissionId,
    PermissionEntry,
    PermissionSet,
    parse_subject_id,
)
from shared_kernel.authorization.types import BuiltInRole, PermissionLevel


class PermissionItem(BaseModel):
    """A permission entry in declaration-facing shape.

    Subject IDs are strings of integers, ``"0"`` meaning unset; an
    org-qualified form (``"2:5"``) is also accepted. Values read back from
    the server are kept verbatim, so no enum validation happens here.
    """

    model_config = ConfigDict(frozen=True)

    role: str = Field(default="", description="Built-in role (Viewer or Editor)")
    team_id: str = Field(default="0", description="ID of the team")
    user_id: str = Field(
        default="0", description="ID of the user or service account"
    )
    permission: str = Field(..., description="One of View, Edit or Admin")

    @field_validator("role", mode="before")
    @classmethod
    def none_role_is_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("team_id", "user_id", mode="before")
    @classmethod
    def subject_id_as_string(cls, value: object) -> object:
        if value is None:
            return "0"
        if isinstance(value, int):
            return str(value)
        return value

    def to_domain(self) -> PermissionEntry:
        return PermissionEntry(
            role=str(self.role),
            team_id=parse_subject_id(self.team_id),
            user_id=parse_subject_id(self.user_id),
            permission=str(self.permission),
        )

    @classmethod
    def from_domain(cls, entry: PermissionEntry) -> PermissionItem:
        return cls(
            role=entry.role,
            team_id=str(entry.team_id),
            user_id=str(entry.user_id),
            permission=entry.permission,
        )


class DeclaredPermissionItem(PermissionItem):
    """A permission entry as written by the user, with enum validation."""

    role: BuiltInRole | Literal[""] = Field(
        default="", description="Manage permissions for Viewer or Editor roles"
    )
    permission: PermissionLevel = Field(
        ..., description="Permission to associate with the item"
    )


class FolderPermissionDeclaration(BaseModel):
    """The complete set of permissions declared for one folder.

    Permissions that are not listed are removed when the declaration is
    applied.
    """

    folder_uid: str = Field(..., min_length=1, description="The UID of the folder")
    org_id: int | None = Field(
        default=None,
        ge=0,
        description="Org of the folder; the configured default org when omitted",
    )
    permissions: list[DeclaredPermissionItem] = Field(
        default_factory=list,
        description="The permission items; items omitted are removed",
    )

    def entries(self) -> list[PermissionEntry]:
        return [item.to_domain() for item in self.permissions]


class FolderPermissionState(BaseModel):
    """Persisted state of an applied folder permission set.

    ``id`` is the durable ``<org_id>:<folder_uid>`` identifier; the
    permissions are the last-known managed set, used as the baseline for
    the next update.
    """

    id: str = Field(..., description="Encoded org and folder identifier")
    org_id: int = Field(..., ge=0, description="Org of the folder")
    folder_uid: str = Field(..., description="The UID of the folder")
    permissions: list[PermissionItem] = Field(default_factory=list)

    def permission_set(self) -> PermissionSet:
        return PermissionSet(item.to_domain() for item in self.permissions)

    @classmethod
    def from_domain(
        cls,
        identity: FolderPermissionId,
        permissions: PermissionSet,
    ) -> FolderPermissionState:
        return cls(
            id=identity.encode(),
            org_id=identity.org_id,
            folder_uid=identity.folder_uid,
            permissions=[PermissionItem.from_domain(entry) for entry in permissions],
        )
