"""Wire models exchanged with the access-control API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GrantCommand(BaseModel):
    """One entry of a full-replace permission submission.

    Zero-valued ``team_id``/``user_id`` and an empty ``built_in_role`` mean
    the command does not target that subject.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    built_in_role: str = ""
    team_id: int = 0
    user_id: int = 0
    permission: str

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the API, omitting unset subject fields."""
        return self.model_dump(by_alias=True, exclude_defaults=True)


class RemoteGrant(BaseModel):
    """A permission as reported by the access-control API.

    ``is_managed`` and ``is_inherited`` are provenance markers set by the
    server. Other response fields (logins, avatars, actions) are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    built_in_role: str = ""
    team_id: int = 0
    user_id: int = 0
    permission: str = ""
    is_managed: bool = False
    is_inherited: bool = False
