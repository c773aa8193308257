"""Rendering of the group column."""

from __future__ import annotations

from typing import Protocol

from lsrender.cell import TextCell, paint
from lsrender.render.users import Group, User, UserFormat
from lsrender.style import Style


class _GroupLookup(Protocol):
    def get_user_by_uid(self, uid: int) -> User | None: ...

    def get_group_by_gid(self, gid: int) -> Group | None: ...

    def get_current_uid(self) -> int: ...


class GroupColours(Protocol):
    """The styles used for the group column."""

    def yours(self) -> Style: ...

    def not_yours(self) -> Style: ...


def render_group(gid: int, colours: GroupColours, users: _GroupLookup, format: UserFormat) -> TextCell:
    """A file's group, highlighted if the current user belongs to it."""
    style = colours.not_yours()

    group = users.get_group_by_gid(gid)
    if group is None:
        return paint(style, str(gid))

    current_user = users.get_user_by_uid(users.get_current_uid())
    if current_user is not None and (
        current_user.primary_group == group.gid or current_user.name in group.members
    ):
        style = colours.yours()

    group_name = group.name if format is UserFormat.NAME else str(group.gid)
    return paint(style, group_name)