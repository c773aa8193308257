"""Users and groups, and rendering of the user column."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from lsrender.cell import TextCell, paint
from lsrender.style import Style


class UserFormat(Enum):
    """Whether to show users and groups by number or by name."""

    NUMERIC = "numeric"
    NAME = "name"


@dataclass(frozen=True)
class User:
    """An account on the system."""

    uid: int
    name: str
    primary_group: int


@dataclass(frozen=True)
class Group:
    """A group on the system, with the names of its secondary members."""

    gid: int
    name: str
    members: tuple[str, ...] = ()


class _UserLookup(Protocol):
    def get_user_by_uid(self, uid: int) -> User | None: ...

    def get_current_uid(self) -> int: ...


class SystemUsers:
    """Looks users and groups up in the system databases, caching results."""

    def __init__(self) -> None:
        self._users: dict[int, User | None] = {}
        self._groups: dict[int, Group | None] = {}

    def get_user_by_uid(self, uid: int) -> User | None:
        if uid not in self._users:
            self._users[uid] = self._lookup_user(uid)
        return self._users[uid]

    def get_group_by_gid(self, gid: int) -> Group | None:
        if gid not in self._groups:
            self._groups[gid] = self._lookup_group(gid)
        return self._groups[gid]

    def get_current_uid(self) -> int:
        return os.getuid()

    @staticmethod
    def _lookup_user(uid: int) -> User | None:
        import pwd

        try:
            entry = pwd.getpwuid(uid)
        except (KeyError, OverflowError):
            return None
        return User(entry.pw_uid, entry.pw_name, entry.pw_gid)

    @staticmethod
    def _lookup_group(gid: int) -> Group | None:
        import grp

        try:
            entry = grp.getgrgid(gid)
        except (KeyError, OverflowError):
            return None
        return Group(entry.gr_gid, entry.gr_name, tuple(entry.gr_mem))


class UserColours(Protocol):
    """The styles used for the user column."""

    def you(self) -> Style: ...

    def someone_else(self) -> Style: ...


def render_user(uid: int, colours: UserColours, users: _UserLookup, format: UserFormat) -> TextCell:
    """The owner of a file, highlighted if it is the current user."""
    user = users.get_user_by_uid(uid)
    if user is None or format is UserFormat.NUMERIC:
        user_name = str(uid)
    else:
        user_name = user.name

    style = colours.you() if users.get_current_uid() == uid else colours.someone_else()
    return paint(style, user_name)