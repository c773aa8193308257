"""Rendering of the Git status column."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from lsrender.cell import TextCell, TextCellContents
from lsrender.style import Style, StyledText


class GitColours(Protocol):
    """The styles used for each Git status."""

    def not_modified(self) -> Style: ...

    def new(self) -> Style: ...

    def modified(self) -> Style: ...

    def deleted(self) -> Style: ...

    def renamed(self) -> Style: ...

    def type_change(self) -> Style: ...

    def ignored(self) -> Style: ...

    def conflicted(self) -> Style: ...


class GitStatus(Enum):
    """The status of a file in one Git area, valued by its display character."""

    NOT_MODIFIED = "-"
    NEW = "N"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    TYPE_CHANGE = "T"
    IGNORED = "I"
    CONFLICTED = "U"

    def render(self, colours: GitColours) -> StyledText:
        return _STYLES[self](colours).paint(self.value)


_STYLES: dict[GitStatus, Callable[[GitColours], Style]] = {
    GitStatus.NOT_MODIFIED: lambda c: c.not_modified(),
    GitStatus.NEW: lambda c: c.new(),
    GitStatus.MODIFIED: lambda c: c.modified(),
    GitStatus.DELETED: lambda c: c.deleted(),
    GitStatus.RENAMED: lambda c: c.renamed(),
    GitStatus.TYPE_CHANGE: lambda c: c.type_change(),
    GitStatus.IGNORED: lambda c: c.ignored(),
    GitStatus.CONFLICTED: lambda c: c.conflicted(),
}


@dataclass(frozen=True)
class Git:
    """A file's staged and unstaged Git statuses."""

    staged: GitStatus = GitStatus.NOT_MODIFIED
    unstaged: GitStatus = GitStatus.NOT_MODIFIED

    def render(self, colours: GitColours) -> TextCell:
        contents = TextCellContents([self.staged.render(colours), self.unstaged.render(colours)])
        return TextCell(contents, 2)