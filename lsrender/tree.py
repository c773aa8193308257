"""Tree drawing characters for the tree view."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

T = TypeVar("T")


class TreePart(Enum):
    """One column of tree-drawing characters."""

    EDGE = "├──"
    LINE = "│  "
    CORNER = "└──"
    BLANK = "   "

    def ascii_art(self) -> str:
        return self.value


@dataclass(frozen=True)
class TreeParams:
    """The depth of a row and whether it is the last in its directory."""

    depth: int
    last: bool

    def is_at_root(self) -> bool:
        return self.depth == 0


@dataclass
class TreeTrunk:
    """Builds the tree parts for successive rows, remembering earlier rows."""

    stack: list[TreePart] = field(default_factory=list)
    last_params: TreeParams | None = None

    def new_row(self, params: TreeParams) -> list[TreePart]:
        """The tree parts to draw before a row with the given parameters."""
        if self.last_params is not None:
            previous = self.last_params
            self.stack[previous.depth] = TreePart.BLANK if previous.last else TreePart.LINE

        wanted = params.depth + 1
        if len(self.stack) > wanted:
            del self.stack[wanted:]
        else:
            self.stack.extend([TreePart.EDGE] * (wanted - len(self.stack)))
        self.stack[params.depth] = TreePart.CORNER if params.last else TreePart.EDGE

        self.last_params = params
        # The zeroth level is left out so that top-level entries are not
        # joined together by a line.
        return self.stack[1:]


def iterate_over(items: Iterable[T], depth: int = 0) -> Iterator[tuple[TreeParams, T]]:
    """Yield each item with tree parameters marking whether it is the last."""
    iterator = iter(items)
    sentinel = object()
    current = next(iterator, sentinel)
    while current is not sentinel:
        following = next(iterator, sentinel)
        yield TreeParams(depth, following is sentinel), current
        current = following