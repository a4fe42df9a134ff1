from dataclasses import dataclass
from typing import Optional, Union

from ..errors.kinds import FailureKind
from .fence import FenceFamily


@dataclass(frozen=True, order=True)
class Position:
    """A 0-based (line, column) location. Orders lexicographically."""

    line: int
    column: int


@dataclass(frozen=True)
class Selection:
    """A host selection. `anchor` may come after `head`."""

    anchor: Position
    head: Position

    @classmethod
    def caret(cls, position: Position) -> "Selection":
        return cls(position, position)

    @property
    def start(self) -> Position:
        return min(self.anchor, self.head)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.head)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.head


@dataclass(frozen=True)
class BlockMatch:
    """A root block fence; content lines are start_line+1 .. end_line-1."""

    family: FenceFamily
    start_line: int
    end_line: int
    indent: str = ""

    @property
    def content_line_count(self) -> int:
        return self.end_line - self.start_line - 1


@dataclass(frozen=True)
class InlineMatch:
    """An inline span on a single line, in columns."""

    family: FenceFamily
    outer_start: int
    outer_end: int
    inner_start: int
    inner_end: int
    line: Optional[int] = None  # filled in by resolve(); bare line scans leave it unset


@dataclass(frozen=True)
class NotFound:
    """A failed resolution. Line numbers are -1 when not applicable."""

    reason: FailureKind
    start_line: int = -1
    end_line: int = -1
    family: Optional[FenceFamily] = None
    end_marker: Optional[str] = None


Match = Union[BlockMatch, InlineMatch]
Resolution = Union[BlockMatch, InlineMatch, NotFound]
