"""
The narrow document surface fencekit needs from its host editor.

Any object exposing these six methods can be resolved against and mutated;
`LineDocument` is the in-memory implementation used by tests and scripts.
"""
from __future__ import annotations

from typing import List, Optional, Protocol

from .models.matches import Position, Selection


class EditorDocument(Protocol):
    def get_line(self, index: int) -> str: ...

    def line_count(self) -> int: ...

    def get_cursor(self) -> Optional[Position]: ...

    def list_selections(self) -> List[Selection]: ...

    def replace_range(self, text: str, start: Position, end: Optional[Position] = None) -> None: ...

    def set_selection(self, anchor: Position, head: Optional[Position] = None) -> None: ...


class LineDocument:
    """A mutable list of lines with a single primary selection."""

    def __init__(
        self,
        lines: Optional[List[str]] = None,
        *,
        cursor: Optional[Position] = None,
        selections: Optional[List[Selection]] = None,
    ) -> None:
        self.lines: List[str] = list(lines) if lines else [""]
        if selections:
            self.selections = list(selections)
        else:
            caret = cursor or Position(0, 0)
            self.selections = [Selection.caret(caret)]
        self._cursor = cursor or self.selections[0].head

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "LineDocument":
        return cls(text.split("\n"), **kwargs)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def get_line(self, index: int) -> str:
        if index < 0 or index >= len(self.lines):
            raise IndexError(f"line {index} out of range (0..{len(self.lines) - 1})")
        return self.lines[index]

    def line_count(self) -> int:
        return len(self.lines)

    def get_cursor(self) -> Optional[Position]:
        return self._cursor

    def list_selections(self) -> List[Selection]:
        return list(self.selections)

    def replace_range(self, text: str, start: Position, end: Optional[Position] = None) -> None:
        end = end or start
        if end < start:
            start, end = end, start
        self._check(start)
        self._check(end)
        prefix = self.lines[start.line][: start.column]
        suffix = self.lines[end.line][end.column:]
        self.lines[start.line:end.line + 1] = (prefix + text + suffix).split("\n")

    def set_selection(self, anchor: Position, head: Optional[Position] = None) -> None:
        head = head or anchor
        self._check(anchor)
        self._check(head)
        self.selections = [Selection(anchor, head)]
        self._cursor = head

    def _check(self, pos: Position) -> None:
        line = self.get_line(pos.line)
        if pos.column < 0 or pos.column > len(line):
            raise IndexError(f"column {pos.column} out of range on line {pos.line}")

    def __repr__(self) -> str:
        return f"LineDocument(lines={self.lines!r}, cursor={self._cursor!r})"
