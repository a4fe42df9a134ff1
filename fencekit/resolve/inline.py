# fencekit/resolve/inline.py
"""
Inline span detection on a single line of text.

Each family is scanned on its own, left to right, producing non-overlapping
candidates; spans from different families may nest or overlap, and
`locate_inline` picks among them by position.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

from ..errors.kinds import FailureKind
from ..models.fence import FenceFamily
from ..models.matches import InlineMatch, NotFound, Position, Selection
from ..utils.text import count_run, is_escaped
from .catalog import INLINE_FORMATTING_RULES


def _find_inline_code(line: str) -> List[InlineMatch]:
    matches: List[InlineMatch] = []
    length = len(line)
    i = 0
    while i < length:
        if line[i] != "`":
            i += 1
            continue
        fence_len = count_run(line, i, "`")
        opening_end = i + fence_len
        closing_start = -1
        j = opening_end
        while j < length:
            if line[j] != "`":
                j += 1
                continue
            run = count_run(line, j, "`")
            if run == fence_len:
                closing_start = j
                break
            j += run
        if closing_start == -1:
            i = opening_end
            continue
        closing_end = closing_start + fence_len
        matches.append(InlineMatch(
            family=FenceFamily.INLINE_CODE,
            outer_start=i,
            outer_end=closing_end,
            inner_start=opening_end,
            inner_end=closing_start,
        ))
        i = closing_end
    return matches


def _unescaped_dollar_run(line: str, start: int) -> int:
    run = 0
    i = start
    while i < len(line) and line[i] == "$" and not is_escaped(line, i):
        run += 1
        i += 1
    return run


def _find_inline_math(line: str) -> List[InlineMatch]:
    matches: List[InlineMatch] = []
    length = len(line)
    i = 0
    while i < length:
        if line[i] != "$" or is_escaped(line, i):
            i += 1
            continue
        fence_len = 2 if i + 1 < length and line[i + 1] == "$" and not is_escaped(line, i + 1) else 1
        opening_end = i + fence_len
        closing_start = -1
        j = opening_end
        while j < length:
            if line[j] != "$" or is_escaped(line, j):
                j += 1
                continue
            run = _unescaped_dollar_run(line, j)
            if run == fence_len:
                closing_start = j
                break
            j += run
        if closing_start == -1:
            i = opening_end
            continue
        closing_end = closing_start + fence_len
        matches.append(InlineMatch(
            family=FenceFamily.INLINE_MATH if fence_len == 1 else FenceFamily.INLINE_LATEX,
            outer_start=i,
            outer_end=closing_end,
            inner_start=opening_end,
            inner_end=closing_start,
        ))
        i = closing_end
    return matches


def _find_formatting_closing(line: str, search_start: int, char: str, marker_len: int) -> Optional[Tuple[int, int]]:
    i = search_start
    while i < len(line):
        if line[i] == char and not is_escaped(line, i):
            run = count_run(line, i, char)
            if run >= marker_len:
                return i, i + marker_len
            i += run
            continue
        i += 1
    return None


def _find_inline_formatting(line: str) -> List[InlineMatch]:
    matches: List[InlineMatch] = []
    length = len(line)
    i = 0
    while i < length:
        found: Optional[InlineMatch] = None
        for rule in INLINE_FORMATTING_RULES:
            if line[i] != rule.char or is_escaped(line, i):
                continue
            run = count_run(line, i, rule.char)
            # Longest marker first: "***x***" is bold-italic, not italic around bold.
            for marker_len in sorted((n for n in rule.families_by_length if n <= run), reverse=True):
                closing = _find_formatting_closing(line, i + marker_len, rule.char, marker_len)
                if closing is None:
                    continue
                closing_start, closing_end = closing
                inner = line[i + marker_len:closing_start]
                if not inner.strip():
                    continue
                found = InlineMatch(
                    family=rule.families_by_length[marker_len],
                    outer_start=i,
                    outer_end=closing_end,
                    inner_start=i + marker_len,
                    inner_end=closing_start,
                )
                break
            if found:
                break
        if found:
            matches.append(found)
            i = found.outer_end
        else:
            i += 1
    return matches


def find_inline_candidates(line: str) -> List[InlineMatch]:
    """All inline spans on `line`, grouped by family (code, math, formatting)."""
    return [
        *_find_inline_code(line),
        *_find_inline_math(line),
        *_find_inline_formatting(line),
    ]


def locate_inline(line: str, columns: Iterable[int]) -> Union[InlineMatch, NotFound]:
    """
    Pick the innermost-first span that encloses the requested columns.

    Candidates are ordered by start column, and for equal starts the wider span
    comes first. A candidate qualifies when any column is strictly inside its
    outer span, or when the columns are exactly its two outer boundaries (an
    existing selection of the whole span).
    """
    requested = sorted(set(columns))
    if not line or not requested:
        return NotFound(reason=FailureKind.NO_ENCLOSING_FENCE)

    candidates = sorted(find_inline_candidates(line), key=lambda m: (m.outer_start, -m.outer_end))
    for candidate in candidates:
        inside = any(candidate.outer_start < col < candidate.outer_end for col in requested)
        on_boundaries = requested == [candidate.outer_start, candidate.outer_end]
        if inside or on_boundaries:
            return candidate
    return NotFound(reason=FailureKind.NO_ENCLOSING_FENCE)


def collect_cursor_columns(line: int, cursor: Optional[Position], selections: Iterable[Selection]) -> List[int]:
    """Columns on `line` touched by the cursor or by any selection endpoint."""
    columns = set()
    if cursor is not None and cursor.line == line:
        columns.add(cursor.column)
    for selection in selections or ():
        if selection.anchor.line == line:
            columns.add(selection.anchor.column)
        if selection.head.line == line:
            columns.add(selection.head.column)
    return sorted(columns)
