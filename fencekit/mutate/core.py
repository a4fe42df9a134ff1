# fencekit/mutate/core.py
from __future__ import annotations

import logging
from typing import Optional

from ..errors.extract import ExtractionError
from ..errors.mutation import MutationError
from ..models.matches import InlineMatch, Match, Position, Selection
from ..utils.text import text_in_range

log = logging.getLogger(__name__)

PLACEHOLDER = "Your text here"


def _line_of(match: InlineMatch) -> int:
    if match.line is None:
        raise MutationError("Inline match has no line; resolve it against a document first.")
    return match.line


def _content_selection(document, first_line: int, count: int) -> Selection:
    """Selection spanning `count` whole lines from `first_line`, or a caret when empty."""
    if count <= 0:
        return Selection.caret(Position(first_line, 0))
    last_line = first_line + count - 1
    return Selection(Position(first_line, 0), Position(last_line, len(document.get_line(last_line))))


def _apply_selection(document, selection: Selection) -> Selection:
    try:
        document.set_selection(selection.anchor, selection.head)
    except Exception as e:
        raise MutationError(f"Host rejected selection {selection}: {e}") from e
    return selection


def _replace(document, text: str, start: Position, end: Position) -> None:
    try:
        document.replace_range(text, start, end)
    except Exception as e:
        raise MutationError(f"Host rejected replace at {start}..{end}: {e}") from e


def _delete_line(document, line: int) -> None:
    """Remove one line together with its own line break."""
    total = document.line_count()
    if line < 0 or line >= total:
        raise MutationError(f"Cannot delete line {line}; document has {total} lines.")
    start = Position(line, 0)
    if line == total - 1:
        end = Position(line, len(document.get_line(line)))
    else:
        end = Position(line + 1, 0)
    _replace(document, "", start, end)


def wrap(
    document,
    selection: Selection,
    open_token: str,
    close_token: str,
    *,
    placeholder: str = PLACEHOLDER,
) -> Selection:
    """
    Surround `selection` with an opening and closing fence line.

    An empty selection is filled with `placeholder`. The inserted inner text
    is selected afterwards so the user can keep typing over it. Raises
    MutationError when the host rejects an edit; the commands in
    `fencekit.core` report that as a CommandResult instead.
    """
    start, end = selection.start, selection.end
    try:
        selected = text_in_range(document, start, end)
    except IndexError as e:
        raise MutationError(f"Selection {start}..{end} is outside the document: {e}") from e
    inner = selected if selected else placeholder

    _replace(document, f"{open_token}\n{inner}\n{close_token}", start, end)

    inner_lines = inner.split("\n")
    first_line = start.line + 1
    last_line = first_line + len(inner_lines) - 1
    log.debug("Wrapped %d line(s) with %s/%s.", len(inner_lines), open_token, close_token)
    return _apply_selection(
        document,
        Selection(Position(first_line, 0), Position(last_line, len(inner_lines[-1]))),
    )


def remove_fences(document, match: Match, *, cursor: Optional[Position] = None) -> Selection:
    """
    Strip the delimiters of `match` and keep its content.

    Inline: the outer span becomes the inner text and the caret keeps its
    offset inside that text. Block: the closing line is deleted before the
    opening line so the lower index stays valid; the surviving content lines
    are selected afterwards.

    Raises MutationError on a host failure. Use `fencekit.core.remove_fence`
    for a tagged result.
    """
    if isinstance(match, InlineMatch):
        line = _line_of(match)
        text = document.get_line(line)
        inner = text[match.inner_start:match.inner_end]
        if cursor is None:
            cursor = document.get_cursor()
        offset = 0
        if cursor is not None and cursor.line == line:
            offset = max(0, min(len(inner), cursor.column - match.inner_start))
        _replace(document, inner, Position(line, match.outer_start), Position(line, match.outer_end))
        caret = Position(line, match.outer_start + offset)
        return _apply_selection(document, Selection.caret(caret))

    content_lines = match.content_line_count
    _delete_line(document, match.end_line)
    _delete_line(document, match.start_line)
    log.debug("Removed %s delimiters at lines %d and %d.", match.family.value, match.start_line, match.end_line)
    return _apply_selection(document, _content_selection(document, match.start_line, content_lines))


def extract_content(document, match: Match) -> str:
    """The text between the delimiters, without them."""
    try:
        if isinstance(match, InlineMatch):
            return document.get_line(_line_of(match))[match.inner_start:match.inner_end]
        return "\n".join(document.get_line(i) for i in range(match.start_line + 1, match.end_line))
    except (IndexError, MutationError) as e:
        raise ExtractionError(f"Could not read content of {match.family.value} fence: {e}") from e


def select_content(document, match: Match) -> Selection:
    """Select the content of `match`; an empty block gets a caret on its first content line."""
    if isinstance(match, InlineMatch):
        line = _line_of(match)
        return _apply_selection(
            document,
            Selection(Position(line, match.inner_start), Position(line, match.inner_end)),
        )
    return _apply_selection(document, _content_selection(document, match.start_line + 1, match.content_line_count))
