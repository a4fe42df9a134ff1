# fencekit/resolve/block.py
from __future__ import annotations

import logging
from typing import Optional, Union

from .._logging import resolve_logger
from ..errors.kinds import FailureKind
from ..models.fence import FenceDetection
from ..models.matches import BlockMatch, NotFound
from ..utils.text import leading_whitespace
from .catalog import detect_fence_start
from .state import compute_cursor_state


def _find_closing_line(document, detection: FenceDetection, start_line: int) -> int:
    """First line after `start_line` at the opener's indent that closes it, or -1."""
    total = document.line_count()
    for i in range(start_line + 1, total):
        text = document.get_line(i)
        # Fences nested at a different indentation never close the root.
        if leading_whitespace(text) != detection.indent:
            continue
        if detection.closes(text.strip()):
            return i
    return -1


def locate_block(
    document,
    cursor_line: int,
    *,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> Union[BlockMatch, NotFound]:
    """
    Find the root block fence whose content area contains `cursor_line`.

    Walks upward from the cursor looking for an opener. Code and `$$`
    openers only count while their family is open at the cursor (odd parity);
    admonitions and generic fences always count. Each accepted opener is then
    paired with the first closer below it at the same indentation.

    If an accepted opener is unterminated, or its fence ends before the
    cursor, the walk continues above it so that an inner fence never hides
    the outer one. When no opener encloses the cursor, the first failure
    seen is returned (or NO_ENCLOSING_FENCE if there was none). A cursor on
    the opening line of a nested fence therefore resolves to the fence around it.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    state = compute_cursor_state(document, cursor_line)
    lg.debug("Cursor fence state at line %d: %s", cursor_line, state)

    first_failure: Optional[NotFound] = None
    for i in range(cursor_line, -1, -1):
        detection = detect_fence_start(document.get_line(i))
        if detection is None:
            continue
        if not state.is_open(detection.parity_key):
            lg.debug("Line %d opens %s but that family is closed here; skipping.", i, detection.family.value)
            continue

        lg.debug("Found candidate %s fence start %r at line %d.", detection.family.value, detection.start_marker, i)
        end_line = _find_closing_line(document, detection, i)
        if end_line == -1:
            failure = NotFound(
                reason=FailureKind.UNTERMINATED_FENCE,
                start_line=i,
                end_line=-1,
                family=detection.family,
                end_marker=detection.end_marker,
            )
        elif not i < cursor_line < end_line:
            failure = NotFound(
                reason=FailureKind.CURSOR_OUTSIDE_CONTENT,
                start_line=i,
                end_line=end_line,
                family=detection.family,
                end_marker=detection.end_marker,
            )
        else:
            lg.debug("Resolved %s fence lines %d..%d.", detection.family.value, i, end_line)
            return BlockMatch(
                family=detection.family,
                start_line=i,
                end_line=end_line,
                indent=detection.indent,
            )

        lg.debug("Candidate at line %d rejected (%s); continuing upward.", i, failure.reason.value)
        if first_failure is None:
            first_failure = failure

    if first_failure is not None:
        return first_failure
    lg.debug("No root start delimiter found enclosing line %d.", cursor_line)
    return NotFound(reason=FailureKind.NO_ENCLOSING_FENCE)
