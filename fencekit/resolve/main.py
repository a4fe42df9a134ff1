# fencekit/resolve/main.py
from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, Optional

from .._logging import resolve_logger
from ..errors.kinds import FailureKind
from ..models.matches import InlineMatch, NotFound, Position, Resolution, Selection
from .block import locate_block
from .inline import collect_cursor_columns, locate_inline


def resolve(
    document,
    cursor: Optional[Position] = None,
    selections: Optional[Iterable[Selection]] = None,
    *,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> Resolution:
    """
    Resolve the fence enclosing the cursor.

    Inline spans on the cursor line are tried first so that repeated commands
    peel the innermost span before reaching the surrounding block. Falls back
    to the root block fence. Never raises for a missing fence; the returned
    NotFound carries the reason.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    if cursor is None:
        try:
            cursor = document.get_cursor()
        except Exception as e:
            lg.error("Could not read cursor from host: %s", e)
            cursor = None
    if cursor is None:
        return NotFound(reason=FailureKind.CURSOR_UNAVAILABLE)
    if not 0 <= cursor.line < document.line_count():
        lg.error("Cursor line %d is outside the document.", cursor.line)
        return NotFound(reason=FailureKind.CURSOR_UNAVAILABLE)

    if selections is None:
        selections = document.list_selections()
    lg.debug("Resolving fence at line %d, column %d.", cursor.line, cursor.column)

    line_text = document.get_line(cursor.line)
    columns = collect_cursor_columns(cursor.line, cursor, selections)
    inline = locate_inline(line_text, columns)
    if isinstance(inline, InlineMatch):
        lg.debug(
            "Inline fence (%s) on line %d spanning columns %d..%d.",
            inline.family.value, cursor.line, inline.inner_start, inline.inner_end,
        )
        return dataclasses.replace(inline, line=cursor.line)

    return locate_block(document, cursor.line, logger=logger, log=log)
