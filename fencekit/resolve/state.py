# fencekit/resolve/state.py
import logging

from ..models.fence import CursorFenceState

log = logging.getLogger(__name__)


def compute_cursor_state(document, line: int) -> CursorFenceState:
    """
    Scan lines 0..line inclusive and flip one bit per toggled family each time
    its marker appears. The result says whether an odd number of that
    family's markers precede (and include) `line`; it is a parity, not a depth.
    """
    backtick = tilde = dollar = False
    for i in range(line + 1):
        try:
            text = document.get_line(i)
        except (IndexError, ValueError) as e:
            log.debug("Skipping unreadable line %d during state scan: %s", i, e)
            continue
        stripped = text.strip()
        if stripped.startswith("```"):
            backtick = not backtick
        if stripped.startswith("~~~"):
            tilde = not tilde
        if stripped == "$$":
            dollar = not dollar
    return CursorFenceState(backtick=backtick, tilde=tilde, dollar=dollar)
