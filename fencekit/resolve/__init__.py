from .block import locate_block
from .catalog import INLINE_FORMATTING_RULES, detect_fence_start
from .inline import collect_cursor_columns, find_inline_candidates, locate_inline
from .main import resolve
from .state import compute_cursor_state

__all__ = [
    "INLINE_FORMATTING_RULES",
    "collect_cursor_columns",
    "compute_cursor_state",
    "detect_fence_start",
    "find_inline_candidates",
    "locate_block",
    "locate_inline",
    "resolve",
]
