from .core import (
    WRAP_FENCES,
    CommandResult,
    copy_fence_content,
    describe_failure,
    remove_fence,
    select_fence_content,
    wrap_selection,
)
from .document import EditorDocument, LineDocument
from .errors import ExtractionError, FailureKind, MutationError
from .models import (
    BlockMatch,
    CursorFenceState,
    FenceFamily,
    InlineMatch,
    NotFound,
    Position,
    Selection,
)
from .mutate import PLACEHOLDER, extract_content, remove_fences, select_content, wrap
from .resolve import (
    compute_cursor_state,
    detect_fence_start,
    find_inline_candidates,
    locate_block,
    locate_inline,
    resolve,
)
from .system import copy_to_clipboard

__all__ = [
    "resolve",
    "locate_block",
    "locate_inline",
    "find_inline_candidates",
    "compute_cursor_state",
    "detect_fence_start",
    "wrap",
    "remove_fences",
    "extract_content",
    "select_content",
    "PLACEHOLDER",
    "copy_fence_content",
    "select_fence_content",
    "wrap_selection",
    "remove_fence",
    "describe_failure",
    "CommandResult",
    "WRAP_FENCES",
    "EditorDocument",
    "LineDocument",
    "BlockMatch",
    "InlineMatch",
    "NotFound",
    "Position",
    "Selection",
    "FenceFamily",
    "CursorFenceState",
    "FailureKind",
    "ExtractionError",
    "MutationError",
    "copy_to_clipboard",
]
