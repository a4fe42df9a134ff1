from enum import Enum


class FailureKind(str, Enum):
    """Why a command could not complete. Values are stable for logging."""

    CURSOR_UNAVAILABLE = "cursor_unavailable"
    NO_ENCLOSING_FENCE = "no_enclosing_fence"
    UNTERMINATED_FENCE = "unterminated_fence"
    CURSOR_OUTSIDE_CONTENT = "cursor_outside_content"
    EXTRACTION_FAILURE = "extraction_failure"
    MUTATION_FAILURE = "mutation_failure"
    CLIPBOARD_FAILURE = "clipboard_failure"
