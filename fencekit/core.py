# fencekit/core.py
"""
Host-facing commands: copy, select, wrap and remove.

Each command resolves the fence under the cursor, performs one edit or read,
and reports back through a CommandResult carrying the message the host
should show. Expected failures never raise.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ._logging import resolve_logger
from .errors import ExtractionError, FailureKind, MutationError
from .models.fence import FenceFamily
from .models.matches import InlineMatch, Match, NotFound, Selection
from .mutate import extract_content, remove_fences, select_content, wrap
from .resolve import resolve
from .system import copy_to_clipboard

# Fence name -> (opening line, closing line, family used for the label).
WRAP_FENCES = {
    "box-info": (":::box-info", ":::end-box-info", FenceFamily.BOX_INFO),
    "tag-info": (":::tag-info", ":::end-tag-info", FenceFamily.TAG_INFO),
    "latex": (":::latex", ":::end-latex", FenceFamily.LATEX),
}


@dataclass
class CommandResult:
    """Outcome of one host command."""

    ok: bool
    message: str
    failure: Optional[FailureKind] = None
    match: Optional[Match] = None
    selection: Optional[Selection] = None
    text: Optional[str] = None  # extracted content, for copy


def _label(family: Optional[FenceFamily]) -> str:
    return family.label if family else "Fence"


def describe_failure(failure: Union[NotFound, FailureKind], family: Optional[FenceFamily] = None) -> str:
    """User-visible message for a failed resolution or command."""
    if isinstance(failure, NotFound):
        kind, family, marker = failure.reason, failure.family, failure.end_marker
    else:
        kind, marker = failure, None
    label = _label(family)

    if kind is FailureKind.CURSOR_UNAVAILABLE:
        return "Could not get cursor position."
    if kind is FailureKind.NO_ENCLOSING_FENCE:
        return "Cursor is not inside a recognized Markdown fence."
    if kind is FailureKind.UNTERMINATED_FENCE:
        return f"Could not find a closing fence ({marker or 'closing delimiter'}) for this {label}."
    if kind is FailureKind.CURSOR_OUTSIDE_CONTENT:
        return f"Cursor is not inside this {label} fence's content area."
    if kind is FailureKind.EXTRACTION_FAILURE:
        return f"Block Utility: Error extracting content from {label}."
    if kind is FailureKind.MUTATION_FAILURE:
        return f"Block Utility: Error editing {label} fences."
    if kind is FailureKind.CLIPBOARD_FAILURE:
        return f"Block Utility: Error copying {label} content."
    return "Block Utility: Could not identify fenced content."


def _resolve_or_fail(document, lg):
    result = resolve(document, logger=lg)
    if isinstance(result, NotFound):
        lg.warning("Fence resolution failed: %s", result.reason.value)
        return None, CommandResult(ok=False, message=describe_failure(result), failure=result.reason)
    return result, None


def _failed(kind: FailureKind, match: Optional[Match], error: Exception, lg) -> CommandResult:
    family = match.family if match is not None else None
    lg.error("%s: %s", kind.value, error)
    return CommandResult(ok=False, message=describe_failure(kind, family), failure=kind, match=match)


def copy_fence_content(
    document,
    *,
    clipboard: Callable[[str], bool] = copy_to_clipboard,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> CommandResult:
    """
    Copy the content of the fence under the cursor. The document is never edited.
    A clipboard failure is reported after extraction succeeded; `text` is still set.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    match, failure = _resolve_or_fail(document, lg)
    if failure:
        return failure

    try:
        content = extract_content(document, match)
    except ExtractionError as e:
        return _failed(FailureKind.EXTRACTION_FAILURE, match, e, lg)
    lg.debug("Extracted %d characters from %s.", len(content), match.family.value)

    try:
        copied = clipboard(content)
    except Exception as e:
        lg.error("Clipboard transfer raised: %s", e)
        copied = False
    label = _label(match.family)
    if not copied:
        return CommandResult(
            ok=False,
            message=describe_failure(FailureKind.CLIPBOARD_FAILURE, match.family),
            failure=FailureKind.CLIPBOARD_FAILURE,
            match=match,
            text=content,
        )
    return CommandResult(ok=True, message=f"{label} content copied!", match=match, text=content)


def select_fence_content(
    document,
    *,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> CommandResult:
    """Select the content of the fence under the cursor, excluding delimiters."""
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    match, failure = _resolve_or_fail(document, lg)
    if failure:
        return failure
    try:
        selection = select_content(document, match)
    except MutationError as e:
        return _failed(FailureKind.MUTATION_FAILURE, match, e, lg)
    return CommandResult(ok=True, message="", match=match, selection=selection)


def wrap_selection(
    document,
    fence: str,
    *,
    placeholder: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> CommandResult:
    """Wrap the primary selection (or a placeholder) in one of WRAP_FENCES."""
    if fence not in WRAP_FENCES:
        raise ValueError(f"fence must be one of {sorted(WRAP_FENCES)}")
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    open_token, close_token, family = WRAP_FENCES[fence]

    selections = document.list_selections()
    if selections:
        selection = selections[0]
    else:
        cursor = document.get_cursor()
        if cursor is None:
            return CommandResult(
                ok=False,
                message=describe_failure(FailureKind.CURSOR_UNAVAILABLE),
                failure=FailureKind.CURSOR_UNAVAILABLE,
            )
        selection = Selection.caret(cursor)

    kwargs = {"placeholder": placeholder} if placeholder is not None else {}
    try:
        new_selection = wrap(document, selection, open_token, close_token, **kwargs)
    except MutationError as e:
        lg.error("Failed to wrap selection with %s: %s", open_token, e)
        return CommandResult(
            ok=False,
            message=f"Block Utility: Failed to wrap selection with {open_token} fence.",
            failure=FailureKind.MUTATION_FAILURE,
        )
    lg.debug("Inserted %s fence.", open_token)
    return CommandResult(ok=True, message=f"{family.label} fence inserted.", selection=new_selection)


def remove_fence(
    document,
    *,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> CommandResult:
    """Remove the delimiters of the fence under the cursor, keeping its content."""
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    match, failure = _resolve_or_fail(document, lg)
    if failure:
        return failure
    try:
        selection = remove_fences(document, match)
    except MutationError as e:
        return _failed(FailureKind.MUTATION_FAILURE, match, e, lg)
    label = _label(match.family)
    kind = "inline" if isinstance(match, InlineMatch) else "block"
    lg.info("Removed %s %s fences.", kind, label)
    return CommandResult(ok=True, message=f"{label} fences removed.", match=match, selection=selection)
