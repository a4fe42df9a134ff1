# fencekit/resolve/catalog.py
"""
The fixed fence grammar: which lines open a block fence, what closes each one,
and which marker characters form inline spans.
"""
from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional

from ..models.fence import FenceDetection, FenceFamily
from ..utils.text import count_run, leading_whitespace

# Admonition openers and their exact closers, checked in this order.
ADMONITION_FENCES = [
    (":::box-info", ":::end-box-info", FenceFamily.BOX_INFO),
    (":::tag-info", ":::end-tag-info", FenceFamily.TAG_INFO),
    (":::latex", ":::end-latex", FenceFamily.LATEX),
]

_CODE_PARITY = {"`": "backtick", "~": "tilde"}


class InlineFormattingRule(NamedTuple):
    char: str
    families_by_length: Dict[int, FenceFamily]


INLINE_FORMATTING_RULES: List[InlineFormattingRule] = [
    InlineFormattingRule("*", {
        3: FenceFamily.INLINE_BOLD_ITALIC,
        2: FenceFamily.INLINE_BOLD,
        1: FenceFamily.INLINE_ITALIC,
    }),
    InlineFormattingRule("_", {
        3: FenceFamily.INLINE_BOLD_ITALIC,
        2: FenceFamily.INLINE_BOLD,
        1: FenceFamily.INLINE_ITALIC,
    }),
    InlineFormattingRule("~", {2: FenceFamily.INLINE_STRIKETHROUGH}),
    InlineFormattingRule("=", {2: FenceFamily.INLINE_HIGHLIGHT}),
    InlineFormattingRule("+", {2: FenceFamily.INLINE_UNDERLINE}),
]


def _code_fence(stripped: str, indent: str, fence_char: str) -> Optional[FenceDetection]:
    run = count_run(stripped, 0, fence_char)
    if run < 3:
        return None
    sequence = fence_char * run

    def closes(candidate: str) -> bool:
        candidate = candidate.strip()
        if not candidate.startswith(sequence):
            return False
        # Anything after the run, including a longer run, disqualifies it.
        return not candidate[len(sequence):].strip()

    return FenceDetection(
        family=FenceFamily.CODE,
        start_marker=sequence,
        end_marker=sequence,
        indent=indent,
        closes=closes,
        parity_key=_CODE_PARITY[fence_char],
    )


def _exact_closer(end_marker: str):
    def closes(candidate: str) -> bool:
        return candidate.strip().lower() == end_marker

    return closes


def _generic_fence(stripped: str, indent: str) -> Optional[FenceDetection]:
    label = stripped[3:].strip()
    lower_label = label.lower()
    if not label or lower_label.startswith("end-"):
        return None

    def closes(candidate: str) -> bool:
        candidate = candidate.strip()
        if not candidate.startswith(":::"):
            return False
        remainder = candidate[3:].strip().lower()
        return not remainder or remainder == f"end-{lower_label}"

    return FenceDetection(
        family=FenceFamily.GENERIC,
        start_marker=stripped,
        end_marker=":::",
        indent=indent,
        closes=closes,
    )


def detect_fence_start(line: str) -> Optional[FenceDetection]:
    """
    Classify `line` as a block fence opener, or return None.

    The returned detection carries the opener's indentation and a closing
    predicate bound to what was captured here (run length, label).
    """
    stripped = line.strip()
    if not stripped:
        return None
    indent = leading_whitespace(line)

    for fence_char in ("`", "~"):
        detection = _code_fence(stripped, indent, fence_char)
        if detection:
            return detection

    if stripped == "$$":
        return FenceDetection(
            family=FenceFamily.LATEX,
            start_marker="$$",
            end_marker="$$",
            indent=indent,
            closes=lambda candidate: candidate.strip() == "$$",
            parity_key="dollar",
        )

    normalized = stripped.lower()
    for opener, closer, family in ADMONITION_FENCES:
        if normalized.startswith(opener):
            return FenceDetection(
                family=family,
                start_marker=opener,
                end_marker=closer,
                indent=indent,
                closes=_exact_closer(closer),
            )

    if stripped.startswith(":::"):
        return _generic_fence(stripped, indent)

    return None
