from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class FenceFamily(str, Enum):
    """Every fence flavour the catalog recognizes."""

    CODE = "Code"
    LATEX = "LaTeX"
    BOX_INFO = "BoxInfo"
    TAG_INFO = "TagInfo"
    GENERIC = "GenericFence"
    INLINE_LATEX = "InlineLaTeX"
    INLINE_MATH = "InlineMath"
    INLINE_CODE = "InlineCode"
    INLINE_ITALIC = "InlineItalic"
    INLINE_BOLD = "InlineBold"
    INLINE_BOLD_ITALIC = "InlineBoldItalic"
    INLINE_UNDERLINE = "InlineUnderline"
    INLINE_STRIKETHROUGH = "InlineStrikethrough"
    INLINE_HIGHLIGHT = "InlineHighlight"

    @property
    def is_inline(self) -> bool:
        return self.value.startswith("Inline")

    @property
    def label(self) -> str:
        return FAMILY_LABELS.get(self, "Fence")


# User-facing names; both inline math spans share the "LaTeX" label.
FAMILY_LABELS = {
    FenceFamily.CODE: "Code",
    FenceFamily.LATEX: "LaTeX",
    FenceFamily.BOX_INFO: "Box Info",
    FenceFamily.TAG_INFO: "Tag Info",
    FenceFamily.GENERIC: "Markdown fence",
    FenceFamily.INLINE_LATEX: "LaTeX",
    FenceFamily.INLINE_MATH: "LaTeX",
    FenceFamily.INLINE_CODE: "Inline Code",
    FenceFamily.INLINE_ITALIC: "Italic",
    FenceFamily.INLINE_BOLD: "Bold",
    FenceFamily.INLINE_BOLD_ITALIC: "Bold/Italic",
    FenceFamily.INLINE_UNDERLINE: "Underline",
    FenceFamily.INLINE_STRIKETHROUGH: "Strikethrough",
    FenceFamily.INLINE_HIGHLIGHT: "Highlight",
}


@dataclass(frozen=True)
class FenceDetection:
    """An opening block delimiter, with the predicate that closes it."""

    family: FenceFamily
    start_marker: str              # opener as written ("````", ":::note", "$$", ...)
    end_marker: str                # canonical closer, used in messages
    indent: str                    # leading whitespace of the opening line
    closes: Callable[[str], bool]  # takes a stripped line
    parity_key: Optional[str] = None  # "backtick" | "tilde" | "dollar" for toggled families


@dataclass(frozen=True)
class CursorFenceState:
    """Open/closed parity per toggled family, valid for one line only."""

    backtick: bool = False
    tilde: bool = False
    dollar: bool = False

    def is_open(self, parity_key: Optional[str]) -> bool:
        # Families without parity (admonitions, generic fences) are always eligible.
        if parity_key is None:
            return True
        return bool(getattr(self, parity_key))
