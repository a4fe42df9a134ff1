from .fence import FAMILY_LABELS, CursorFenceState, FenceDetection, FenceFamily
from .matches import BlockMatch, InlineMatch, Match, NotFound, Position, Resolution, Selection

__all__ = [
    "FAMILY_LABELS",
    "CursorFenceState",
    "FenceDetection",
    "FenceFamily",
    "BlockMatch",
    "InlineMatch",
    "Match",
    "NotFound",
    "Position",
    "Resolution",
    "Selection",
]
