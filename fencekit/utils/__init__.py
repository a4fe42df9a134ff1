# fencekit/utils/__init__.py
from .text import count_run, is_escaped, leading_whitespace, text_in_range

__all__ = [
    "count_run",
    "is_escaped",
    "leading_whitespace",
    "text_in_range",
]
