from .core import PLACEHOLDER, extract_content, remove_fences, select_content, wrap

__all__ = ["PLACEHOLDER", "extract_content", "remove_fences", "select_content", "wrap"]
