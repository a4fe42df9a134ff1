# fencekit/utils/text.py
from typing import List


def leading_whitespace(line: str) -> str:
    """Return the whitespace prefix that `str.strip()` would remove from the left."""
    stripped = line.lstrip()
    return line[: len(line) - len(stripped)]


def is_escaped(text: str, index: int) -> bool:
    """True when an odd number of backslashes sit immediately before `index`."""
    backslashes = 0
    i = index - 1
    while i >= 0 and text[i] == "\\":
        backslashes += 1
        i -= 1
    return backslashes % 2 == 1


def count_run(text: str, start: int, char: str) -> int:
    """Length of the run of `char` beginning at `start`."""
    count = 0
    for ch in text[start:]:
        if ch != char:
            break
        count += 1
    return count


def text_in_range(document, start, end) -> str:
    """
    Read the text between two ordered positions through the host's line API.
    Lines are joined with "\\n", matching how `replace_range` splits them.
    """
    if start.line == end.line:
        return document.get_line(start.line)[start.column:end.column]
    parts: List[str] = [document.get_line(start.line)[start.column:]]
    for i in range(start.line + 1, end.line):
        parts.append(document.get_line(i))
    parts.append(document.get_line(end.line)[: end.column])
    return "\n".join(parts)
