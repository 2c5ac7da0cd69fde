from __future__ import annotations

from typing import List, NamedTuple, Optional

# Property names containing any of these are written as ['name'].
SPECIAL_PATH_CHARS = frozenset(".' /\"[]()\t\n\r\f\b\\\u0085\u2028\u2029")


class ArraySegment(NamedTuple):
    """One `name[index]` marker found inside a header path.

    `start` is the offset of the first name character and `end` the offset
    just past the closing bracket, so `path[start:end]` is the whole marker.
    """

    name: str
    index: int
    start: int
    end: int


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == '_'


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def _match_index_at(text: str, pos: int) -> int:
    """Return the offset past `[digits]` starting at `pos`, or -1."""
    if pos >= len(text) or text[pos] != '[':
        return -1
    i = pos + 1
    while i < len(text) and _is_digit(text[i]):
        i += 1
    if i == pos + 1 or i >= len(text) or text[i] != ']':
        return -1
    return i + 1


def find_last_array_segment(path: str) -> Optional[ArraySegment]:
    """Find the rightmost `<word chars>[<digits>]` marker in `path`.

    The marker closest to the leaf decides which table owns a value; outer
    markers are folded into the group key prefix by the router.
    """
    if not path:
        return None

    found: Optional[ArraySegment] = None
    i = 0
    while i < len(path):
        if path[i] != '[':
            i += 1
            continue

        end = _match_index_at(path, i)
        if end < 0 or i == 0 or not _is_word_char(path[i - 1]):
            i += 1
            continue

        start = i
        while start > 0 and _is_word_char(path[start - 1]):
            start -= 1
        found = ArraySegment(path[start:i], int(path[i + 1:end - 1]), start, end)
        i = end

    return found


def strip_indices(text: str) -> str:
    """Remove every `[digits]` occurrence from `text`."""
    if not text:
        return ''

    out: List[str] = []
    i = 0
    while i < len(text):
        end = _match_index_at(text, i)
        if end >= 0:
            i = end
            continue
        out.append(text[i])
        i += 1
    return ''.join(out)


def format_property_segment(name: str) -> str:
    """Render a property name as a path segment.

    Plain names are used as is; names with path-special characters are
    quoted as `['name']` with quotes and backslashes escaped.
    """
    if not isinstance(name, str):
        name = str(name)
    if name and not any(ch in SPECIAL_PATH_CHARS for ch in name):
        return name
    escaped = name.replace('\\', '\\\\').replace("'", "\\'")
    return f"['{escaped}']"


def join_path(parent: str, name: str) -> str:
    segment = format_property_segment(name)
    if not parent:
        return segment
    if segment.startswith('['):
        return f"{parent}{segment}"
    return f"{parent}.{segment}"


def index_path(parent: str, index: int) -> str:
    return f"{parent}[{index}]"
