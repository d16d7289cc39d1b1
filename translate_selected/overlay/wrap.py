"""Indent-preserving line wrapping."""

import re
from typing import List

MIN_CONTENT_COLUMNS = 10

_INDENT = re.compile(r"^(\s+)")


def wrap_line_with_indent(line: str, max_columns: int) -> List[str]:
    """
    Split a long line into chunks that fit max_columns, repeating its indent.

    Chunks are cut by character count, not visual width. At least
    MIN_CONTENT_COLUMNS characters of content go on every chunk however deep
    the indent is.

    Examples:
        >>> wrap_line_with_indent("short", 80)
        ['short']
        >>> wrap_line_with_indent("  abcdefghijklmnop", 12)
        ['  abcdefghij', '  klmnop']
        >>> wrap_line_with_indent("", 80)
        ['']
    """
    if not line:
        return [""]

    match = _INDENT.match(line)
    indent = match.group(1) if match else ""
    content = line[len(indent):]
    available = max(MIN_CONTENT_COLUMNS, max_columns - len(indent))

    if len(content) <= available:
        return [line]

    return [f"{indent}{content[i:i + available]}" for i in range(0, len(content), available)]
