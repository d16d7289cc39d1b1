"""Sizing hints derived from the editor's visible region."""

from translate_selected.editor import TextEditor

DEFAULT_WRAP_COLUMNS = 80
MIN_WRAP_COLUMNS = 40
MAX_WRAP_COLUMNS = 120

DEFAULT_MAX_LINES = 6
MIN_LINES = 3
MAX_LINES = 10
VISIBLE_LINE_SHARE = 0.35


def wrap_columns(editor: TextEditor) -> int:
    """Longest line in the first visible range, clamped to [40, 120]."""
    if not editor.visible_ranges:
        return DEFAULT_WRAP_COLUMNS
    visible = editor.visible_ranges[0]

    last_line = max(visible.start.line, visible.end.line)
    longest = 0
    for line in range(visible.start.line, last_line + 1):
        longest = max(longest, len(editor.document.line_at(line)))

    # A range of blank lines says nothing about the viewport width
    return max(MIN_WRAP_COLUMNS, min(MAX_WRAP_COLUMNS, longest or DEFAULT_WRAP_COLUMNS))


def max_lines(editor: TextEditor) -> int:
    """35% of the visible line count, clamped to [3, 10]."""
    if not editor.visible_ranges:
        return DEFAULT_MAX_LINES
    visible = editor.visible_ranges[0]

    visible_lines = max(1, visible.end.line - visible.start.line + 1)
    return max(MIN_LINES, min(MAX_LINES, int(visible_lines * VISIBLE_LINE_SHARE)))
