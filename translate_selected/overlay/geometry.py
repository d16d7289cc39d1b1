"""
Overlay Geometry Module

Turns a selection and its translation into the rows of a bordered block
that floats above the selection:
- One row per line of the original text, so the block covers the same rows
- Every row right-padded to one visual width, so the block is a rectangle
  even when rows hold double-width glyphs
- Only the outer perimeter bordered and rounded
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from translate_selected.editor import Position, Range
from translate_selected.overlay.width import visual_width

MARKER = "\U0001F310"
FIRST_PREFIX = f" {MARKER}  "
CONTINUATION_PREFIX = " " * visual_width(FIRST_PREFIX)
PADDING_COLUMNS = 3

# Float the block this far above the first selected row
GAP_PX = 30

BACKGROUND = "#252526"
FOREGROUND = "#cccccc"
BORDER = "1px solid #3c3c3c"
RADIUS = "3px"


@dataclass(frozen=True)
class OverlayLine:
    """One display row of the overlay."""
    rendered_text: str
    visual_width: int
    is_top_edge: bool
    is_bottom_edge: bool
    line: int


def split_lines(text: str) -> List[str]:
    return text.replace("\r\n", "\n").split("\n")


def build_overlay(anchor_range: Range, original_text: str, translated_text: str) -> List[OverlayLine]:
    """
    Build the overlay rows for a translation.

    Args:
        anchor_range: Selection (or cursor) the overlay belongs to
        original_text: Text that was translated; decides the row count
        translated_text: Translation; extra lines are dropped, missing ones left blank

    Returns:
        Rows in display order, all of the same visual width
    """
    original_lines = split_lines(original_text)
    translated_lines = split_lines(translated_text)
    line_count = len(original_lines)

    raw_lines = []
    for i in range(line_count):
        content = translated_lines[i] if i < len(translated_lines) else ""
        prefix = FIRST_PREFIX if i == 0 else CONTINUATION_PREFIX
        raw_lines.append(f"{prefix}{content}")

    target_width = max(visual_width(line) for line in raw_lines) + PADDING_COLUMNS

    start_line = anchor_range.start.line
    rows = []
    for i, raw in enumerate(raw_lines):
        rendered = raw + " " * (target_width - visual_width(raw))
        rows.append(OverlayLine(
            rendered_text=rendered,
            visual_width=target_width,
            is_top_edge=(i == 0),
            is_bottom_edge=(i == line_count - 1),
            line=start_line + i,
        ))
    return rows


def decoration_style(row: OverlayLine, line_count: int) -> str:
    """CSS for one row: outer-edge borders and corners, lifted above the selection."""
    top_radius = RADIUS if row.is_top_edge else "0"
    bottom_radius = RADIUS if row.is_bottom_edge else "0"
    border_top = BORDER if row.is_top_edge else "none"
    border_bottom = BORDER if row.is_bottom_edge else "none"
    transform_y = f"calc(-1 * ({line_count} * 100% + {GAP_PX}px))"

    return (
        f"border-radius: {top_radius} {top_radius} {bottom_radius} {bottom_radius}; "
        "padding: 0 0 0 4px; "
        f"width: {row.visual_width}ch; "
        f"border-top: {border_top}; border-bottom: {border_bottom}; "
        f"border-left: {BORDER}; border-right: {BORDER}; "
        "font-style: normal; font-weight: 400; "
        "line-height: inherit; font-size: inherit; font-family: inherit; "
        "position: absolute; display: inline-block; white-space: pre; "
        f"transform: translateY({transform_y}); height: 100%; box-sizing: border-box; "
        "margin: 0; overflow: hidden;"
    )


def render_decorations(rows: List[OverlayLine]) -> List[Dict[str, Any]]:
    """Host decoration options for the rows, each anchored at column 0 of its line."""
    line_count = len(rows)
    decorations = []
    for row in rows:
        anchor = Position(row.line, 0)
        decorations.append({
            "range": Range.at(anchor),
            "render_options": {
                "before": {
                    "content_text": row.rendered_text,
                    "background_color": BACKGROUND,
                    "color": FOREGROUND,
                    "text_decoration": decoration_style(row, line_count),
                },
            },
        })
    return decorations
