"""
Overlay module - Inline rendering of translations

This module provides:
- visual_width: column width with wide glyphs counted twice
- wrap_line_with_indent: indent-preserving line wrapping
- wrap_columns / max_lines: sizing hints from the visible region
- build_overlay / render_decorations: the block's rows and their styling
- OverlayLifecycleManager: the single on-screen overlay and its dismissal
"""

from translate_selected.overlay.width import char_width, visual_width
from translate_selected.overlay.wrap import wrap_line_with_indent
from translate_selected.overlay.viewport import max_lines, wrap_columns
from translate_selected.overlay.geometry import (
    OverlayLine,
    build_overlay,
    decoration_style,
    render_decorations,
)
from translate_selected.overlay.lifecycle import (
    DECORATION_KEY,
    OverlayLifecycleManager,
    OverlayState,
)
