"""
Overlay Lifecycle Module

Owns the single overlay currently on screen and everything that takes it
down again:
- A timeout after display
- A selection change once the grace window has passed
- The active editor switching away
- An edit to the owning editor's document

Every dismissal goes through clear(reason).
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from translate_selected.config import OVERLAY_GRACE_MS, OVERLAY_TIMEOUT_MS
from translate_selected.editor import Range, Selection, TextDocument, TextEditor
from translate_selected.logger import get_logger
from translate_selected.overlay.geometry import OverlayLine, build_overlay, render_decorations

logger = get_logger(__name__)

DECORATION_KEY = "translate-selected.overlay"


@dataclass
class OverlayState:
    """The overlay on screen and what it was anchored to."""
    editor: TextEditor
    anchor_range: Range
    selection: Selection
    displayed_at: float
    timer: Any = None


class OverlayLifecycleManager:
    """
    Shows at most one overlay at a time and dismisses it.

    Args:
        decoration_key: Key the overlay's decorations are stored under in the editor
        timeout_ms: Time on screen before the overlay clears itself
        grace_ms: Window after display in which selection changes are ignored
        clock: Monotonic clock in seconds
        scheduler: Object with call_later(delay, callback) returning a handle
            with cancel(); the running asyncio loop when omitted
    """

    def __init__(
        self,
        decoration_key: str = DECORATION_KEY,
        timeout_ms: int = OVERLAY_TIMEOUT_MS,
        grace_ms: int = OVERLAY_GRACE_MS,
        clock: Callable[[], float] = time.monotonic,
        scheduler: Any = None,
    ):
        self.decoration_key = decoration_key
        self.timeout_ms = timeout_ms
        self.grace_ms = grace_ms
        self._clock = clock
        self._scheduler = scheduler
        self._state: Optional[OverlayState] = None

    @property
    def state(self) -> Optional[OverlayState]:
        return self._state

    @property
    def is_displayed(self) -> bool:
        return self._state is not None

    def show(self, editor: TextEditor, anchor_range: Range,
             original_text: str, translated_text: str) -> List[OverlayLine]:
        """Replace whatever is on screen with the overlay for this translation."""
        scheduler = self._scheduler or asyncio.get_running_loop()
        self.clear("replaced")

        rows = build_overlay(anchor_range, original_text, translated_text)
        editor.set_decorations(self.decoration_key, render_decorations(rows))

        state = OverlayState(
            editor=editor,
            anchor_range=anchor_range,
            selection=editor.selection,
            displayed_at=self._clock(),
        )
        state.timer = scheduler.call_later(self.timeout_ms / 1000, self._on_timeout, state)
        self._state = state

        logger.info(
            f"Inline translation displayed | anchor={anchor_range.start.line}:{anchor_range.start.character} "
            f"lines={len(rows)} width={rows[0].visual_width}"
        )
        return rows

    def clear(self, reason: str) -> bool:
        """Tear down the current overlay. Returns False if nothing was shown."""
        state = self._state
        if state is None:
            return False

        self._state = None
        if state.timer is not None:
            state.timer.cancel()
        state.editor.set_decorations(self.decoration_key, [])

        logger.info(f"Inline translation cleared | reason={reason}")
        return True

    def _on_timeout(self, state: OverlayState) -> None:
        # A handle that lost the race with cancel() must not clear a newer overlay
        if state is self._state:
            self.clear("timeout")

    def _in_grace_window(self, state: OverlayState) -> bool:
        return (self._clock() - state.displayed_at) * 1000 < self.grace_ms

    def on_selection_changed(self, editor: TextEditor, selections: Sequence[Selection]) -> None:
        state = self._state
        if state is None or self._in_grace_window(state):
            return

        if editor is not state.editor:
            self.clear("selection-change-editor")
            return

        if not selections or selections[0] != state.selection:
            self.clear("selection-change")

    def on_active_editor_changed(self, editor: Optional[TextEditor]) -> None:
        state = self._state
        if state is not None and editor is not state.editor:
            self.clear("active-editor-change")

    def on_document_changed(self, document: TextDocument) -> None:
        state = self._state
        if state is not None and document is state.editor.document:
            self.clear("text-input")
