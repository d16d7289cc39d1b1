"""
Editor host model.

Positions, ranges and selections in the host editor's coordinates
(zero-based line and character), the protocol the overlay code needs from a
host, and an in-memory host that implements it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence


@dataclass(frozen=True, order=True)
class Position:
    line: int
    character: int = 0


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    @classmethod
    def at(cls, position: Position) -> "Range":
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class Selection:
    anchor: Position
    active: Position

    @property
    def start(self) -> Position:
        return min(self.anchor, self.active)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.active)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active

    def to_range(self) -> Range:
        return Range(self.start, self.end)


class TextDocument(Protocol):
    @property
    def line_count(self) -> int: ...

    def line_at(self, line: int) -> str: ...

    def get_text(self, text_range: Optional[Range] = None) -> str: ...


class TextEditor(Protocol):
    document: TextDocument

    @property
    def selection(self) -> Selection: ...

    @property
    def visible_ranges(self) -> Sequence[Range]: ...

    def set_decorations(self, key: str, decorations: List[Dict[str, Any]]) -> None: ...


class Window(Protocol):
    # Each fires with (editor, selections), (editor or None), (document)
    on_did_change_text_editor_selection: "Event"
    on_did_change_active_text_editor: "Event"
    on_did_change_text_document: "Event"

    @property
    def active_text_editor(self) -> Optional[TextEditor]: ...

    def show_warning_message(self, message: str) -> None: ...

    def show_error_message(self, message: str) -> None: ...

    async def show_input_box(self, prompt: str) -> Optional[str]: ...

    def set_status_bar_message(self, text: str, timeout_ms: int) -> None: ...


class Event:
    """Minimal listener list; subscribe() returns a callable that unsubscribes."""

    def __init__(self):
        self._listeners: List[Callable[..., None]] = []

    def subscribe(self, listener: Callable[..., None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def dispose():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return dispose

    def fire(self, *args) -> None:
        for listener in list(self._listeners):
            listener(*args)


class MemoryDocument:
    """A text buffer held in memory."""

    def __init__(self, text: str = ""):
        self._lines = text.replace("\r\n", "\n").split("\n")
        self.on_did_change = Event()

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, line: int) -> str:
        if not 0 <= line < len(self._lines):
            raise IndexError(f"Line {line} out of range (document has {len(self._lines)} lines)")
        return self._lines[line]

    def _offset(self, position: Position) -> int:
        line = min(max(position.line, 0), len(self._lines) - 1)
        character = min(max(position.character, 0), len(self._lines[line]))
        return sum(len(text) + 1 for text in self._lines[:line]) + character

    def get_text(self, text_range: Optional[Range] = None) -> str:
        text = "\n".join(self._lines)
        if text_range is None:
            return text
        return text[self._offset(text_range.start):self._offset(text_range.end)]

    def replace(self, text_range: Range, new_text: str) -> None:
        text = "\n".join(self._lines)
        start, end = self._offset(text_range.start), self._offset(text_range.end)
        self._lines = (text[:start] + new_text.replace("\r\n", "\n") + text[end:]).split("\n")
        self.on_did_change.fire(self)

    def insert(self, position: Position, new_text: str) -> None:
        self.replace(Range.at(position), new_text)


class MemoryEditor:
    """An editor view over a MemoryDocument that records its decorations."""

    def __init__(self, document: MemoryDocument, selection: Optional[Selection] = None,
                 visible_ranges: Optional[Sequence[Range]] = None):
        self.document = document
        self._selection = selection or Selection(Position(0, 0), Position(0, 0))
        self._visible_ranges = list(visible_ranges) if visible_ranges is not None else None
        self.decorations: Dict[str, List[Dict[str, Any]]] = {}
        self.on_did_change_selection = Event()

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def visible_ranges(self) -> Sequence[Range]:
        if self._visible_ranges is not None:
            return self._visible_ranges
        last = self.document.line_count - 1
        return [Range(Position(0, 0), Position(last, len(self.document.line_at(last))))]

    def scroll_to(self, visible_ranges: Sequence[Range]) -> None:
        self._visible_ranges = list(visible_ranges)

    def select(self, selection: Selection) -> None:
        self._selection = selection
        self.on_did_change_selection.fire(self, [selection])

    def set_decorations(self, key: str, decorations: List[Dict[str, Any]]) -> None:
        self.decorations[key] = list(decorations)


class MemoryWindow:
    """
    Window surface for in-memory editors.

    Forwards selection and document events from every opened editor and
    records messages shown to the user.
    """

    def __init__(self):
        self._editors: List[MemoryEditor] = []
        self._active: Optional[MemoryEditor] = None
        self._inputs: List[Optional[str]] = []
        self.warnings: List[str] = []
        self.errors: List[str] = []
        self.status_messages: List[tuple] = []
        self.on_did_change_text_editor_selection = Event()
        self.on_did_change_active_text_editor = Event()
        self.on_did_change_text_document = Event()

    @property
    def active_text_editor(self) -> Optional[MemoryEditor]:
        return self._active

    def open(self, editor: MemoryEditor) -> MemoryEditor:
        """Track an editor and make it the active one."""
        if editor not in self._editors:
            if all(other.document is not editor.document for other in self._editors):
                editor.document.on_did_change.subscribe(self.on_did_change_text_document.fire)
            self._editors.append(editor)
            editor.on_did_change_selection.subscribe(self.on_did_change_text_editor_selection.fire)
        self.focus(editor)
        return editor

    def focus(self, editor: Optional[MemoryEditor]) -> None:
        if editor is self._active:
            return
        self._active = editor
        self.on_did_change_active_text_editor.fire(editor)

    def queue_input(self, value: Optional[str]) -> None:
        """Queue the answer for the next show_input_box() call."""
        self._inputs.append(value)

    async def show_input_box(self, prompt: str) -> Optional[str]:
        return self._inputs.pop(0) if self._inputs else None

    def show_warning_message(self, message: str) -> None:
        self.warnings.append(message)

    def show_error_message(self, message: str) -> None:
        self.errors.append(message)

    def set_status_bar_message(self, text: str, timeout_ms: int) -> None:
        self.status_messages.append((text, timeout_ms))
