from translate_selected.editor import MemoryDocument, MemoryEditor, Position, Range
from translate_selected.overlay.viewport import max_lines, wrap_columns


def make_editor(lines, visible=None):
    editor = MemoryEditor(MemoryDocument("\n".join(lines)))
    if visible is not None:
        editor.scroll_to(visible)
    return editor


def visible(start, end):
    return [Range(Position(start, 0), Position(end, 0))]


def test_defaults_without_visible_range():
    editor = make_editor(["x"], visible=[])
    assert wrap_columns(editor) == 80
    assert max_lines(editor) == 6


def test_wrap_columns_uses_longest_visible_line():
    editor = make_editor(["a" * 50, "b" * 95, "c" * 200], visible=visible(0, 1))
    assert wrap_columns(editor) == 95


def test_wrap_columns_is_clamped():
    assert wrap_columns(make_editor(["short"], visible=visible(0, 0))) == 40
    assert wrap_columns(make_editor(["z" * 300], visible=visible(0, 0))) == 120


def test_wrap_columns_blank_region_falls_back_to_default():
    editor = make_editor(["", "", ""], visible=visible(0, 2))
    assert wrap_columns(editor) == 80


def test_max_lines_is_a_share_of_visible_lines():
    lines = ["x"] * 60
    assert max_lines(make_editor(lines, visible=visible(0, 19))) == 7
    assert max_lines(make_editor(lines, visible=visible(0, 4))) == 3
    assert max_lines(make_editor(lines, visible=visible(0, 59))) == 10
