import pytest

from translate_selected.overlay.width import char_width, visual_width
from translate_selected.overlay.wrap import wrap_line_with_indent


@pytest.mark.parametrize("text", ["", "hello", "  indented code();", "~!@#$%^&*()"])
def test_ascii_width_equals_length(text):
    assert visual_width(text) == len(text)


@pytest.mark.parametrize("char", [
    "ᄀ",       # Hangul Jamo
    "。",       # ideographic full stop
    "あ",       # Hiragana
    "中",       # CJK ideograph
    "ꀀ",       # Yi
    "한",       # Hangul syllable
    "Ａ",       # fullwidth A
    "￥",       # fullwidth yen
    "\U00020000",   # extension B
    "\U0001F600",   # emoji
])
def test_wide_characters_take_two_columns(char):
    assert char_width(char) == 2


@pytest.mark.parametrize("char", ["a", "é", "Ж", "—", "｡", "́"])
def test_narrow_characters_take_one_column(char):
    assert char_width(char) == 1


def test_width_counts_code_points_not_utf16_units():
    # One astral emoji: two UTF-16 units but a single code point of width 2
    assert visual_width("\U0001F310") == 2
    assert visual_width("a\U0001F310b") == 4


def test_mixed_width_is_at_least_code_point_count():
    text = "Hello 世界 \U0001F600!"
    assert visual_width(text) >= len(text)
    assert visual_width(text) == len(text) + 3


def test_wrap_short_line_is_returned_unchanged():
    assert wrap_line_with_indent("    return value", 80) == ["    return value"]


def test_wrap_empty_line():
    assert wrap_line_with_indent("", 40) == [""]


def test_wrap_repeats_indent_on_every_chunk():
    line = "    " + "a" * 25
    chunks = wrap_line_with_indent(line, 14)
    assert chunks == ["    " + "a" * 10, "    " + "a" * 10, "    " + "a" * 5]


def test_wrap_keeps_at_least_ten_content_columns():
    line = " " * 30 + "b" * 15
    chunks = wrap_line_with_indent(line, 20)
    assert chunks == [" " * 30 + "b" * 10, " " * 30 + "b" * 5]


def test_wrap_counts_characters_not_columns():
    line = "中" * 12
    assert wrap_line_with_indent(line, 12) == [line]
