"""Column width of text in a monospace editor, wide scripts and emoji counted as two."""

# Inclusive code point ranges rendered two columns wide
WIDE_RANGES = (
    (0x1100, 0x115F),    # Hangul Jamo
    (0x2E80, 0x303E),    # CJK radicals, punctuation and symbols
    (0x3040, 0x33BF),    # Hiragana, Katakana ... CJK compatibility
    (0x3400, 0x4DBF),    # CJK Unified Ideographs Extension A
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0xA000, 0xA4CF),    # Yi syllables and radicals
    (0xAC00, 0xD7AF),    # Hangul syllables
    (0xF900, 0xFAFF),    # CJK compatibility ideographs
    (0xFE30, 0xFE6F),    # CJK compatibility forms, small forms
    (0xFF01, 0xFF60),    # Fullwidth forms
    (0xFFE0, 0xFFE6),    # Fullwidth signs
    (0x20000, 0x2FA1F),  # Supplementary ideographic plane
    (0x1F000, 0x1FFFF),  # Emoji and pictographs
)


def char_width(char: str) -> int:
    """Columns taken by a single code point."""
    cp = ord(char)
    for low, high in WIDE_RANGES:
        if low <= cp <= high:
            return 2
    return 1


def visual_width(text: str) -> int:
    """
    Rendered column count of text.

    Combining marks are not collapsed; each code point counts on its own.

    Examples:
        >>> visual_width("abc")
        3
        >>> visual_width("你好")
        4
        >>> visual_width(" \\U0001F310  ")
        5
    """
    return sum(char_width(char) for char in text)
