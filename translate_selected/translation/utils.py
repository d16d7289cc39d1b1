"""
Translation utility functions for log previews and error reporting.
"""

import re
import traceback

PREVIEW_LENGTH = 80


def format_preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """
    Collapse whitespace and cut text down for a single log line.

    Examples:
        >>> format_preview("Hello\\n   world")
        'Hello world'
        >>> len(format_preview("x" * 200))
        83
    """
    normalized = re.sub(r"\s+", " ", text).strip()
    if len(normalized) <= limit:
        return normalized
    return f"{normalized[:limit]}..."


def format_error(error: BaseException) -> str:
    """Full traceback for an exception, or its message when it was never raised."""
    if error.__traceback__ is None:
        return f"{type(error).__name__}: {error}"
    return "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip()


def user_message(error: BaseException) -> str:
    """Short message shown to the user for a failed translation."""
    return str(error) or "Unknown error"
