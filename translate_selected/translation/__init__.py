"""
Translation module - Dispatching text to a translator

This module provides:
- translate_text: single request or ordered per-line fan-out
- TranslationRequest: the immutable request value
- Preview and error formatting helpers for logs and user messages
"""

from translate_selected.translation.dispatcher import (
    TranslationRequest,
    log_request,
    translate_text,
)
from translate_selected.translation.utils import (
    format_error,
    format_preview,
    user_message,
)
