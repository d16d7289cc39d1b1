"""
Translators Module

This module provides the translation provider clients and the factory that
picks one from configuration.
"""

from translate_selected.translators.exceptions import (
    ConfigurationError,
    ProviderError,
    TranslationError,
)
from translate_selected.translators.providers import (
    DeepLTranslator,
    GoogleTranslator,
    Translator,
    YoudaoTranslator,
    truncate_input,
    youdao_sign,
)
from translate_selected.translators.service import get_translator, resolve_provider

__all__ = [
    'TranslationError',
    'ConfigurationError',
    'ProviderError',
    'Translator',
    'GoogleTranslator',
    'DeepLTranslator',
    'YoudaoTranslator',
    'truncate_input',
    'youdao_sign',
    'get_translator',
    'resolve_provider',
]
