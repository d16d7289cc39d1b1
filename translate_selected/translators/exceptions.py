"""
Translator Exceptions

This module contains exception classes for the translator providers.
Separated to avoid circular imports between service.py and providers.py.
"""


class TranslationError(Exception):
    """Translation service error with optional code and details."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConfigurationError(TranslationError):
    """A credential or setting required by the selected provider is missing."""

    def __init__(self, message: str, code: str = "config_missing", details: dict = None):
        super().__init__(message, code=code, details=details)


class ProviderError(TranslationError):
    """The remote call failed or came back without a translation."""

    def __init__(self, message: str, code: str = "provider_error", details: dict = None):
        super().__init__(message, code=code, details=details)
