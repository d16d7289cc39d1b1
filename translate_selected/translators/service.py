"""
Translator Service Module

Selects the translator for the configured provider. Credentials are passed
through as configured; each translator reports missing ones when it is
actually called.
"""

from typing import Any, Dict, Optional

from translate_selected.config import DEFAULT_PROVIDER, PROVIDERS, get_setting
from translate_selected.logger import get_logger
from translate_selected.translators.providers import (
    DEEPL_API_URL,
    DeepLTranslator,
    GoogleTranslator,
    Translator,
    YoudaoTranslator,
)

logger = get_logger(__name__)


def resolve_provider(config: Dict[str, Any], provider_override: Optional[str] = None) -> str:
    """Return the provider id to use, falling back to Google for unknown values."""
    provider = provider_override or config.get('provider', DEFAULT_PROVIDER)
    if provider not in PROVIDERS:
        logger.warning(f"Unknown translation provider '{provider}', using {DEFAULT_PROVIDER}")
        return DEFAULT_PROVIDER
    return provider


def get_translator(config: Dict[str, Any], provider_override: Optional[str] = None,
                   transport=None) -> Translator:
    """
    Build the translator for the configured provider.

    Args:
        config: Loaded configuration
        provider_override: Optional provider id taking precedence over config
        transport: Optional httpx transport, passed to the client

    Returns:
        A translator with an async translate(text, source, target) method
    """
    provider = resolve_provider(config, provider_override)
    timeout = config.get('timeout', 30)

    if provider == 'deepl':
        return DeepLTranslator(
            api_key=get_setting(config, 'deepl.api_key', ''),
            api_url=get_setting(config, 'deepl.api_url', DEEPL_API_URL),
            timeout=timeout,
            transport=transport,
        )

    if provider == 'youdao':
        return YoudaoTranslator(
            app_key=get_setting(config, 'youdao.app_key', ''),
            app_secret=get_setting(config, 'youdao.app_secret', ''),
            timeout=timeout,
            transport=transport,
        )

    return GoogleTranslator(
        api_key=get_setting(config, 'google.api_key', ''),
        timeout=timeout,
        transport=transport,
    )
