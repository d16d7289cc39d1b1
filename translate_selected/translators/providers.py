"""
Translator Provider Implementations

This module contains the API clients for each translation provider:
- Google Cloud Translation (v2 REST)
- DeepL (REST, uppercase/region language codes)
- Youdao (signed form request, signType v3)

Every client exposes the same coroutine, translate(text, source, target),
and checks its own credentials when called rather than when constructed.
"""

import hashlib
import time
from typing import Any, Dict, Optional, Protocol

import httpx

from translate_selected import language_codes as lc
from translate_selected.logger import get_logger
from translate_selected.translators.exceptions import ConfigurationError, ProviderError

logger = get_logger(__name__)

GOOGLE_API_URL = "https://translation.googleapis.com/language/translate/v2"
DEEPL_API_URL = "https://api-free.deepl.com/v2/translate"
YOUDAO_API_URL = "https://openapi.youdao.com/api"


class Translator(Protocol):
    """Anything that can translate one piece of text."""

    async def translate(self, text: str, source: str, target: str) -> str:
        ...


def get_httpx_timeout(timeout_config: Any) -> httpx.Timeout:
    """
    Convert timeout configuration to httpx.Timeout object.

    Args:
        timeout_config: Either a number (read timeout) or a dict with
            connect, write, read, pool keys

    Returns:
        httpx.Timeout object
    """
    if isinstance(timeout_config, dict):
        return httpx.Timeout(
            connect=timeout_config.get('connect', 10.0),
            write=timeout_config.get('write', 10.0),
            read=timeout_config.get('read', 30.0),
            pool=timeout_config.get('pool', 10.0),
        )
    timeout_value = float(timeout_config) if timeout_config else 30.0
    return httpx.Timeout(
        connect=10.0,
        write=10.0,
        read=timeout_value,
        pool=10.0,
    )


def handle_http_error(e: httpx.HTTPStatusError, provider: str):
    """Raise a ProviderError carrying the provider's own error message."""
    status_code = e.response.status_code
    error_text = "Unknown error"

    try:
        error_json = e.response.json()
        if isinstance(error_json, dict) and "error" in error_json:
            error_detail = error_json["error"]
            if isinstance(error_detail, dict):
                error_text = error_detail.get("message", str(error_detail))
            else:
                error_text = str(error_detail)
        elif isinstance(error_json, dict) and "message" in error_json:
            # DeepL puts the reason at the top level
            error_text = str(error_json["message"])
    except ValueError:
        error_text = e.response.text[:500] or "No details"

    raise ProviderError(
        f"{provider} API error ({status_code}): {error_text}",
        code="http_error",
        details={"provider": provider, "status_code": status_code},
    )


async def _post(provider: str, timeout: Any, transport: Optional[httpx.AsyncBaseTransport],
                url: str, **kwargs) -> Dict[str, Any]:
    """POST and decode the JSON body, mapping transport failures to ProviderError."""
    try:
        async with httpx.AsyncClient(timeout=get_httpx_timeout(timeout), transport=transport) as client:
            response = await client.post(url, **kwargs)
            response.raise_for_status()
            result = response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"{provider} API HTTP error: {e.response.status_code} - {e.response.text[:500]}")
        handle_http_error(e, provider)
    except httpx.TimeoutException:
        raise ProviderError(f"{provider} API request timeout", code="timeout",
                            details={"provider": provider})
    except httpx.HTTPError as e:
        raise ProviderError(f"{provider} API call failed: {e}", code="network_error",
                            details={"provider": provider})
    except ValueError as e:
        raise ProviderError(f"{provider} API returned invalid JSON: {e}",
                            details={"provider": provider})

    if not isinstance(result, dict):
        raise ProviderError(f"Unexpected {provider} API response format: {result!r}",
                            details={"provider": provider})
    return result


class GoogleTranslator:
    """Google Cloud Translation v2."""

    name = "google"

    def __init__(self, api_key: str, timeout: Any = 30,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    async def translate(self, text: str, source: str, target: str) -> str:
        if not self.api_key:
            raise ConfigurationError("Google API key is not configured.",
                                     details={"provider": self.name, "missing_field": "google.api_key"})

        params = {
            "q": text,
            "target": target,
            "key": self.api_key,
        }
        if not lc.is_auto(source):
            params["source"] = source

        logger.debug(f"Calling Google API: {source} -> {target}")
        result = await _post("Google", self.timeout, self._transport, GOOGLE_API_URL, params=params)

        translations = (result.get("data") or {}).get("translations") or []
        translated = translations[0].get("translatedText") if translations else None
        if not translated:
            raise ProviderError("Google translation failed.", code="empty_result",
                                details={"provider": self.name})
        return translated


class DeepLTranslator:
    """DeepL REST API; language codes are remapped to DeepL's uppercase form."""

    name = "deepl"

    def __init__(self, api_key: str, api_url: str = DEEPL_API_URL, timeout: Any = 30,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.api_url = api_url or DEEPL_API_URL
        self.timeout = timeout
        self._transport = transport

    async def translate(self, text: str, source: str, target: str) -> str:
        if not self.api_key:
            raise ConfigurationError("DeepL API key is not configured.",
                                     details={"provider": self.name, "missing_field": "deepl.api_key"})

        body: Dict[str, Any] = {
            "text": [text],
            "target_lang": lc.to_deepl_code(target),
        }
        if not lc.is_auto(source):
            body["source_lang"] = lc.to_deepl_code(source)

        headers = {
            "Authorization": f"DeepL-Auth-Key {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.debug(f"Calling DeepL API: {body.get('source_lang', 'auto')} -> {body['target_lang']}")
        result = await _post("DeepL", self.timeout, self._transport, self.api_url,
                             headers=headers, json=body)

        translations = result.get("translations") or []
        translated = translations[0].get("text") if translations else None
        if not translated:
            raise ProviderError("DeepL translation failed.", code="empty_result",
                                details={"provider": self.name})
        return translated


def truncate_input(text: str) -> str:
    """
    Shorten text the way Youdao's v3 signature expects.

    Examples:
        >>> truncate_input("short")
        'short'
        >>> truncate_input("abcdefghijKLMNOpqrstuvwxy")
        'abcdefghij25pqrstuvwxy'
    """
    if len(text) <= 20:
        return text
    return f"{text[:10]}{len(text)}{text[-10:]}"


def youdao_sign(app_key: str, text: str, salt: str, curtime: str, app_secret: str) -> str:
    """SHA-256 hex digest over appKey + truncate(q) + salt + curtime + appSecret."""
    sign_str = app_key + truncate_input(text) + salt + curtime + app_secret
    return hashlib.sha256(sign_str.encode("utf-8")).hexdigest()


class YoudaoTranslator:
    """Youdao open API with v3 request signing."""

    name = "youdao"

    def __init__(self, app_key: str, app_secret: str, timeout: Any = 30,
                 transport: Optional[httpx.AsyncBaseTransport] = None, clock=time.time):
        self.app_key = app_key
        self.app_secret = app_secret
        self.timeout = timeout
        self._transport = transport
        self._clock = clock

    async def translate(self, text: str, source: str, target: str) -> str:
        if not self.app_key or not self.app_secret:
            raise ConfigurationError("Youdao appKey/appSecret are not configured.",
                                     details={"provider": self.name,
                                              "missing_field": "youdao.app_key/youdao.app_secret"})

        now = self._clock()
        salt = str(int(now * 1000))
        curtime = str(int(now))

        form = {
            "q": text,
            "from": lc.AUTO if lc.is_auto(source) else lc.to_youdao_code(source),
            "to": lc.to_youdao_code(target),
            "appKey": self.app_key,
            "salt": salt,
            "sign": youdao_sign(self.app_key, text, salt, curtime, self.app_secret),
            "signType": "v3",
            "curtime": curtime,
        }

        logger.debug(f"Calling Youdao API: {form['from']} -> {form['to']}")
        result = await _post("Youdao", self.timeout, self._transport, YOUDAO_API_URL, data=form)

        translations = result.get("translation") or []
        translated = translations[0] if translations else None
        if not translated:
            error_code = result.get("errorCode") or "unknown"
            raise ProviderError(f"Youdao translation failed (errorCode={error_code}).",
                                details={"provider": self.name, "error_code": error_code})
        return translated
