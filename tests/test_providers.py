import hashlib
import json
from urllib.parse import parse_qs

import httpx
import pytest

from translate_selected.config import DEFAULT_CONFIG
from translate_selected.language_codes import to_deepl_code, to_youdao_code
from translate_selected.translators import (
    ConfigurationError,
    DeepLTranslator,
    GoogleTranslator,
    ProviderError,
    YoudaoTranslator,
    get_translator,
    truncate_input,
    youdao_sign,
)


def recording_transport(payload, status_code=200):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler), requests


@pytest.mark.asyncio
async def test_google_request_and_result():
    transport, requests = recording_transport(
        {"data": {"translations": [{"translatedText": "Bonjour"}]}}
    )
    translator = GoogleTranslator("gkey", transport=transport)

    assert await translator.translate("Hello", "en", "fr") == "Bonjour"

    params = requests[0].url.params
    assert requests[0].method == "POST"
    assert requests[0].url.host == "translation.googleapis.com"
    assert params["q"] == "Hello"
    assert params["target"] == "fr"
    assert params["key"] == "gkey"
    assert params["source"] == "en"


@pytest.mark.asyncio
async def test_google_auto_source_is_omitted():
    transport, requests = recording_transport(
        {"data": {"translations": [{"translatedText": "x"}]}}
    )
    await GoogleTranslator("gkey", transport=transport).translate("y", "auto", "de")
    assert "source" not in requests[0].url.params


@pytest.mark.asyncio
async def test_google_empty_result_is_an_error():
    transport, _ = recording_transport({"data": {"translations": []}})
    with pytest.raises(ProviderError) as exc_info:
        await GoogleTranslator("gkey", transport=transport).translate("y", "auto", "de")
    assert exc_info.value.code == "empty_result"


@pytest.mark.asyncio
async def test_missing_credentials_fail_at_call_time():
    transport, requests = recording_transport({})
    translators = [
        GoogleTranslator("", transport=transport),
        DeepLTranslator("", transport=transport),
        YoudaoTranslator("key", "", transport=transport),
    ]
    for translator in translators:
        with pytest.raises(ConfigurationError):
            await translator.translate("text", "auto", "en")
    assert requests == []


@pytest.mark.asyncio
async def test_deepl_request_and_result():
    transport, requests = recording_transport({"translations": [{"text": "你好"}]})
    translator = DeepLTranslator("dkey", "https://api.deepl.com/v2/translate", transport=transport)

    assert await translator.translate("Hello", "en-GB", "zh-CN") == "你好"

    request = requests[0]
    assert str(request.url) == "https://api.deepl.com/v2/translate"
    assert request.headers["Authorization"] == "DeepL-Auth-Key dkey"
    assert json.loads(request.content) == {
        "text": ["Hello"],
        "target_lang": "ZH-HANS",
        "source_lang": "EN-GB",
    }


@pytest.mark.asyncio
async def test_deepl_http_error_carries_message():
    transport, _ = recording_transport({"message": "Quota exceeded"}, status_code=456)
    with pytest.raises(ProviderError) as exc_info:
        await DeepLTranslator("dkey", transport=transport).translate("Hello", "auto", "de")
    assert "456" in str(exc_info.value)
    assert "Quota exceeded" in str(exc_info.value)
    assert exc_info.value.code == "http_error"


@pytest.mark.asyncio
async def test_network_failure_becomes_provider_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    translator = GoogleTranslator("gkey", transport=httpx.MockTransport(handler))
    with pytest.raises(ProviderError) as exc_info:
        await translator.translate("Hello", "auto", "de")
    assert exc_info.value.code == "network_error"


@pytest.mark.parametrize("code,expected", [
    ("zh-CN", "ZH-HANS"),
    ("zh-tw", "ZH-HANT"),
    ("en", "EN"),
    ("en-US", "EN-US"),
    ("pt", "PT-PT"),
    ("pt-BR", "PT-BR"),
    ("nb", "NB"),
    ("de", "DE"),
    ("fr-CA", "FR"),
])
def test_deepl_codes(code, expected):
    assert to_deepl_code(code) == expected


@pytest.mark.parametrize("code,expected", [
    ("zh-CN", "zh-CHS"),
    ("zh-TW", "zh-CHT"),
    ("pt-BR", "pt"),
    ("JA", "ja"),
    ("en", "en"),
])
def test_youdao_codes(code, expected):
    assert to_youdao_code(code) == expected


def test_truncate_input():
    text = "abcdefghij" + "MIDDL" + "klmnopqrst"
    assert len(text) == 25
    assert truncate_input(text) == "abcdefghij25klmnopqrst"
    assert truncate_input("x" * 20) == "x" * 20


def test_youdao_sign_uses_truncated_input():
    text = "abcdefghij" + "MIDDL" + "klmnopqrst"
    expected = hashlib.sha256(
        ("app" + "abcdefghij25klmnopqrst" + "1700000000123" + "1700000000" + "secret").encode()
    ).hexdigest()
    assert youdao_sign("app", text, "1700000000123", "1700000000", "secret") == expected


@pytest.mark.asyncio
async def test_youdao_request_and_result():
    transport, requests = recording_transport({"errorCode": "0", "translation": ["你好"]})
    translator = YoudaoTranslator("app", "secret", transport=transport, clock=lambda: 1700000000.5)

    assert await translator.translate("Hello", "auto", "zh-CN") == "你好"

    form = {k: v[0] for k, v in parse_qs(requests[0].content.decode()).items()}
    assert requests[0].headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert form["q"] == "Hello"
    assert form["from"] == "auto"
    assert form["to"] == "zh-CHS"
    assert form["appKey"] == "app"
    assert form["salt"] == "1700000000500"
    assert form["curtime"] == "1700000000"
    assert form["signType"] == "v3"
    assert form["sign"] == youdao_sign("app", "Hello", "1700000000500", "1700000000", "secret")


@pytest.mark.asyncio
async def test_youdao_error_code_is_reported():
    transport, _ = recording_transport({"errorCode": "108"})
    translator = YoudaoTranslator("app", "secret", transport=transport)
    with pytest.raises(ProviderError) as exc_info:
        await translator.translate("Hello", "en", "ja")
    assert "errorCode=108" in str(exc_info.value)
    assert exc_info.value.details["error_code"] == "108"


def test_factory_selects_provider():
    config = json.loads(json.dumps(DEFAULT_CONFIG))
    config["deepl"]["api_key"] = "dkey"
    config["youdao"].update(app_key="a", app_secret="s")

    assert isinstance(get_translator(config), GoogleTranslator)
    assert isinstance(get_translator(config, "deepl"), DeepLTranslator)
    assert isinstance(get_translator({**config, "provider": "youdao"}), YoudaoTranslator)
    assert isinstance(get_translator({**config, "provider": "bing"}), GoogleTranslator)
    assert get_translator(config, "deepl").api_url == "https://api-free.deepl.com/v2/translate"
