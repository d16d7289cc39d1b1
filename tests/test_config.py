import json

from translate_selected import config
from translate_selected.editor import MemoryDocument, Position, Range, Selection
from translate_selected.language_codes import get_language_name, is_valid_language_code


def test_missing_file_yields_defaults(config_file):
    assert not config_file.exists()
    loaded = config.load_config()
    assert loaded == config.DEFAULT_CONFIG
    assert loaded is not config.DEFAULT_CONFIG


def test_file_is_merged_over_defaults(write_config, config_file):
    config_file.write_text(json.dumps({"provider": "deepl", "deepl": {"api_key": "k"}}), encoding="utf-8")

    loaded = config.load_config()

    assert loaded["provider"] == "deepl"
    assert loaded["deepl"]["api_key"] == "k"
    assert loaded["deepl"]["api_url"] == "https://api-free.deepl.com/v2/translate"
    assert loaded["overlay"]["timeout_ms"] == 8000


def test_corrupt_file_falls_back_to_defaults(config_file):
    config_file.write_text("{not json", encoding="utf-8")
    assert config.load_config() == config.DEFAULT_CONFIG


def test_save_and_initialize(config_file):
    config.initialize_app()
    assert json.loads(config_file.read_text(encoding="utf-8")) == config.DEFAULT_CONFIG

    updated = config.load_config()
    updated["target_language"] = "ja"
    config.save_config(updated)
    assert config.load_config()["target_language"] == "ja"


def test_get_setting():
    data = {"youdao": {"app_key": "a"}}
    assert config.get_setting(data, "youdao.app_key") == "a"
    assert config.get_setting(data, "youdao.app_secret", "") == ""
    assert config.get_setting(data, "youdao.app_key.deeper", 1) == 1


def test_language_codes():
    assert is_valid_language_code("zh-cn")
    assert is_valid_language_code("auto", allow_auto=True)
    assert not is_valid_language_code("auto")
    assert get_language_name("pt-br") == "Portuguese (Brazil)"
    assert is_valid_language_code("hr")
    assert get_language_name("hr") == "Croatian"
    assert is_valid_language_code("sr-Latn")
    assert is_valid_language_code("AUTO", allow_auto=True)
    assert not is_valid_language_code("klingon")
    assert not is_valid_language_code("en_US")


def test_memory_document_text_ranges():
    document = MemoryDocument("first\r\nsecond\nthird")
    assert document.line_count == 3
    assert document.get_text(Range(Position(0, 2), Position(1, 3))) == "rst\nsec"

    document.replace(Range(Position(1, 0), Position(1, 6)), "2nd")
    assert document.line_at(1) == "2nd"


def test_selection_normalises_direction():
    selection = Selection(Position(3, 1), Position(1, 4))
    assert selection.start == Position(1, 4)
    assert selection.end == Position(3, 1)
    assert not selection.is_empty
