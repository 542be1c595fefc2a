import json

import pytest

from chargehub.i18n.language_store import LanguageStore


def test_defaults_to_english_without_file(tmp_path):
    store = LanguageStore(tmp_path / "language.json")

    assert store.language == "en"
    assert store.is_rtl is False


def test_change_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "language.json"
    LanguageStore(path).change_language("fa")

    reloaded = LanguageStore(path)

    assert reloaded.language == "fa"
    assert reloaded.is_rtl is True
    assert json.loads(path.read_text(encoding="utf-8")) == {"language": "fa"}


def test_unsupported_language_rejected(tmp_path):
    store = LanguageStore(tmp_path / "language.json")

    with pytest.raises(ValueError):
        store.change_language("de")

    assert store.language == "en"
    assert not (tmp_path / "language.json").exists()


@pytest.mark.parametrize("content", ["not json", "[]", '{"language": "de"}'])
def test_bad_saved_value_falls_back_to_default(tmp_path, content):
    path = tmp_path / "language.json"
    path.write_text(content, encoding="utf-8")

    assert LanguageStore(path, default="fa").language == "fa"


def test_unsupported_default_rejected(tmp_path):
    with pytest.raises(ValueError):
        LanguageStore(tmp_path / "language.json", default="de")
