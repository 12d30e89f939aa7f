# tests/test_registry.py
"""
Language registry and the Turkish language module.
"""
import pytest

from kefir import UnsupportedLanguage, generate_case
from kefir.core.errors import ErrorCode
from kefir.languages import LanguageModule, get_module, list_languages, register
from kefir.languages.base import GrammarConfig
from kefir.languages.registry import _MODULES
from kefir.languages.turkish import TurkishModule, TurkishMorphologyEngine


def test_turkish_is_auto_registered():
    assert {"code": "tr", "name": "Turkish", "nativeName": "Türkçe"} in list_languages()
    assert isinstance(get_module("tr"), TurkishModule)


def test_default_language_from_settings(monkeypatch, fresh_settings):
    monkeypatch.setenv("KEFIR_DEFAULT_LANGUAGE", "tr")
    assert get_module().code == "tr"


def test_unknown_language():
    with pytest.raises(UnsupportedLanguage) as exc:
        get_module("xx")
    assert isinstance(exc.value, ValueError)
    assert exc.value.code is ErrorCode.E7010_UNSUPPORTED_LANGUAGE
    assert "Language 'xx' not registered. Available: tr" in str(exc.value)


def test_register_custom_module():
    class Dummy(LanguageModule):
        code = "xx"
        name = "Dummy"
        native_name = "Dummy"

        def get_grammar_config(self):
            return GrammarConfig()

        def get_morphology_engine(self):
            return None

    register(Dummy())
    try:
        module = get_module("xx")
        assert module.generate_form("a", "dative") is None
        assert module.get_cases() == []
    finally:
        _MODULES.pop("xx")


class TestTurkishModule:
    def test_engine_is_lazy_and_shared(self, turkish):
        engine = turkish.get_morphology_engine()
        assert isinstance(engine, TurkishMorphologyEngine)
        assert turkish.get_morphology_engine() is engine

    def test_generate_form(self, turkish):
        assert turkish.generate_form("kitap", "locative") == "kitapta"
        assert turkish.generate_form("ada", "ablative", "plural") == "adalardan"
        assert turkish.generate_form("kitap", "vocative") is None

    def test_cases_and_copulas(self, turkish):
        assert turkish.get_cases() == [
            "nominative", "genitive", "dative", "accusative", "ablative", "locative",
        ]
        assert len(turkish.get_copulas()) == 12
        assert turkish.get_copulas()[0] == "zero"

    def test_grammar_config(self, turkish):
        config = turkish.get_grammar_config().to_dict()
        assert config["hasDeclension"] and config["hasPredication"]
        assert [c["id"] for c in config["cases"]] == turkish.get_cases()
        assert config["cases"][0]["hint"].startswith("kim? ne?")
        assert [p["id"] for p in config["persons"]] == ["first", "second", "third"]
        assert [n["id"] for n in config["numbers"]] == ["singular", "plural"]
        assert [c["id"] for c in config["copulas"]] == turkish.get_copulas()

    def test_case_examples_match_generator(self, turkish):
        for case in turkish.get_grammar_config().cases:
            assert generate_case("ev", case.id) == case.example
