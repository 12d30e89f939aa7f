# tests/test_engine.py
"""
TurkishMorphologyEngine: dict-shaped generation, paradigms and the Result API.
"""
import pytest

from kefir import UnsupportedCase, UnsupportedCopula, UnmatchedAgreement
from kefir.core.errors import Err, ErrorCode, Ok
from kefir.languages import Copula, GrammaticalCase, Number, Person


class TestGenerate:
    def test_declension_only(self, engine):
        forms = engine.generate("ada", case="ablative", number="plural")
        assert forms == [{
            "form": "adalardan",
            "case": "ablative",
            "copula": None,
            "person": None,
            "number": "plural",
        }]

    def test_case_then_copula(self, engine):
        [form] = engine.generate("marul", case="locative", copula="perfective", person="first", number="plural")
        assert form["form"] == "maruldaydık"
        assert form["copula"] == "perfective"
        assert form["person"] == "first"

    def test_copula_without_case(self, engine):
        [form] = engine.generate("git", copula=Copula.IMPOTENTIAL, person=Person.SECOND)
        assert form["form"] == "gidemezsin"
        assert form["case"] is None
        assert form["number"] == "singular"

    def test_bare_lemma_is_nominative(self, engine):
        assert engine.generate("ev")[0]["form"] == "ev"

    @pytest.mark.parametrize("kwargs, error", [
        ({"case": "vocative"}, UnsupportedCase),
        ({"copula": "optative"}, UnsupportedCopula),
        ({"copula": "personal", "person": "fourth"}, UnmatchedAgreement),
        ({"number": "dual"}, UnmatchedAgreement),
    ])
    def test_rejects_unknown_categories(self, engine, kwargs, error):
        with pytest.raises(error):
            engine.generate("ev", **kwargs)

    def test_logs_generated_form(self, engine, captured_logs):
        engine.generate("kitap", case="dative")
        events = [e for e in captured_logs if e["event"] == "form_generated"]
        assert events and events[0]["form"] == "kitaba"
        assert events[0]["log_level"] == "debug"


class TestResultAPI:
    def test_case_ok(self, engine):
        assert engine.generate_case_result("kitap", "dative") == Ok("kitaba")

    def test_predicate_ok(self, engine):
        result = engine.generate_predicate_result("yolcu", "third", "tobe")
        assert result.is_ok()
        assert result.unwrap() == "yolcudur"

    def test_missing_vowel_is_err(self, engine):
        result = engine.generate_case_result("krt", "dative")
        assert isinstance(result, Err)
        assert result.error.code is ErrorCode.E7001_MISSING_VOWEL_SOUND
        assert result.error.metadata["stem"] == "krt"

    def test_unknown_case_is_err(self, engine):
        result = engine.generate_case_result("ev", "vocative")
        assert result.unwrap_err().code is ErrorCode.E7002_UNSUPPORTED_CASE
        assert result.unwrap_or("fallback") == "fallback"

    def test_bad_agreement_is_err(self, engine):
        result = engine.generate_predicate_result("oralı", "second", "personal", is_plural="yes")
        assert result.is_err()
        assert result.error.code is ErrorCode.E7004_UNMATCHED_AGREEMENT

    @pytest.mark.parametrize("lemma, code", [
        ("", ErrorCode.E2001_REQUIRED_FIELD_MISSING),
        ("   ", ErrorCode.E2001_REQUIRED_FIELD_MISSING),
        (42, ErrorCode.E2004_INVALID_TYPE),
        (None, ErrorCode.E2004_INVALID_TYPE),
    ])
    def test_lemma_validation(self, engine, lemma, code):
        result = engine.generate_case_result(lemma, "dative")
        assert result.is_err()
        assert result.error.code is code
        assert result.error.code.category == "validation"

    def test_generate_result_wraps_generate(self, engine):
        result = engine.generate_result("ev", case="locative", number="plural")
        assert result.map(lambda forms: forms[0]["form"]) == Ok("evlerde")

    def test_rejection_is_logged(self, engine, captured_logs):
        engine.generate_result("ev", copula="optative")
        [event] = [e for e in captured_logs if e["event"] == "generation_rejected"]
        assert event["log_level"] == "warning"
        assert event["error_code"] == "E7003_UNSUPPORTED_COPULA"

    def test_match_forces_both_branches(self, engine):
        describe = lambda r: r.match(ok=lambda form: f"ok:{form}", err=lambda e: f"err:{e.code.value}")
        assert describe(engine.generate_case_result("ev", "dative")) == "ok:eve"
        assert describe(engine.generate_case_result("krt", "dative")) == "err:7001"


class TestParadigm:
    def test_cell_count(self, engine):
        paradigm = engine.get_paradigm("ev")
        nouns = [cell for cell in paradigm if cell["pos"] == "noun"]
        predicates = [cell for cell in paradigm if cell["pos"] == "predicate"]
        assert len(nouns) == len(GrammaticalCase) * len(Number)
        assert len(predicates) == len(Copula) * len(Person) * len(Number)

    def test_contains_expected_cells(self, engine):
        paradigm = engine.get_paradigm("ev")
        assert {"form": "evlerden", "case": "ablative", "number": "plural", "pos": "noun"} in paradigm
        assert {
            "form": "evdir",
            "copula": "tobe",
            "person": "third",
            "number": "singular",
            "pos": "predicate",
        } in paradigm

    def test_result_ok(self, engine):
        result = engine.get_paradigm_result("kalem")
        assert result.is_ok()
        assert len(result.unwrap()) == 84

    def test_result_err_for_vowelless_lemma(self, engine):
        result = engine.get_paradigm_result("krt")
        assert result.error.code is ErrorCode.E7001_MISSING_VOWEL_SOUND


class TestGenerateForm:
    @pytest.mark.parametrize("lemma, case, number, expected", [
        ("kitap", "dative", "singular", "kitaba"),
        ("kitap", "genitive", "plural", "kitapların"),
        ("ağaç", "locative", "singular", "ağaçta"),
    ])
    def test_forms(self, engine, lemma, case, number, expected):
        assert engine.generate_form(lemma, case, number) == expected

    def test_rejected_request_returns_none(self, engine):
        assert engine.generate_form("kitap", "vocative") is None
        assert engine.generate_form("", "dative") is None
