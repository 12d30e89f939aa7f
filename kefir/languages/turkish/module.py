"""Turkish language module implementation."""
from kefir.languages.base import LanguageModule, GrammarConfig
from kefir.languages.types import Copula, GrammaticalCase
from .morph import TurkishMorphologyEngine
from .grammar import TURKISH_GRAMMAR_CONFIG


class TurkishModule(LanguageModule):
    """Turkish language module with rule-based declension and predication."""

    __slots__ = ("_morph",)

    def __init__(self):
        self._morph: TurkishMorphologyEngine | None = None

    @property
    def code(self) -> str:
        return "tr"

    @property
    def name(self) -> str:
        return "Turkish"

    @property
    def native_name(self) -> str:
        return "Türkçe"

    def get_grammar_config(self) -> GrammarConfig:
        return TURKISH_GRAMMAR_CONFIG

    def get_morphology_engine(self) -> TurkishMorphologyEngine:
        """Get the morphology engine (lazy-loaded)."""
        if self._morph is None:
            self._morph = TurkishMorphologyEngine()
        return self._morph

    def generate_form(self, lemma: str, case: str, number: str = "singular") -> str | None:
        """Generate inflected form using morphology engine."""
        return self.get_morphology_engine().generate_form(lemma, case, number)

    def get_cases(self) -> list[str]:
        """Get ordered list of grammatical cases."""
        return GrammaticalCase.values()

    def get_copulas(self) -> list[str]:
        return Copula.values()
