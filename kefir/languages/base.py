"""Abstract base class for language modules."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class CaseConfig:
    """Configuration for a grammatical case."""
    id: str
    label: str
    hint: str
    example: str


@dataclass(frozen=True, slots=True)
class PersonConfig:
    id: str
    label: str


@dataclass(frozen=True, slots=True)
class NumberConfig:
    """Configuration for grammatical number."""
    id: str
    label: str


@dataclass(frozen=True, slots=True)
class CopulaConfig:
    """Configuration for a copula or aspect suffix."""
    id: str
    label: str
    example: str


@dataclass(slots=True)
class GrammarConfig:
    """Language grammar configuration for callers building inflection tables."""
    cases: list[CaseConfig] = field(default_factory=list)
    persons: list[PersonConfig] = field(default_factory=list)
    numbers: list[NumberConfig] = field(default_factory=list)
    copulas: list[CopulaConfig] = field(default_factory=list)
    has_declension: bool = False
    has_predication: bool = False

    def to_dict(self) -> dict:
        return {
            "cases": [
                {"id": c.id, "label": c.label, "hint": c.hint, "example": c.example}
                for c in self.cases
            ],
            "persons": [{"id": p.id, "label": p.label} for p in self.persons],
            "numbers": [{"id": n.id, "label": n.label} for n in self.numbers],
            "copulas": [
                {"id": c.id, "label": c.label, "example": c.example}
                for c in self.copulas
            ],
            "hasDeclension": self.has_declension,
            "hasPredication": self.has_predication,
        }


class MorphologyEngine(Protocol):
    """Protocol for morphology engines."""
    def generate(self, lemma: str, **kwargs) -> list[dict]: ...
    def get_paradigm(self, lemma: str) -> list[dict]: ...


class LanguageModule(ABC):
    """Abstract base for language-specific functionality."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639-1 language code (e.g., 'tr')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_grammar_config(self) -> GrammarConfig:
        ...

    @abstractmethod
    def get_morphology_engine(self) -> MorphologyEngine | None:
        """Get the morphology engine for this language."""
        ...

    def get_cases(self) -> list[str]:
        """Get ordered list of grammatical case ids."""
        return [c.id for c in self.get_grammar_config().cases]

    def generate_form(self, lemma: str, case: str, number: str = "singular") -> str | None:
        """Generate inflected form. Override if language has morphology."""
        return None
