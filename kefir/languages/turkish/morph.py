"""Turkish Inflection Engine

Rule-based generation of case forms and copula predicates, with
monadic error handling at the boundary. The rule functions raise
MorphologyError subclasses; the *_result methods turn them into Err.
"""
from dataclasses import dataclass

from kefir.core.logging import engine_logger
from kefir.core.errors import (
    AppError,
    Err,
    Ok,
    Result,
    MorphologyError,
    UnmatchedAgreement,
    UnsupportedCase,
    UnsupportedCopula,
    ensure,
    invalid_type,
    required_field,
)
from kefir.languages.types import Copula, GrammaticalCase, Number, Person
from .case import generate_case
from .predication import generate_predicate
from .subject import subject

log = engine_logger()


@dataclass(frozen=True, slots=True)
class InflectionRequest:
    """A single generation request, already parsed into enums."""
    lemma: str
    case: GrammaticalCase | None = None
    copula: Copula | None = None
    person: Person = Person.THIRD
    number: Number = Number.SINGULAR

    @property
    def is_plural(self) -> bool:
        return self.number is Number.PLURAL


class TurkishMorphologyEngine:
    """Engine for Turkish case and predicate generation."""

    __slots__ = ()

    def generate(
        self,
        lemma: str,
        case: GrammaticalCase | str | None = None,
        copula: Copula | str | None = None,
        person: Person | str | None = None,
        number: Number | str | None = None,
    ) -> list[dict]:
        """Generate an inflected form from a lemma.

        Without a copula the lemma is declined as a subject (plural suffix
        for ``number="plural"``, then the case). With a copula the optional
        case is applied first and the result is predicated, so
        ``generate("marul", case="locative", copula="perfective",
        person="first", number="plural")`` yields "maruldaydık".
        """
        request = self._parse(lemma, case, copula, person, number)

        if request.copula is None:
            form = subject(request.lemma, request.is_plural, request.case or GrammaticalCase.NOMINATIVE)
        else:
            stem = generate_case(request.lemma, request.case) if request.case else request.lemma
            form = generate_predicate(stem, request.person, request.copula, request.is_plural)

        result = {
            "form": form,
            "case": request.case.value if request.case else None,
            "copula": request.copula.value if request.copula else None,
            "person": request.person.value if request.copula else None,
            "number": request.number.value,
        }
        log.debug("form_generated", lemma=lemma, **result)
        return [result]

    def generate_case_result(
        self, lemma: str, case: GrammaticalCase | str
    ) -> Result[str, AppError]:
        """Decline with Result type for typed error handling."""
        return self._validate_lemma(lemma).and_then(
            lambda _: self._guard(lemma, lambda: generate_case(lemma, case))
        )

    def generate_predicate_result(
        self,
        lemma: str,
        person: Person | str = Person.THIRD,
        copula: Copula | str = Copula.ZERO,
        is_plural: bool = False,
    ) -> Result[str, AppError]:
        """Predicate with Result type for typed error handling."""
        return self._validate_lemma(lemma).and_then(
            lambda _: self._guard(lemma, lambda: generate_predicate(lemma, person, copula, is_plural))
        )

    def get_paradigm(self, lemma: str) -> list[dict]:
        """Get complete paradigm for a lemma: every case and every copula cell."""
        results = []

        for case in GrammaticalCase:
            for number in Number:
                results.append({
                    "form": subject(lemma, number is Number.PLURAL, case),
                    "case": case.value,
                    "number": number.value,
                    "pos": "noun",
                })

        for copula in Copula:
            for number in Number:
                for person in Person:
                    results.append({
                        "form": generate_predicate(lemma, person, copula, number is Number.PLURAL),
                        "copula": copula.value,
                        "person": person.value,
                        "number": number.value,
                        "pos": "predicate",
                    })

        log.debug("paradigm_generated", lemma=lemma, cell_count=len(results))
        return results

    def get_paradigm_result(self, lemma: str) -> Result[list[dict], AppError]:
        """Paradigm with Result type; fails on the first rejected cell."""
        return self._validate_lemma(lemma).and_then(
            lambda _: self._guard(lemma, lambda: self.get_paradigm(lemma))
        )

    def generate_form(self, lemma: str, case: str, number: str = "singular") -> str | None:
        """Generate a specific declined form, or None if the request is rejected."""
        match self.generate_result(lemma, case=case, number=number):
            case Ok(forms):
                return forms[0]["form"]
            case Err(_):
                return None

    def generate_result(self, lemma: str, **kwargs) -> Result[list[dict], AppError]:
        """generate() with Result type for typed error handling."""
        return self._validate_lemma(lemma).and_then(
            lambda _: self._guard(lemma, lambda: self.generate(lemma, **kwargs))
        )

    # === Boundary helpers ===

    def _parse(self, lemma, case, copula, person, number) -> InflectionRequest:
        """Parse loosely typed arguments into an InflectionRequest."""
        parsed_case = None
        if case is not None:
            parsed_case = GrammaticalCase.coerce(case)
            if parsed_case is None:
                raise UnsupportedCase(case, GrammaticalCase.values())

        parsed_copula = None
        if copula is not None:
            parsed_copula = Copula.coerce(copula)
            if parsed_copula is None:
                raise UnsupportedCopula(copula, Copula.values())

        parsed_person = Person.THIRD if person is None else Person.coerce(person)
        parsed_number = Number.SINGULAR if number is None else Number.coerce(number)
        if parsed_person is None or parsed_number is None:
            raise UnmatchedAgreement(person, number)

        return InflectionRequest(
            lemma=lemma,
            case=parsed_case,
            copula=parsed_copula,
            person=parsed_person,
            number=parsed_number,
        )

    @staticmethod
    def _validate_lemma(lemma: object) -> Result[None, AppError]:
        if not isinstance(lemma, str):
            return invalid_type("lemma", "a string", lemma, origin="turkish_engine")
        return ensure(bool(lemma.strip()), required_field("lemma", origin="turkish_engine").error)

    @staticmethod
    def _guard(lemma: str, produce) -> Result:
        try:
            return Ok(produce())
        except MorphologyError as e:
            log.warning(
                "generation_rejected",
                lemma=lemma,
                error_code=e.error.code.name,
                message=e.error.message,
            )
            return Err(e.error)
