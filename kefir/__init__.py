"""kefir: Turkish inflection generator.

    >>> from kefir import generate_case, generate_predicate, sentence
    >>> sentence("aynı", generate_predicate(generate_case("marul", "locative"), "first", "perfective", True))
    'aynı maruldaydık'
"""
from kefir.core.errors import (
    MorphologyError,
    MissingVowelSound,
    UnsupportedCase,
    UnsupportedCopula,
    UnmatchedAgreement,
    UnsupportedLanguage,
)
from kefir.languages.types import Copula, GrammaticalCase, Number, Person
from kefir.languages.turkish.phonology import devoice, swap_harmony, voice
from kefir.languages.turkish.case import generate_case
from kefir.languages.turkish.predication import generate_predicate, predicate
from kefir.languages.turkish.subject import subject
from kefir.sentence import sentence

__version__ = "0.1.0"

__all__ = [
    "generate_case",
    "generate_predicate",
    "predicate",
    "subject",
    "sentence",
    "swap_harmony",
    "voice",
    "devoice",
    "GrammaticalCase",
    "Copula",
    "Person",
    "Number",
    "MorphologyError",
    "MissingVowelSound",
    "UnsupportedCase",
    "UnsupportedCopula",
    "UnmatchedAgreement",
    "UnsupportedLanguage",
]
