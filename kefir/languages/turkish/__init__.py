"""Turkish language support: phonology, declension and copula predication."""
from .module import TurkishModule
from .morph import TurkishMorphologyEngine, InflectionRequest
from .case import generate_case
from .predication import generate_predicate, predicate
from .subject import subject

__all__ = [
    "TurkishModule",
    "TurkishMorphologyEngine",
    "InflectionRequest",
    "generate_case",
    "generate_predicate",
    "predicate",
    "subject",
]
