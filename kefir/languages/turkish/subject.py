"""Subjects: an optional plural suffix followed by a case ending."""
from kefir.languages.types import GrammaticalCase

from .case import generate_case
from .suffix import SuffixToken, attach


def subject(
    stem: str,
    is_plural: bool = False,
    grammatical_case: GrammaticalCase | str = GrammaticalCase.NOMINATIVE,
) -> str:
    """Build a noun phrase head: subject("ada", True, "ablative") == "adalardan"."""
    if is_plural:
        stem = attach(stem, SuffixToken.PLURAL)
    return generate_case(stem, grammatical_case)
