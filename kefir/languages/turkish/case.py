"""Turkish grammatical cases.

Six of the Turkish cases are generated:

    nominative  (yalın)      ev       kitap
    genitive    (ilgi)       evin     kitabın
    dative      (yönelme)    eve      kitaba
    accusative  (belirtme)   evi      kitabı
    ablative    (ayrılma)    evden    kitaptan
    locative    (bulunma)    evde     kitapta

See https://en.wikibooks.org/wiki/Turkish/Cases
"""
from kefir.core.errors import UnsupportedCase
from kefir.languages.types import GrammaticalCase

from .phonology import voice
from .suffix import Suffix, SuffixToken, attach


def nominative(stem: str) -> str:
    """The naming case carries no suffix."""
    return stem


def genitive(stem: str) -> str:
    """Possessor marking: kadın -> kadının, hanımeli -> hanımelinin."""
    return attach(
        voice(stem),
        SuffixToken.BUFFER_N,
        SuffixToken.HIGH_VOWEL,
        Suffix.N,
        reference=stem,
    )


def dative(stem: str) -> str:
    """Direction/indirect object: yakup -> yakuba, elma -> elmaya."""
    return attach(
        voice(stem),
        SuffixToken.BUFFER_Y,
        SuffixToken.LOW_VOWEL,
        reference=stem,
    )


def accusative(stem: str) -> str:
    """Definite direct object: aday -> adayı, üzüm -> üzümü, elma -> elmayı."""
    return attach(
        voice(stem),
        SuffixToken.BUFFER_Y,
        SuffixToken.HIGH_VOWEL,
        reference=stem,
    )


def ablative(stem: str) -> str:
    """Motion away: adalar -> adalardan, teyit -> teyitten."""
    return attach(stem, SuffixToken.DENTAL, SuffixToken.LOW_VOWEL, Suffix.N)


def locative(stem: str) -> str:
    """Location, never voiced: bahçe -> bahçede, kalem -> kalemde, sepet -> sepette."""
    return attach(stem, SuffixToken.LOCATIVE, SuffixToken.LOW_VOWEL)


def generate_case(stem: str, grammatical_case: GrammaticalCase | str = GrammaticalCase.NOMINATIVE) -> str:
    """Inflect ``stem`` for ``grammatical_case``.

    Raises:
        UnsupportedCase: ``grammatical_case`` is not one of GrammaticalCase.
        MissingVowelSound: the rule needs harmony and ``stem`` has no vowel.
    """
    match GrammaticalCase.coerce(grammatical_case):
        case GrammaticalCase.NOMINATIVE:
            return nominative(stem)
        case GrammaticalCase.GENITIVE:
            return genitive(stem)
        case GrammaticalCase.DATIVE:
            return dative(stem)
        case GrammaticalCase.ACCUSATIVE:
            return accusative(stem)
        case GrammaticalCase.ABLATIVE:
            return ablative(stem)
        case GrammaticalCase.LOCATIVE:
            return locative(stem)
        case _:
            raise UnsupportedCase(grammatical_case, GrammaticalCase.values())
