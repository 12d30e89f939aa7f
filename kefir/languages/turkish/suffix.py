"""Suffix templates shared by the case and predication rules.

Literal pieces live on ``Suffix``. Pieces that depend on the word they attach
to are ``SuffixToken`` placeholders, resolved against a reference text by
``resolve`` when a form is assembled with ``attach``.
"""
from enum import Enum, auto

from .phonology import (
    ends_with_consonant,
    ends_with_softening,
    ends_with_voiceless,
    harmonized_high_vowel,
    harmonized_low_vowel,
    harmony_direction,
    last_vowel_class,
    Harmony,
)


class Suffix:
    """Closed set of literal suffix pieces."""
    N = "n"
    Y = "y"
    D = "d"
    T = "t"
    S = "s"
    R = "r"
    M = "m"
    K = "k"
    Z = "z"
    LER = "ler"
    LAR = "lar"
    SE = "se"
    SA = "sa"

    NEGATIVE = "değil"
    DELIMITER = " "
    IMPERFECT = "yor"

    # Front-harmony literals; back forms come from swap_harmony
    FUTURE = "ecek"
    PROGRESSIVE = "mekte"
    NECESSITY = "meli"
    IMPOTENTIAL = "eme"


class SuffixToken(Enum):
    HIGH_VOWEL = auto()          # ı i u ü
    LOW_VOWEL = auto()           # a e
    PLURAL = auto()              # lar ler
    BUFFER_Y = auto()            # y after a vowel
    BUFFER_N = auto()            # n after a vowel
    DENTAL = auto()              # t after a voiceless consonant, else d
    LOCATIVE = auto()            # t after p ç t k, else d


def resolve(token: SuffixToken, reference: str) -> str:
    """Turn ``token`` into literal text agreeing with ``reference``."""
    match token:
        case SuffixToken.HIGH_VOWEL:
            return harmonized_high_vowel(last_vowel_class(reference))
        case SuffixToken.LOW_VOWEL:
            return harmonized_low_vowel(harmony_direction(reference))
        case SuffixToken.PLURAL:
            return Suffix.LER if harmony_direction(reference) is Harmony.FRONT else Suffix.LAR
        case SuffixToken.BUFFER_Y:
            return "" if ends_with_consonant(reference) else Suffix.Y
        case SuffixToken.BUFFER_N:
            return "" if ends_with_consonant(reference) else Suffix.N
        case SuffixToken.DENTAL:
            return Suffix.T if ends_with_voiceless(reference) else Suffix.D
        case SuffixToken.LOCATIVE:
            return Suffix.T if ends_with_softening(reference) else Suffix.D
    raise TypeError(f"Not a suffix token: {token!r}")


def attach(head: str, *parts: str | SuffixToken | None, reference: str | None = None) -> str:
    """Append ``parts`` to ``head``, resolving tokens against ``reference``.

    ``reference`` defaults to ``head``. Empty and None parts are skipped.
    """
    reference = head if reference is None else reference
    pieces = [head]
    for part in parts:
        if isinstance(part, SuffixToken):
            part = resolve(part, reference)
        if part:
            pieces.append(part)
    return "".join(pieces)
