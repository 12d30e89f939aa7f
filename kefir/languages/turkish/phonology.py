"""Turkish phonology: vowel harmony and consonant alternations.

Vowels are classified by backness and rounding::

                 front     back
    unrounded    e  i      a  ı
    rounded      ö  ü      o  u

Suffix vowels copy the backness (and for high vowels, the rounding) of the
last vowel of the word they attach to.
"""
from enum import Enum
from types import MappingProxyType

from kefir.core.errors import MissingVowelSound


class Harmony(Enum):
    FRONT = "front"
    BACK = "back"


class VowelClass(Enum):
    UNROUNDED_BACK = "unrounded_back"
    UNROUNDED_FRONT = "unrounded_front"
    ROUNDED_BACK = "rounded_back"
    ROUNDED_FRONT = "rounded_front"

    @property
    def harmony(self) -> Harmony:
        if self in (VowelClass.UNROUNDED_FRONT, VowelClass.ROUNDED_FRONT):
            return Harmony.FRONT
        return Harmony.BACK

    @property
    def is_rounded(self) -> bool:
        return self in (VowelClass.ROUNDED_BACK, VowelClass.ROUNDED_FRONT)


class ConsonantClass(Enum):
    VOICED_CONTINUANT = "voiced_continuant"
    VOICED_NON_CONTINUANT = "voiced_non_continuant"
    VOICELESS_CONTINUANT = "voiceless_continuant"
    VOICELESS_NON_CONTINUANT = "voiceless_non_continuant"


VOWEL_CLASSES = MappingProxyType({
    "a": VowelClass.UNROUNDED_BACK,
    "ı": VowelClass.UNROUNDED_BACK,
    "e": VowelClass.UNROUNDED_FRONT,
    "i": VowelClass.UNROUNDED_FRONT,
    "o": VowelClass.ROUNDED_BACK,
    "u": VowelClass.ROUNDED_BACK,
    "ö": VowelClass.ROUNDED_FRONT,
    "ü": VowelClass.ROUNDED_FRONT,
})

VOWELS = frozenset(VOWEL_CLASSES)
FRONT_VOWELS = frozenset(v for v, c in VOWEL_CLASSES.items() if c.harmony is Harmony.FRONT)
BACK_VOWELS = VOWELS - FRONT_VOWELS

CONSONANT_CLASSES = MappingProxyType({
    **dict.fromkeys("ğjlmnrvyz", ConsonantClass.VOICED_CONTINUANT),
    **dict.fromkeys("bcdg", ConsonantClass.VOICED_NON_CONTINUANT),
    **dict.fromkeys("fhsş", ConsonantClass.VOICELESS_CONTINUANT),
    **dict.fromkeys("pçtk", ConsonantClass.VOICELESS_NON_CONTINUANT),
})

CONSONANTS = frozenset(CONSONANT_CLASSES)
VOICELESS_CONSONANTS = frozenset(
    c for c, cls in CONSONANT_CLASSES.items()
    if cls in (ConsonantClass.VOICELESS_CONTINUANT, ConsonantClass.VOICELESS_NON_CONTINUANT)
)

# Voicing at a morpheme boundary, and its inverse
SOFTENING_SOUNDS = MappingProxyType({"p": "b", "ç": "c", "t": "d", "k": "ğ"})
HARDENING_SOUNDS = MappingProxyType({v: k for k, v in SOFTENING_SOUNDS.items()})

HIGH_VOWELS = MappingProxyType({
    VowelClass.UNROUNDED_BACK: "ı",
    VowelClass.UNROUNDED_FRONT: "i",
    VowelClass.ROUNDED_BACK: "u",
    VowelClass.ROUNDED_FRONT: "ü",
})

LOW_VOWELS = MappingProxyType({Harmony.FRONT: "e", Harmony.BACK: "a"})

# Same height and rounding, opposite backness
_HARMONY_SWAP = str.maketrans("aeıioöuü", "eaiıöoüu")


def classify_vowel(ch: str) -> VowelClass | None:
    return VOWEL_CLASSES.get(ch)


def classify_consonant(ch: str) -> ConsonantClass | None:
    return CONSONANT_CLASSES.get(ch)


def last_vowel(stem: str) -> str:
    """Return the last vowel of ``stem``; raise MissingVowelSound if there is none."""
    for ch in reversed(stem):
        if ch in VOWELS:
            return ch
    raise MissingVowelSound(stem)


def last_vowel_class(stem: str) -> VowelClass:
    return VOWEL_CLASSES[last_vowel(stem)]


def harmony_direction(stem: str) -> Harmony:
    return last_vowel_class(stem).harmony


def is_front(stem: str) -> bool:
    return harmony_direction(stem) is Harmony.FRONT


def is_back(stem: str) -> bool:
    return harmony_direction(stem) is Harmony.BACK


def is_rounded(stem: str) -> bool:
    return last_vowel_class(stem).is_rounded


def ends_with_consonant(stem: str) -> bool:
    return stem[-1:] in CONSONANTS


def ends_with_voiceless(stem: str) -> bool:
    return stem[-1:] in VOICELESS_CONSONANTS


def ends_with_softening(stem: str) -> bool:
    """True when the final sound is one of p, ç, t, k."""
    return stem[-1:] in SOFTENING_SOUNDS


def voice(stem: str) -> str:
    """Soften a final p/ç/t/k to b/c/d/ğ (kitap -> kitab, uçak -> uçağ).

    Anything else is returned unchanged, so the operation is idempotent.
    """
    softened = SOFTENING_SOUNDS.get(stem[-1:])
    return stem[:-1] + softened if softened else stem


def devoice(stem: str) -> str:
    """Harden a final b/c/d/ğ back to p/ç/t/k."""
    hardened = HARDENING_SOUNDS.get(stem[-1:])
    return stem[:-1] + hardened if hardened else stem


def harmonized_high_vowel(vowel_class: VowelClass) -> str:
    """The ı/i/u/ü vowel agreeing with ``vowel_class``."""
    return HIGH_VOWELS[vowel_class]


def harmonized_low_vowel(harmony: Harmony) -> str:
    """The a/e vowel agreeing with ``harmony``."""
    return LOW_VOWELS[harmony]


def swap_harmony(text: str) -> str:
    """Swap every vowel in ``text`` to its opposite-harmony counterpart.

    >>> swap_harmony("ecek")
    'acak'
    >>> swap_harmony("ocok")
    'öcök'
    """
    return text.translate(_HARMONY_SWAP)
