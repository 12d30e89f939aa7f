"""Turkish predication and copulas.

Turkish copulas (ek-eylem, "suffix verb") turn a noun, adjective or verb
stem into a predicate that agrees with its subject in person and number:

    zero            yolcu            (he is a traveller)
    negative        yolcu değil      (he is not a traveller)
    tobe            yolcudur         (he is a traveller)
    personal        oralısın         (you are from there)
    inferential     doktormuş        (he was a doctor, reportedly)
    conditional     elmaysam         (if I am an apple)
    perfective      daldaydık        (we were on the branch)
    imperfective    gidiyorum        (I am going)
    future          geleceğiz        (we will come)
    progressive     gelmekteyim      (I am in the process of coming)
    necessitative   gitmeliyim       (I must go)
    impotential     gidemem          (I cannot go)
"""
from kefir.core.errors import UnmatchedAgreement, UnsupportedCopula
from kefir.languages.types import Copula, Number, Person

from .phonology import ends_with_consonant, is_front, swap_harmony, voice
from .suffix import Suffix, SuffixToken, attach


# =============================================================================
# Person-number agreement
# =============================================================================

def first_person_singular(text: str, in_past: bool = False) -> str:
    # the stem keeps its final stop in the past: açıktım, not açığdım
    return attach(
        text if in_past else voice(text),
        SuffixToken.BUFFER_Y,
        SuffixToken.DENTAL if in_past else None,
        SuffixToken.HIGH_VOWEL,
        Suffix.M,
        reference=text,
    )


def second_person_singular(text: str, in_past: bool = False) -> str:
    return attach(
        text,
        SuffixToken.BUFFER_Y if in_past else None,
        SuffixToken.DENTAL if in_past else Suffix.S,
        SuffixToken.HIGH_VOWEL,
        Suffix.N,
    )


def third_person_singular(text: str, in_past: bool = False) -> str:
    return attach(
        text,
        SuffixToken.BUFFER_Y,
        SuffixToken.DENTAL if in_past else None,
        SuffixToken.HIGH_VOWEL if in_past else None,
    )


def first_person_plural(text: str, in_past: bool = False) -> str:
    return attach(
        text if in_past else voice(text),
        SuffixToken.BUFFER_Y,
        SuffixToken.DENTAL if in_past else None,
        SuffixToken.HIGH_VOWEL,
        Suffix.K if in_past else Suffix.Z,
        reference=text,
    )


def second_person_plural(text: str, in_past: bool = False) -> str:
    return attach(
        second_person_singular(text, in_past),
        SuffixToken.HIGH_VOWEL,
        Suffix.Z,
        reference=text,
    )


def third_person_plural(text: str, in_past: bool = False) -> str:
    return attach(
        third_person_singular(text, in_past),
        SuffixToken.PLURAL,
        reference=text,
    )


def agree(
    text: str,
    person: Person | str = Person.THIRD,
    number: Number | str = Number.SINGULAR,
    in_past: bool = False,
) -> str:
    """Apply the person-number agreement suffix to ``text``.

    Raises:
        UnmatchedAgreement: ``(person, number)`` is not a valid pair.
    """
    match (Person.coerce(person), Number.coerce(number)):
        case (Person.FIRST, Number.SINGULAR):
            return first_person_singular(text, in_past)
        case (Person.SECOND, Number.SINGULAR):
            return second_person_singular(text, in_past)
        case (Person.THIRD, Number.SINGULAR):
            return third_person_singular(text, in_past)
        case (Person.FIRST, Number.PLURAL):
            return first_person_plural(text, in_past)
        case (Person.SECOND, Number.PLURAL):
            return second_person_plural(text, in_past)
        case (Person.THIRD, Number.PLURAL):
            return third_person_plural(text, in_past)
        case _:
            raise UnmatchedAgreement(person, number)


def _agreement_key(person: Person | str, is_plural: bool) -> tuple[Person, Number]:
    """Validate a (person, plurality) request before any suffix is built."""
    resolved = Person.coerce(person)
    if resolved is None or not isinstance(is_plural, bool):
        raise UnmatchedAgreement(person, is_plural)
    return resolved, Number.from_plural(is_plural)


def _harmonized(stem: str, front_literal: str) -> str:
    return front_literal if is_front(stem) else swap_harmony(front_literal)


# =============================================================================
# Copulas
# =============================================================================

def zero(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Juxtaposition: "abbas yolcu" needs no copula at all."""
    return predicate


def negative(
    predicate: str,
    person: Person | str = Person.THIRD,
    is_plural: bool = False,
    delimiter: str = Suffix.DELIMITER,
) -> str:
    """Negation with the free-standing particle: yolcu değil.

    Person and number are not marked.
    """
    return f"{predicate}{delimiter}{Suffix.NEGATIVE}"


def tobe(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """The -DIr copula: yolcudur, üzümdür, yoncadır.

    Person and number are not marked.
    """
    return attach(predicate, Suffix.D, SuffixToken.HIGH_VOWEL, Suffix.R)


def personal(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Personal endings: uçağım, oralısın, gezegenliyiz."""
    person, number = _agreement_key(person, is_plural)
    return agree(predicate, person, number, in_past=False)


def inferential(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Reported past (-mIş): öğretmenmişsin, robotmuşum, adaymış."""
    person, number = _agreement_key(person, is_plural)
    inference = attach(Suffix.M, SuffixToken.HIGH_VOWEL, "ş", reference=predicate)
    return attach(
        predicate,
        SuffixToken.BUFFER_Y,
        agree(inference, person, number, in_past=False),
    )


def conditional(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Conditional (-sA): elmaysam, üzümsen, bıçaklarsa."""
    person, number = _agreement_key(person, is_plural)
    condition = Suffix.SE if is_front(predicate) else Suffix.SA

    match (person, number):
        case (Person.FIRST, Number.SINGULAR):
            personification = Suffix.M
        case (Person.SECOND, Number.SINGULAR):
            personification = Suffix.N
        case (Person.FIRST, Number.PLURAL):
            personification = Suffix.K
        case (Person.SECOND, Number.PLURAL):
            personification = attach(Suffix.N, SuffixToken.HIGH_VOWEL, Suffix.Z, reference=condition)
        case (Person.THIRD, _):
            personification = ""
        case _:
            raise UnmatchedAgreement(person, number)

    # the buffer follows the plural suffix when there is one: elmalarsa
    head = predicate
    if (person, number) == (Person.THIRD, Number.PLURAL):
        head = attach(predicate, SuffixToken.PLURAL)

    return attach(head, SuffixToken.BUFFER_Y, condition, personification)


def perfective(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Definite past of the copula (-DI): açıktım, oralıydın, daldaydık."""
    person, number = _agreement_key(person, is_plural)
    return agree(predicate, person, number, in_past=True)


def imperfective(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Ongoing aspect (-Iyor): açıyorum, dalıyor, dalıyorsunuz."""
    person, number = _agreement_key(person, is_plural)
    aspect = attach(
        "",
        SuffixToken.HIGH_VOWEL if ends_with_consonant(predicate) else None,
        Suffix.IMPERFECT,
        reference=predicate,
    )
    # agreement sees only the aspect suffix, then the stem is prepended as is
    return predicate + agree(aspect, person, number, in_past=False)


def future(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Future tense (-AcAk): geleceğim, açıkacağım, geleceğiz."""
    person, number = _agreement_key(person, is_plural)
    return agree(predicate + _harmonized(predicate, Suffix.FUTURE), person, number, in_past=False)


def progressive(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Progressive (-mAktA): gelmekteyim, açıkmaktayım."""
    person, number = _agreement_key(person, is_plural)
    return agree(predicate + _harmonized(predicate, Suffix.PROGRESSIVE), person, number, in_past=False)


def necessitative(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Obligation (-mAlI): gitmeliyim, açıkmalıyım, uzamalıyız."""
    person, number = _agreement_key(person, is_plural)
    return agree(predicate + _harmonized(predicate, Suffix.NECESSITY), person, number, in_past=False)


def impotential(predicate: str, person: Person | str = Person.THIRD, is_plural: bool = False) -> str:
    """Inability (-(y)AmA): gidemem, gidemezsin, alamazlar.

    Voices the stem and uses its own person markers.
    """
    person, number = _agreement_key(person, is_plural)
    marker = attach(voice(predicate), SuffixToken.BUFFER_Y, reference=predicate)
    marker += _harmonized(predicate, Suffix.IMPOTENTIAL)
    high = SuffixToken.HIGH_VOWEL

    match (person, number):
        case (Person.FIRST, Number.SINGULAR):
            ending = (Suffix.M,)
        case (Person.SECOND, Number.SINGULAR):
            ending = (Suffix.Z, Suffix.S, high, Suffix.N)
        case (Person.THIRD, Number.SINGULAR):
            ending = (Suffix.Z,)
        case (Person.FIRST, Number.PLURAL):
            ending = (Suffix.Y, high, Suffix.Z)
        case (Person.SECOND, Number.PLURAL):
            ending = (Suffix.Z, Suffix.S, high, Suffix.N, high, Suffix.Z)
        case (Person.THIRD, Number.PLURAL):
            ending = (Suffix.Z, SuffixToken.PLURAL)
        case _:
            raise UnmatchedAgreement(person, number)

    return attach(marker, *ending)


def generate_predicate(
    stem: str,
    person: Person | str = Person.THIRD,
    copula: Copula | str = Copula.ZERO,
    is_plural: bool = False,
) -> str:
    """Build the predicate of ``stem`` for ``copula``, ``person`` and number.

    Raises:
        UnsupportedCopula: ``copula`` is not one of Copula.
        UnmatchedAgreement: invalid person or plurality.
        MissingVowelSound: the rule needs harmony and ``stem`` has no vowel.
    """
    match Copula.coerce(copula):
        case Copula.ZERO:
            processor = zero
        case Copula.NEGATIVE:
            processor = negative
        case Copula.TOBE:
            processor = tobe
        case Copula.PERSONAL:
            processor = personal
        case Copula.INFERENTIAL:
            processor = inferential
        case Copula.CONDITIONAL:
            processor = conditional
        case Copula.PERFECTIVE:
            processor = perfective
        case Copula.IMPERFECTIVE:
            processor = imperfective
        case Copula.FUTURE:
            processor = future
        case Copula.PROGRESSIVE:
            processor = progressive
        case Copula.NECESSITATIVE:
            processor = necessitative
        case Copula.IMPOTENTIAL:
            processor = impotential
        case _:
            raise UnsupportedCopula(copula, Copula.values())

    return processor(stem, person, is_plural)


predicate = generate_predicate
