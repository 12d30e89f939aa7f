"""Shared type definitions for language modules."""
from enum import Enum


class _Category(str, Enum):
    """String-valued grammatical category; accepts its member names' values."""

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def coerce(cls, value: object):
        """Return the member for ``value`` (a member or its string value), or None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None

    def __str__(self) -> str:
        return self.value


class GrammaticalCase(_Category):
    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    ABLATIVE = "ablative"
    LOCATIVE = "locative"


class Copula(_Category):
    ZERO = "zero"
    NEGATIVE = "negative"
    TOBE = "tobe"
    PERSONAL = "personal"
    INFERENTIAL = "inferential"
    CONDITIONAL = "conditional"
    PERFECTIVE = "perfective"
    IMPERFECTIVE = "imperfective"
    FUTURE = "future"
    PROGRESSIVE = "progressive"
    NECESSITATIVE = "necessitative"
    IMPOTENTIAL = "impotential"


class Person(_Category):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class Number(_Category):
    SINGULAR = "singular"
    PLURAL = "plural"

    @classmethod
    def from_plural(cls, is_plural: bool) -> "Number":
        return cls.PLURAL if is_plural else cls.SINGULAR
