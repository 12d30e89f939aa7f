"""Exception Wrappers

Bridges the monadic error system and plain raise/except code. The rule
engine raises these; Result-returning boundaries convert them back to Err.
"""
from __future__ import annotations

from typing import Iterable

from .types import AppError, Err, Result
from .builders import (
    missing_vowel_sound,
    unmatched_agreement,
    unsupported_case,
    unsupported_copula,
    unsupported_language,
)


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when you need to raise an AppError in code that
    doesn't use the Result monad.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)

    @property
    def code(self):
        return self.error.code


class MorphologyError(AppErrorException, ValueError):
    """Base for every rule-engine failure."""


class MissingVowelSound(MorphologyError):
    """Stem contains no vowel, so harmony cannot be determined."""

    def __init__(self, stem: str):
        self.stem = stem
        super().__init__(missing_vowel_sound(stem, origin="phonology").error)


class UnsupportedCase(MorphologyError):
    def __init__(self, value: object, options: Iterable[str]):
        self.value = value
        super().__init__(unsupported_case(value, options, origin="case").error)


class UnsupportedCopula(MorphologyError):
    def __init__(self, value: object, options: Iterable[str]):
        self.value = value
        super().__init__(unsupported_copula(value, options, origin="predication").error)


class UnmatchedAgreement(MorphologyError):
    def __init__(self, person: object, number: object):
        self.person, self.number = person, number
        super().__init__(unmatched_agreement(person, number, origin="predication").error)


class UnsupportedLanguage(MorphologyError):
    def __init__(self, code: str, available: Iterable[str]):
        self.language = code
        super().__init__(unsupported_language(code, available, origin="registry").error)


def raise_error(error: AppError) -> None:
    """Raise AppError as exception."""
    raise AppErrorException(error)


def raise_result(result: Result) -> None:
    """Raise if Result is Err, otherwise do nothing."""
    if isinstance(result, Err):
        raise AppErrorException(result.error)
