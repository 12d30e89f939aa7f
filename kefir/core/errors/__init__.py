"""Monadic Error Handling System

Type-safe error handling inspired by Haskell's Either monad and Rust's
Result type.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- Exceptions: AppError carriers for the raising rule engine

Usage:
    from kefir.core.errors import Ok, Err, Result, AppError

    match engine.generate_case_result("kitap", "dative"):
        case Ok(form):
            print(form)
        case Err(error):
            log.error(error.message, code=error.code.name)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    # Combinators
    ensure,
)

from .builders import (
    # Validation (E2xxx)
    validation_error,
    invalid_type,
    required_field,
    # Morphology (E7xxx)
    morphology_error,
    missing_vowel_sound,
    unsupported_case,
    unsupported_copula,
    unmatched_agreement,
    unsupported_language,
    # Internal (E9xxx)
    internal_error,
)

from .exceptions import (
    AppErrorException,
    MorphologyError,
    MissingVowelSound,
    UnsupportedCase,
    UnsupportedCopula,
    UnmatchedAgreement,
    UnsupportedLanguage,
    raise_error,
    raise_result,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Combinators
    "ensure",
    # Validation (E2xxx)
    "validation_error",
    "invalid_type",
    "required_field",
    # Morphology (E7xxx)
    "morphology_error",
    "missing_vowel_sound",
    "unsupported_case",
    "unsupported_copula",
    "unmatched_agreement",
    "unsupported_language",
    # Internal (E9xxx)
    "internal_error",
    # Exceptions
    "AppErrorException",
    "MorphologyError",
    "MissingVowelSound",
    "UnsupportedCase",
    "UnsupportedCopula",
    "UnmatchedAgreement",
    "UnsupportedLanguage",
    "raise_error",
    "raise_result",
]
