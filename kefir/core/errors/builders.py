"""Domain-Specific Error Builders

Ergonomic constructors for typed errors.
Each builder creates AppError with appropriate code and context.
"""
from typing import Iterable

from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: object = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_type(field: str, expected: str, value: object, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Field '{field}' must be {expected}, got {type(value).__name__}",
        code=ErrorCode.E2004_INVALID_TYPE,
        field=field,
        value=repr(value),
        expected=expected,
        origin=origin,
    )


def required_field(field: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Required field '{field}' is missing or empty",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
    )


# =============================================================================
# Morphology Errors (E7xxx)
# =============================================================================

def morphology_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E7000_MORPHOLOGY_GENERIC,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create morphology/rule-engine error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
    ))


def missing_vowel_sound(stem: str, origin: str = "") -> Err[AppError]:
    return morphology_error(
        f"Stem '{stem}' has no vowel sound to harmonize with",
        code=ErrorCode.E7001_MISSING_VOWEL_SOUND,
        stem=stem,
        origin=origin,
    )


def unsupported_case(value: object, options: Iterable[str], origin: str = "") -> Err[AppError]:
    options = list(options)
    return morphology_error(
        f"Invalid grammatical case '{value}'. Options: {', '.join(options)}",
        code=ErrorCode.E7002_UNSUPPORTED_CASE,
        value=str(value),
        options=options,
        origin=origin,
    )


def unsupported_copula(value: object, options: Iterable[str], origin: str = "") -> Err[AppError]:
    options = list(options)
    return morphology_error(
        f"Invalid copula '{value}'. Options: {', '.join(options)}",
        code=ErrorCode.E7003_UNSUPPORTED_COPULA,
        value=str(value),
        options=options,
        origin=origin,
    )


def unmatched_agreement(person: object, number: object, origin: str = "") -> Err[AppError]:
    return morphology_error(
        f"No person agreement for person '{person}' and number '{number}'",
        code=ErrorCode.E7004_UNMATCHED_AGREEMENT,
        person=str(person),
        number=str(number),
        origin=origin,
    )


def unsupported_language(code: str, available: Iterable[str], origin: str = "") -> Err[AppError]:
    available = list(available)
    return morphology_error(
        f"Language '{code}' not registered. Available: {', '.join(available) or 'none'}",
        code=ErrorCode.E7010_UNSUPPORTED_LANGUAGE,
        language=code,
        available=available,
        origin=origin,
    )


# =============================================================================
# Internal Errors (E9xxx)
# =============================================================================

def internal_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create internal/unexpected error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=cause,
    ))
