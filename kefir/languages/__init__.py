"""Language modules for multi-language support.

Provides factory/registry pattern for language-specific functionality.
"""
from .registry import get_module, register, list_languages
from .base import LanguageModule, GrammarConfig
from .types import GrammaticalCase, Copula, Person, Number

__all__ = [
    "get_module",
    "register",
    "list_languages",
    "LanguageModule",
    "GrammarConfig",
    "GrammaticalCase",
    "Copula",
    "Person",
    "Number",
]
