"""Language module registry - factory pattern for language support."""
from kefir.core.errors import UnsupportedLanguage
from kefir.core.config import get_settings
from kefir.core.logging import language_logger

from .base import LanguageModule

log = language_logger()

_MODULES: dict[str, LanguageModule] = {}


def register(module: LanguageModule) -> None:
    """Register a language module."""
    _MODULES[module.code] = module
    log.debug("language_registered", code=module.code, name=module.name)


def get_module(code: str | None = None) -> LanguageModule:
    """Get a language module by code, defaulting to KEFIR_DEFAULT_LANGUAGE."""
    if code is None:
        code = get_settings().DEFAULT_LANGUAGE
    if code not in _MODULES:
        raise UnsupportedLanguage(code, _MODULES.keys())
    return _MODULES[code]


def list_languages() -> list[dict]:
    """List all registered languages."""
    return [{"code": m.code, "name": m.name, "nativeName": m.native_name} for m in _MODULES.values()]


def _auto_register() -> None:
    """Auto-register language modules on import."""
    from .turkish import TurkishModule
    register(TurkishModule())


_auto_register()
