from __future__ import annotations

"""
Code Generator Registry.

Maps language identifiers to generator implementations. A recognized
language may be registered without an implementation; resolving it fails
explicitly instead of producing partial output.
"""

import logging
from typing import Dict, List, Optional, Type

from embedfiles.core.generators.base import CodeGenerator
from embedfiles.core.generators.javascript import JavaScriptGenerator
from embedfiles.core.generators.python import PythonGenerator
from embedfiles.domain.errors import GeneratorNotImplementedError, UnsupportedLanguageError

logger = logging.getLogger(__name__)

_GENERATORS: Dict[str, Optional[Type[CodeGenerator]]] = {
    "js": JavaScriptGenerator,
    "py": PythonGenerator,
    # TODO: emit typed declarations for the nested mapping before enabling 'ts'.
    "ts": None,
}


def normalize_language(language: str) -> str:
    """Lowercase an identifier and strip surrounding blanks and a leading dot."""
    return (language or "").strip().lower().lstrip(".")


def available_languages() -> List[str]:
    """Return the identifiers that have a working generator."""
    return sorted(lang for lang, impl in _GENERATORS.items() if impl is not None)


def get_generator(language: str) -> CodeGenerator:
    """
    Resolve a language identifier into a generator instance.

    Args:
        language: Target identifier such as 'js' or 'py'.

    Returns:
        CodeGenerator: A fresh generator for the language.

    Raises:
        UnsupportedLanguageError: If the identifier is unknown.
        GeneratorNotImplementedError: If the language has no implementation.
    """
    key = normalize_language(language)
    if key not in _GENERATORS:
        raise UnsupportedLanguageError(language, available_languages())

    impl = _GENERATORS[key]
    if impl is None:
        raise GeneratorNotImplementedError(key)

    generator = impl()
    if generator.experimental:
        logger.warning(f"{generator.display_name} output is experimental.")
    return generator
