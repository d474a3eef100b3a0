from __future__ import annotations

from .base import CodeGenerator
from .javascript import JavaScriptGenerator
from .python import PythonGenerator
from .registry import available_languages, get_generator, normalize_language

__all__ = [
    "CodeGenerator",
    "JavaScriptGenerator",
    "PythonGenerator",
    "available_languages",
    "get_generator",
    "normalize_language",
]
