from __future__ import annotations

"""
Base Definitions for Code Generation Strategies.

Provides the abstract interface implemented once per target language.
"""

from abc import ABC, abstractmethod

from embedfiles.domain.tree_models import Tree

GENERATED_NOTICE = "Auto-generated by embedfiles. Do not edit by hand."


class CodeGenerator(ABC):
    """
    Abstract base class for language-specific module generators.

    Attributes:
        language: Identifier selected on the command line (e.g. 'js').
        extension: Extension of the generated file, without the dot.
        display_name: Human readable language name.
        experimental: Whether selecting this target logs an advisory warning.
    """

    language: str = ""
    extension: str = ""
    display_name: str = ""
    experimental: bool = False

    @abstractmethod
    def generate(self, tree: Tree) -> str:
        """
        Render the complete source of the generated module.

        Args:
            tree: Nested mapping of base64 contents.

        Returns:
            str: Source text ready to be written as UTF-8.
        """
