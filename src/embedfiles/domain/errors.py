from __future__ import annotations

"""
Embedding Error Hierarchy.

Every failure the embedder reports on purpose derives from EmbedError and
carries a stable 'kind' identifier used by result objects and the CLI.
Filesystem failures are not wrapped: OSError propagates as-is.
"""

from typing import Iterable

KIND_UNSUPPORTED_LANGUAGE = "unsupported_language"
KIND_NOT_IMPLEMENTED = "not_implemented"
KIND_PATH_CONFLICT = "path_conflict"
KIND_IO_FAILURE = "io_failure"


class EmbedError(Exception):
    """Base class for embedding failures."""

    kind: str = "embed_error"


class UnsupportedLanguageError(EmbedError, ValueError):
    """
    Raised when a language identifier is not known to the generator registry.

    Attributes:
        language: The rejected identifier.
        supported: Identifiers that would have been accepted.
    """

    kind = KIND_UNSUPPORTED_LANGUAGE

    def __init__(self, language: str, supported: Iterable[str] = ()):
        self.language = language
        self.supported = tuple(supported)
        msg = f"Unsupported language: {language!r}"
        if self.supported:
            msg += f". Supported languages are {', '.join(self.supported)}."
        super().__init__(msg)


class GeneratorNotImplementedError(EmbedError, NotImplementedError):
    """Raised for a recognized language whose generator does not exist yet."""

    kind = KIND_NOT_IMPLEMENTED

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Code generation for language {language!r} is not implemented.")


class PathConflictError(EmbedError):
    """
    Raised when two inputs resolve to the same position in the nested mapping,
    or when a file and a directory overlap on the same segment sequence.

    Attributes:
        path: The input path whose insertion failed.
        segment: The segment at which the collision was detected.
    """

    kind = KIND_PATH_CONFLICT

    def __init__(self, path: str, segment: str, reason: str):
        self.path = path
        self.segment = segment
        self.reason = reason
        super().__init__(f"Path conflict for '{path}' at segment '{segment}': {reason}")
