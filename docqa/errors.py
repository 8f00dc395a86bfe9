"""
Error hierarchy shared by indexing and serving.

SetupError is fatal at startup. Everything under PromptError means that no
usable answer could be produced for a prompt; the HTTP layer turns those into
the generic error stream.
"""

from __future__ import annotations


class DocQAError(Exception):
    """Base class for all docqa errors."""


class SetupError(DocQAError):
    """Missing credential or configuration."""


class PromptError(DocQAError):
    """No usable content could be produced for this prompt."""


class VectorIndexError(PromptError):
    """Vector search service call failed or returned nothing."""


class EmbeddingError(PromptError):
    """Embedding service call or payload construction failed."""


class NotFoundError(PromptError):
    """Search returned a document path absent from the loaded table."""


__all__ = [
    "DocQAError",
    "SetupError",
    "PromptError",
    "VectorIndexError",
    "EmbeddingError",
    "NotFoundError",
]
