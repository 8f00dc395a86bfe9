"""
Vector index abstractions and factories.
"""

from docqa.config import settings
from docqa.errors import SetupError
from docqa.vector_store.base import Distance, SearchHit, VectorIndex, VectorRecord, document_payload

DEFAULT_VECTOR_STORE_BACKEND = settings.vector_store_backend


def get_vector_store(backend: str | None = None) -> VectorIndex:
    """
    Factory to obtain the configured VectorIndex instance.
    Supports the Chroma (default) and Qdrant backends.
    """
    backend = (backend or DEFAULT_VECTOR_STORE_BACKEND).lower()
    if backend == "chroma":
        from docqa.vector_store.chroma_store import ChromaVectorIndex

        return ChromaVectorIndex()
    if backend == "qdrant":
        from docqa.vector_store.qdrant_store import QdrantVectorIndex

        return QdrantVectorIndex()
    raise SetupError(f"Unsupported vector store backend: {backend}")


__all__ = [
    "DEFAULT_VECTOR_STORE_BACKEND",
    "get_vector_store",
    "Distance",
    "SearchHit",
    "VectorIndex",
    "VectorRecord",
    "document_payload",
]
