"""
Retrieval: turn a query into the raw contents of the best-matching document.
"""

from __future__ import annotations

import logging

from docqa.embeddings.client import EmbeddingsClient
from docqa.errors import NotFoundError
from docqa.indexing.loader import DocumentTable
from docqa.vector_store.base import VectorIndex

logger = logging.getLogger(__name__)

# Single best match; no multi-document fusion.
TOP_K = 1


class RetrievalCoordinator:
    def __init__(
        self,
        documents: DocumentTable,
        vector_index: VectorIndex,
        embeddings_client: EmbeddingsClient,
    ) -> None:
        self.documents = documents
        self.vector_index = vector_index
        self.embeddings_client = embeddings_client

    async def retrieve(self, query: str) -> str:
        """
        Embed the query, search top-1 and return the matched document's
        contents. Raises NotFoundError when the hit's path is not loaded;
        EmbeddingError and VectorIndexError propagate unchanged.
        """
        vector = await self.embeddings_client.embed_text(query)
        hits = await self.vector_index.search(vector, top_k=TOP_K)
        top = hits[0]

        path = top.document_path
        contents = self.documents.get_contents(path) if path is not None else None
        if contents is None:
            logger.warning("Search hit not in document table", extra={"path": path, "score": top.score})
            raise NotFoundError(f"Document '{path}' is not loaded")

        logger.info("Retrieved document", extra={"path": path, "score": round(top.score, 3)})
        return contents


__all__ = ["RetrievalCoordinator", "TOP_K"]
