"""
Indexing pipeline: embed every loaded document's chunks and upsert them into
the vector index.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable

from tqdm import tqdm

from docqa.config import settings
from docqa.embeddings.client import EmbeddingsClient
from docqa.errors import EmbeddingError
from docqa.indexing.loader import Document
from docqa.vector_store.base import VectorIndex, document_payload

logger = logging.getLogger(__name__)


@dataclass
class ReindexSummary:
    indexed_documents: int
    indexed_vectors: int
    elapsed_sec: float


async def embed_documentation(
    vector_index: VectorIndex,
    embeddings_client: EmbeddingsClient,
    documents: Iterable[Document],
) -> ReindexSummary:
    """
    Upsert one record per returned embedding, each carrying the source
    document's path. Must not run concurrently with serving.
    """
    started = time.time()
    indexed_documents = 0
    indexed_vectors = 0

    for document in tqdm(list(documents), desc="Indexing", unit="docs"):
        if not document.chunks:
            logger.info("Skipping document without chunks", extra={"path": document.path})
            continue

        embeddings = await embeddings_client.embed_texts(document.chunks)
        if not embeddings:
            raise EmbeddingError(f"No embeddings returned for '{document.path}'")

        payload = document_payload(document.path)
        for embedding in embeddings:
            await vector_index.upsert(embedding, payload)
            indexed_vectors += 1
        indexed_documents += 1
        logger.info("Embedded document", extra={"path": document.path, "vectors": len(embeddings)})

    return ReindexSummary(
        indexed_documents=indexed_documents,
        indexed_vectors=indexed_vectors,
        elapsed_sec=time.time() - started,
    )


class ReindexService:
    """Full reindex: reset the collection, then embed all documents."""

    def __init__(
        self,
        vector_index: VectorIndex,
        embeddings_client: EmbeddingsClient,
        dimension: int = settings.embedding_dimension,
        distance: str = settings.vector_distance,
        logger_: logging.Logger | None = None,
    ) -> None:
        self.vector_index = vector_index
        self.embeddings_client = embeddings_client
        self.dimension = dimension
        self.distance = distance
        self.logger = logger_ or logging.getLogger(__name__)

    async def run(self, documents: Iterable[Document]) -> ReindexSummary:
        started = time.time()
        await self.vector_index.reset_collection(self.dimension, self.distance)
        summary = await embed_documentation(self.vector_index, self.embeddings_client, documents)
        summary.elapsed_sec = time.time() - started
        self.logger.info(
            "ReindexService completed",
            extra={
                "indexed_documents": summary.indexed_documents,
                "indexed_vectors": summary.indexed_vectors,
                "elapsed_sec": round(summary.elapsed_sec, 2),
            },
        )
        return summary


__all__ = ["embed_documentation", "ReindexService", "ReindexSummary"]
