"""
Chroma-based VectorIndex implementation.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List

import chromadb

from docqa.config import settings
from docqa.errors import VectorIndexError
from docqa.vector_store.base import Distance, SearchHit, VectorIndex, VectorRecord

CHROMA_COLLECTION = settings.vector_collection
CHROMA_PERSIST_DIR = settings.vector_store_path

# Chroma names its metrics after the hnsw index spaces.
HNSW_SPACES: Dict[Distance, str] = {
    Distance.COSINE: "cosine",
    Distance.DOT: "ip",
    Distance.EUCLIDEAN: "l2",
}

logger = logging.getLogger(__name__)


def build_chroma_client(persist_directory: str | None = None, host: str | None = None, port: int | None = None):
    if host:
        return chromadb.HttpClient(host=host, port=port or settings.chroma_port)
    return chromadb.PersistentClient(path=persist_directory or CHROMA_PERSIST_DIR)


class ChromaVectorIndex(VectorIndex):
    def __init__(
        self,
        client: Any | None = None,
        collection_name: str = CHROMA_COLLECTION,
        dimension: int = settings.embedding_dimension,
        distance: str | Distance = settings.vector_distance,
    ) -> None:
        super().__init__(collection_name, dimension)
        self.distance = Distance.parse(distance)
        self.client = client or build_chroma_client(host=settings.chroma_host)
        self._collection = None
        logger.info("ChromaVectorIndex initialised", extra={"collection": self.collection_name})

    def _get_collection(self):
        if self._collection is None:
            try:
                self._collection = self.client.get_collection(self.collection_name)
            except Exception as exc:
                raise VectorIndexError(f"Chroma collection '{self.collection_name}' is not available") from exc
        return self._collection

    def _recreate_sync(self, dimension: int, distance: Distance) -> None:
        self._collection = None
        try:
            self.client.get_or_create_collection(self.collection_name)
            self.client.delete_collection(self.collection_name)
            self._collection = self.client.create_collection(
                self.collection_name,
                metadata={"hnsw:space": HNSW_SPACES[distance], "dimension": dimension},
            )
        except Exception as exc:
            raise VectorIndexError(f"Failed to recreate Chroma collection '{self.collection_name}'") from exc
        self.distance = distance

    async def _recreate(self, dimension: int, distance: Distance) -> None:
        await asyncio.to_thread(self._recreate_sync, dimension, distance)

    def _write_sync(self, record: VectorRecord) -> None:
        collection = self._get_collection()
        try:
            collection.upsert(
                ids=[str(record.id)],
                embeddings=[record.vector],
                metadatas=[record.payload],
            )
        except Exception as exc:
            raise VectorIndexError(f"Failed to upsert point {record.id} into Chroma") from exc

    async def _write(self, record: VectorRecord) -> None:
        await asyncio.to_thread(self._write_sync, record)

    def _to_score(self, distance: float) -> float:
        # Chroma returns distances (lower is closer); flip them into scores.
        if self.distance is Distance.EUCLIDEAN:
            return -float(distance)
        return 1.0 - float(distance)

    def _query_sync(self, vector: List[float], top_k: int) -> List[SearchHit]:
        collection = self._get_collection()
        try:
            result = collection.query(
                query_embeddings=[vector],
                n_results=top_k,
                include=["metadatas", "distances"],
            )
        except Exception as exc:
            raise VectorIndexError(f"Chroma search in '{self.collection_name}' failed") from exc

        metadatas = (result.get("metadatas") or [[]])[0] or []
        distances = (result.get("distances") or [[]])[0] or []
        return [
            SearchHit(score=self._to_score(distance), payload=dict(metadata or {}))
            for metadata, distance in zip(metadatas, distances)
        ]

    async def _query(self, vector: List[float], top_k: int) -> List[SearchHit]:
        return await asyncio.to_thread(self._query_sync, vector, top_k)


__all__ = ["ChromaVectorIndex", "build_chroma_client", "CHROMA_COLLECTION", "CHROMA_PERSIST_DIR", "HNSW_SPACES"]
