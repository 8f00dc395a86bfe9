"""
Qdrant-based VectorIndex implementation.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from qdrant_client import AsyncQdrantClient
from qdrant_client import models

from docqa.config import settings
from docqa.errors import SetupError, VectorIndexError
from docqa.vector_store.base import Distance, SearchHit, VectorIndex, VectorRecord

QDRANT_COLLECTION = settings.vector_collection

QDRANT_DISTANCES: Dict[Distance, models.Distance] = {
    Distance.COSINE: models.Distance.COSINE,
    Distance.DOT: models.Distance.DOT,
    Distance.EUCLIDEAN: models.Distance.EUCLID,
}

logger = logging.getLogger(__name__)


def build_qdrant_client() -> AsyncQdrantClient:
    if not settings.qdrant_url:
        raise SetupError("QDRANT_URL not available")
    if settings.qdrant_api_key is None:
        raise SetupError("QDRANT_API_KEY not available")
    return AsyncQdrantClient(
        url=settings.qdrant_url,
        api_key=settings.qdrant_api_key.get_secret_value(),
        timeout=max(1, round(settings.vector_store_timeout_sec)),
    )


class QdrantVectorIndex(VectorIndex):
    def __init__(
        self,
        client: AsyncQdrantClient | None = None,
        collection_name: str = QDRANT_COLLECTION,
        dimension: int = settings.embedding_dimension,
    ) -> None:
        super().__init__(collection_name, dimension)
        self.client = client or build_qdrant_client()
        logger.info("QdrantVectorIndex initialised", extra={"collection": self.collection_name})

    async def _recreate(self, dimension: int, distance: Distance) -> None:
        try:
            if await self.client.collection_exists(self.collection_name):
                await self.client.delete_collection(self.collection_name)
            await self.client.create_collection(
                collection_name=self.collection_name,
                vectors_config=models.VectorParams(size=dimension, distance=QDRANT_DISTANCES[distance]),
            )
        except Exception as exc:
            logger.error("Failed recreating Qdrant collection", extra={"collection": self.collection_name})
            raise VectorIndexError(f"Failed to recreate Qdrant collection '{self.collection_name}'") from exc

    async def _write(self, record: VectorRecord) -> None:
        point = models.PointStruct(id=record.id, vector=record.vector, payload=record.payload)
        try:
            await self.client.upsert(collection_name=self.collection_name, points=[point])
        except Exception as exc:
            raise VectorIndexError(f"Failed to upsert point {record.id} into Qdrant") from exc

    async def _query(self, vector: List[float], top_k: int) -> List[SearchHit]:
        try:
            response = await self.client.query_points(
                collection_name=self.collection_name,
                query=vector,
                limit=top_k,
                with_payload=True,
            )
        except Exception as exc:
            raise VectorIndexError(f"Qdrant search in '{self.collection_name}' failed") from exc

        return [
            SearchHit(score=float(point.score), payload={k: str(v) for k, v in (point.payload or {}).items()})
            for point in response.points
        ]

    async def close(self) -> None:
        await self.client.close()


__all__ = ["QdrantVectorIndex", "build_qdrant_client", "QDRANT_COLLECTION", "QDRANT_DISTANCES"]
