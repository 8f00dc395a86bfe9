"""
Vector index interface and shared types.

A VectorIndex owns one named collection plus the monotonic id counter used
for upserts. Ids start at 0 and grow by exactly one per successful upsert.
Upserts are serialized by a lock; searches are read-only and take no lock.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence

from docqa.errors import VectorIndexError

logger = logging.getLogger(__name__)

PAYLOAD_PATH_KEY = "id"


class Distance(str, Enum):
    COSINE = "cosine"
    DOT = "dot"
    EUCLIDEAN = "euclidean"

    @classmethod
    def parse(cls, value: str | "Distance") -> "Distance":
        if isinstance(value, Distance):
            return value
        try:
            return cls(value.lower())
        except ValueError as exc:
            raise VectorIndexError(f"Unsupported distance metric: {value}") from exc


@dataclass(frozen=True)
class VectorRecord:
    id: int
    vector: List[float]
    payload: Dict[str, str]


@dataclass(frozen=True)
class SearchHit:
    score: float
    payload: Dict[str, str]

    @property
    def document_path(self) -> str | None:
        return self.payload.get(PAYLOAD_PATH_KEY)


def document_payload(path: str) -> Dict[str, str]:
    return {PAYLOAD_PATH_KEY: path}


class VectorIndex(ABC):
    def __init__(self, collection_name: str, dimension: int) -> None:
        self.collection_name = collection_name
        self.dimension = dimension
        self._next_id = 0
        self._write_lock = asyncio.Lock()

    @property
    def next_id(self) -> int:
        return self._next_id

    async def reset_collection(self, dimension: int | None = None, distance: str | Distance = Distance.COSINE) -> None:
        """Drop and recreate the collection. Destroys every stored record."""
        dimension = dimension or self.dimension
        metric = Distance.parse(distance)
        async with self._write_lock:
            await self._recreate(dimension, metric)
            self.dimension = dimension
            self._next_id = 0
        logger.info(
            "Collection reset",
            extra={"collection": self.collection_name, "dimension": dimension, "distance": metric.value},
        )

    async def upsert(self, vector: Sequence[float], payload: Dict[str, str]) -> int:
        self._check_dimension(vector)
        async with self._write_lock:
            record = VectorRecord(id=self._next_id, vector=[float(x) for x in vector], payload=dict(payload))
            await self._write(record)
            self._next_id += 1
        logger.debug("Upserted vector", extra={"collection": self.collection_name, "id": record.id})
        return record.id

    async def search(self, vector: Sequence[float], top_k: int = 1) -> List[SearchHit]:
        if top_k <= 0:
            raise VectorIndexError(f"top_k must be positive, got {top_k}")
        self._check_dimension(vector)
        hits = await self._query([float(x) for x in vector], top_k)
        if not hits:
            raise VectorIndexError(f"No results in collection '{self.collection_name}'")
        return hits

    async def close(self) -> None:
        """Release backend connections; the default holds none."""

    def _check_dimension(self, vector: Sequence[float]) -> None:
        if len(vector) != self.dimension:
            raise VectorIndexError(
                f"Vector has dimension {len(vector)}, collection '{self.collection_name}' expects {self.dimension}"
            )

    @abstractmethod
    async def _recreate(self, dimension: int, distance: Distance) -> None:
        ...

    @abstractmethod
    async def _write(self, record: VectorRecord) -> None:
        ...

    @abstractmethod
    async def _query(self, vector: List[float], top_k: int) -> List[SearchHit]:
        ...


__all__ = [
    "Distance",
    "VectorRecord",
    "SearchHit",
    "VectorIndex",
    "document_payload",
    "PAYLOAD_PATH_KEY",
]
