"""
OpenAI embeddings client.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from openai import AsyncOpenAI, OpenAIError

from docqa.config import settings
from docqa.errors import EmbeddingError

DEFAULT_EMBEDDING_MODEL = settings.embedding_model_name
DEFAULT_EMBED_BATCH_SIZE = settings.embed_batch

logger = logging.getLogger(__name__)


def build_openai_client(api_key: str | None = None) -> AsyncOpenAI:
    return AsyncOpenAI(
        api_key=api_key,
        timeout=settings.openai_timeout_sec,
        max_retries=settings.openai_max_retries,
    )


class EmbeddingsClient:
    def __init__(
        self,
        model: str = DEFAULT_EMBEDDING_MODEL,
        batch_size: int = DEFAULT_EMBED_BATCH_SIZE,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self.model = model
        self.batch_size = batch_size
        api_key = settings.openai_api_key.get_secret_value() if settings.openai_api_key else None
        self.client = client or build_openai_client(api_key)

    async def embed_texts(self, texts: Sequence[str]) -> List[List[float]]:
        """One vector per input text, in input order."""
        if not texts:
            return []

        embeddings: List[List[float]] = []
        for i in range(0, len(texts), self.batch_size):
            batch = list(texts[i : i + self.batch_size])
            try:
                response = await self.client.embeddings.create(model=self.model, input=batch)
            except OpenAIError as exc:
                raise EmbeddingError(f"Embedding request failed: {exc}") from exc
            embeddings.extend([item.embedding for item in response.data])
        return embeddings

    async def embed_text(self, text: str) -> List[float]:
        vectors = await self.embed_texts([text])
        if not vectors:
            raise EmbeddingError("Embedding service returned no vectors")
        return vectors[0]

    async def close(self) -> None:
        await self.client.close()


__all__ = ["EmbeddingsClient", "DEFAULT_EMBEDDING_MODEL", "build_openai_client"]
