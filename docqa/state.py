"""
Process-wide handles shared by every request.
"""

from __future__ import annotations

from dataclasses import dataclass

from docqa.config import require_openai_api_key, settings
from docqa.embeddings.client import EmbeddingsClient, build_openai_client
from docqa.indexing.loader import DocumentTable, load_documents
from docqa.llm.client import LLMClient
from docqa.rag.pipeline import PromptService
from docqa.rag.retrieval import RetrievalCoordinator
from docqa.vector_store import get_vector_store
from docqa.vector_store.base import VectorIndex


@dataclass(frozen=True)
class AppState:
    documents: DocumentTable
    vector_index: VectorIndex
    embeddings_client: EmbeddingsClient
    prompt_service: PromptService

    @classmethod
    def build(
        cls,
        documents: DocumentTable,
        vector_index: VectorIndex,
        embeddings_client: EmbeddingsClient,
        llm_client: LLMClient,
    ) -> "AppState":
        retrieval = RetrievalCoordinator(documents, vector_index, embeddings_client)
        return cls(
            documents=documents,
            vector_index=vector_index,
            embeddings_client=embeddings_client,
            prompt_service=PromptService(retrieval, llm_client),
        )

    async def aclose(self) -> None:
        """Close the network clients; the OpenAI client may be shared and closes idempotently."""
        await self.vector_index.close()
        await self.embeddings_client.close()
        await self.prompt_service.llm_client.close()


def build_default_state() -> AppState:
    """Wire the configured clients; raises SetupError on missing config."""
    openai_client = build_openai_client(require_openai_api_key())
    return AppState.build(
        documents=load_documents(settings.docs_dir, settings.docs_suffix),
        vector_index=get_vector_store(),
        embeddings_client=EmbeddingsClient(client=openai_client),
        llm_client=LLMClient(client=openai_client),
    )


__all__ = ["AppState", "build_default_state"]
