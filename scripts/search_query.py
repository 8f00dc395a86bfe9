"""
CLI for searching the vector index with a text query.

Example:
    python -m scripts.search_query --query "How do I configure secrets?" --top-k 5
"""

from __future__ import annotations

import argparse
import asyncio

from docqa.config import require_openai_api_key
from docqa.embeddings.client import EmbeddingsClient, build_openai_client
from docqa.errors import VectorIndexError
from docqa.vector_store import get_vector_store


async def search(query: str, top_k: int):
    embeddings = EmbeddingsClient(client=build_openai_client(require_openai_api_key()))
    index = get_vector_store()
    vector = await embeddings.embed_text(query)
    return await index.search(vector, top_k=top_k)


def main() -> None:
    parser = argparse.ArgumentParser(description="Search indexed documents by text query.")
    parser.add_argument("--query", "-q", required=True, help="Query text")
    parser.add_argument("--top-k", type=int, default=5, help="How many results to return")
    args = parser.parse_args()

    try:
        hits = asyncio.run(search(args.query, args.top_k))
    except VectorIndexError as exc:
        print(f"No results: {exc}")
        return

    for idx, hit in enumerate(hits, start=1):
        print(f"#{idx} score={hit.score:.4f} path={hit.document_path}")


if __name__ == "__main__":
    main()
