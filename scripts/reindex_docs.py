"""
CLI for a full reindex of the documentation corpus.

Example:
    python -m scripts.reindex_docs --embed-batch 64
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from docqa.config import require_openai_api_key, settings, setup_logging
from docqa.embeddings.client import EmbeddingsClient, build_openai_client
from docqa.indexing.loader import load_documents
from docqa.indexing.pipeline import ReindexService, ReindexSummary
from docqa.vector_store import get_vector_store


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Full reindex of the documentation corpus.")
    parser.add_argument(
        "--embed-batch",
        type=int,
        default=settings.embed_batch,
        help="Batch size for embedding requests.",
    )
    parser.add_argument("--docs-dir", default=settings.docs_dir, help="Documentation root")
    parser.add_argument("--suffix", default=settings.docs_suffix, help="File suffix filter")
    return parser.parse_args()


async def run(args: argparse.Namespace, logger: logging.Logger) -> ReindexSummary:
    embeddings = EmbeddingsClient(
        batch_size=args.embed_batch,
        client=build_openai_client(require_openai_api_key()),
    )
    service = ReindexService(get_vector_store(), embeddings, logger_=logger)
    documents = load_documents(args.docs_dir, args.suffix)
    return await service.run(documents.documents())


def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)
    args = parse_args()

    try:
        summary = asyncio.run(run(args, logger))
    except Exception:
        logger.exception("Reindex failed")
        sys.exit(1)

    print(
        f"Indexed documents: {summary.indexed_documents}, vectors: {summary.indexed_vectors} "
        f"(elapsed {summary.elapsed_sec:.2f}s)"
    )


if __name__ == "__main__":
    main()
