"""
Utility script to inspect how documentation files are segmented into chunks.

Usage:
    python -m scripts.inspect_chunks --limit 5 --offset 0
"""

from __future__ import annotations

import argparse

from docqa.config import settings
from docqa.indexing.loader import load_documents


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect segmented documentation chunks.")
    parser.add_argument("--docs-dir", default=settings.docs_dir, help="Documentation root")
    parser.add_argument("--suffix", default=settings.docs_suffix, help="File suffix filter")
    parser.add_argument("--limit", type=int, default=5, help="Number of documents to show")
    parser.add_argument("--offset", type=int, default=0, help="Offset for pagination")
    parser.add_argument("--snippet", type=int, default=200, help="Chunk snippet length")
    args = parser.parse_args()

    table = load_documents(args.docs_dir, args.suffix)
    documents = table.documents()
    total_chunks = sum(len(d.chunks) for d in documents)

    print(f"Total documents: {len(documents)} ({total_chunks} chunks)")
    page = documents[args.offset : args.offset + args.limit]
    print(f"Showing {len(page)} documents (offset={args.offset}, limit={args.limit})")
    for idx, document in enumerate(page, start=1 + args.offset):
        print(f"\n#{idx}: {document.path} - {len(document.chunks)} chunks")
        for chunk_idx, chunk in enumerate(document.chunks):
            snippet = chunk[: args.snippet].replace("\n", " ")
            print(f"  [{chunk_idx}] {snippet}" + ("..." if len(chunk) > args.snippet else ""))


if __name__ == "__main__":
    main()
