"""
Documentation loader: recursive file loading and the in-memory document table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Tuple

from docqa.config import settings
from docqa.indexing.segmenter import segment

DOCS_DIR = settings.docs_dir
DOCS_SUFFIX = settings.docs_suffix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    path: str
    contents: str
    chunks: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, path: str, contents: str) -> "Document":
        return cls(path=path, contents=contents, chunks=tuple(segment(contents)))


class DocumentTable(Mapping[str, Document]):
    """Read-only path -> Document lookup, shared by all requests."""

    def __init__(self, documents: List[Document] | None = None) -> None:
        self._documents: Dict[str, Document] = {}
        for document in documents or []:
            self._documents[document.path] = document

    def __getitem__(self, path: str) -> Document:
        return self._documents[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def get_contents(self, path: str) -> str | None:
        document = self._documents.get(path)
        return document.contents if document else None

    def documents(self) -> List[Document]:
        return list(self._documents.values())


def load_files(root_dir: str | Path = DOCS_DIR, suffix: str = DOCS_SUFFIX) -> List[Tuple[str, str]]:
    """
    Recursively read every file under root_dir whose name ends with suffix.
    Paths are relative to root_dir with forward slashes.
    """
    base = Path(root_dir)
    if not base.exists():
        logger.warning("Docs directory does not exist", extra={"docs_dir": str(base)})
        return []

    files: List[Tuple[str, str]] = []
    for path in sorted(base.rglob("*")):
        if not path.is_file() or not path.name.endswith(suffix):
            continue
        relative = path.relative_to(base).as_posix()
        files.append((relative, path.read_text(encoding="utf-8")))
        logger.debug("Loaded file", extra={"path": relative})
    return files


def load_documents(root_dir: str | Path = DOCS_DIR, suffix: str = DOCS_SUFFIX) -> DocumentTable:
    documents = [Document.parse(path, contents) for path, contents in load_files(root_dir, suffix)]
    table = DocumentTable(documents)
    logger.info(
        "Loaded documents",
        extra={"documents": len(table), "chunks": sum(len(d.chunks) for d in documents)},
    )
    return table


__all__ = ["Document", "DocumentTable", "load_files", "load_documents", "DOCS_DIR", "DOCS_SUFFIX"]
