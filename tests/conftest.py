"""Shared fixtures: in-memory vector index, fake embeddings, sample documents."""

import pytest

from docqa.indexing.loader import Document, DocumentTable
from tests.fakes import FakeEmbeddingsClient, InMemoryVectorIndex


@pytest.fixture
def vector_index():
    return InMemoryVectorIndex()


@pytest.fixture
def documents():
    return DocumentTable(
        [
            Document.parse("guide/secrets.mdx", "# Secrets\n\nUse the secrets store.\n"),
            Document.parse("guide/deploy.mdx", "# Deploy\n\nRun the deploy command.\n\n```\ndeploy --now\n```\n"),
        ]
    )


@pytest.fixture
def embeddings():
    return FakeEmbeddingsClient(
        {
            "Use the secrets store.\n": [1.0, 0.0, 0.0],
            "Run the deploy command.\n": [0.0, 1.0, 0.0],
            "```\ndeploy --now\n```\n": [0.0, 0.9, 0.1],
            "how do secrets work?": [0.9, 0.1, 0.0],
            "how do I deploy?": [0.0, 1.0, 0.05],
        }
    )
