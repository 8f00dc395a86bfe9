"""HTTP contract tests for /prompt and /health."""

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from docqa.errors import NotFoundError
from docqa.indexing.pipeline import embed_documentation
from docqa.main import create_app
from docqa.rag.pipeline import Failure
from docqa.rag.streaming import ERROR_MESSAGE
from docqa.state import AppState
from docqa.vector_store.base import document_payload
from tests.fakes import FakeDeltaStream, make_delta


@pytest.fixture
def llm():
    client = AsyncMock()
    client.chat_stream.side_effect = lambda prompt, contents: FakeDeltaStream(
        [make_delta("Run "), make_delta("deploy."), make_delta(None)]
    )
    return client


@pytest.fixture
def client_factory(documents, vector_index, embeddings, llm, tmp_path):
    def build():
        state = AppState.build(documents, vector_index, embeddings, llm)
        return TestClient(create_app(state, static_dir=str(tmp_path / "no-static")))

    return build


class TestPromptEndpoint:
    def test_streams_answer_as_plain_text(self, client_factory, vector_index, embeddings, documents, llm):
        asyncio.run(embed_documentation(vector_index, embeddings, documents.documents()))
        client = client_factory()

        response = client.post("/prompt", json={"prompt": "how do I deploy?"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Run deploy.\n"
        prompt, contents = llm.chat_stream.call_args.args
        assert prompt == "how do I deploy?"
        assert contents == documents["guide/deploy.mdx"].contents

    def test_stale_index_returns_generic_error_with_200(self, client_factory, vector_index, llm):
        asyncio.run(vector_index.upsert([1.0, 0.0, 0.0], document_payload("deleted.mdx")))
        client = client_factory()

        response = client.post("/prompt", json={"prompt": "how do secrets work?"})

        assert response.status_code == 200
        assert response.text == ERROR_MESSAGE
        llm.chat_stream.assert_not_awaited()

    def test_connection_drop_mid_answer_keeps_partial_text(self, client_factory, vector_index, embeddings, documents, llm):
        asyncio.run(embed_documentation(vector_index, embeddings, documents.documents()))
        llm.chat_stream.side_effect = lambda prompt, contents: FakeDeltaStream(
            [make_delta("Run ")], error=httpx.ReadError("peer reset")
        )
        client = client_factory()

        response = client.post("/prompt", json={"prompt": "how do I deploy?"})

        assert response.status_code == 200
        assert response.text == "Run "

    def test_completion_request_failure_returns_generic_error(self, client_factory, vector_index, embeddings, documents, llm):
        asyncio.run(embed_documentation(vector_index, embeddings, documents.documents()))
        llm.chat_stream.side_effect = httpx.ConnectError("refused")
        client = client_factory()

        response = client.post("/prompt", json={"prompt": "how do I deploy?"})

        assert response.status_code == 200
        assert response.text == ERROR_MESSAGE

    def test_empty_index_returns_generic_error(self, client_factory):
        response = client_factory().post("/prompt", json={"prompt": "anything"})

        assert response.status_code == 200
        assert response.text == ERROR_MESSAGE

    def test_unexpected_failure_returns_generic_error(self, documents, vector_index, embeddings, llm):
        state = AppState(documents, vector_index, embeddings, prompt_service=AsyncMock())
        state.prompt_service.answer.side_effect = RuntimeError("boom")
        client = TestClient(create_app(state, static_dir="/nonexistent"))

        response = client.post("/prompt", json={"prompt": "anything"})

        assert response.status_code == 200
        assert response.text == ERROR_MESSAGE
        assert "boom" not in response.text

    def test_error_detail_never_reaches_client(self, documents, vector_index, embeddings, llm):
        state = AppState(documents, vector_index, embeddings, prompt_service=AsyncMock())
        state.prompt_service.answer.return_value = Failure(NotFoundError("secret/internal/path.mdx"))
        client = TestClient(create_app(state, static_dir="/nonexistent"))

        response = client.post("/prompt", json={"prompt": "anything"})

        assert "secret/internal" not in response.text

    def test_missing_prompt_field_is_rejected(self, client_factory):
        response = client_factory().post("/prompt", json={})

        assert response.status_code == 422


class TestHealthAndStatic:
    def test_health(self, client_factory):
        response = client_factory().get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "documents": 2}

    def test_static_files_served_at_root(self, documents, vector_index, embeddings, llm, tmp_path):
        (tmp_path / "index.html").write_text("<h1>Docs QA</h1>", encoding="utf-8")
        state = AppState.build(documents, vector_index, embeddings, llm)
        client = TestClient(create_app(state, static_dir=str(tmp_path)))

        response = client.get("/")

        assert response.status_code == 200
        assert "Docs QA" in response.text
        assert client.get("/health").status_code == 200
