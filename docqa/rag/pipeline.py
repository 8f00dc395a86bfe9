"""
Prompt pipeline: retrieve context, defer the completion stream, and report the
outcome as an explicit result for the request boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AsyncIterator, Union

from openai import OpenAIError

from docqa.errors import PromptError
from docqa.llm.client import LLMClient
from docqa.rag.retrieval import RetrievalCoordinator
from docqa.rag.streaming import completion_stream, error_stream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Answer:
    stream: AsyncIterator[str]


@dataclass(frozen=True)
class Failure:
    error: Exception


PromptResult = Union[Answer, Failure]


class PromptService:
    """Answers one prompt with a streamed completion over the best document."""

    def __init__(
        self,
        retrieval: RetrievalCoordinator,
        llm_client: LLMClient,
        logger_: logging.Logger | None = None,
    ) -> None:
        self.retrieval = retrieval
        self.llm_client = llm_client
        self.logger = logger_ or logging.getLogger(__name__)

    async def answer(self, prompt: str) -> PromptResult:
        try:
            contents = await self.retrieval.retrieve(prompt)
        except (PromptError, OpenAIError) as exc:
            self.logger.exception("Prompt failed", extra={"error_kind": type(exc).__name__})
            return Failure(exc)
        # The completion is opened on first pull, inside the response body.
        return Answer(completion_stream(lambda: self.llm_client.chat_stream(prompt, contents)))


def text_stream(result: PromptResult) -> AsyncIterator[str]:
    """The client-facing stream for a result; failures become the generic message."""
    if isinstance(result, Answer):
        return result.stream
    return error_stream()


__all__ = ["PromptService", "PromptResult", "Answer", "Failure", "text_stream"]
