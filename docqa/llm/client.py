"""
OpenAI chat LLM client with streamed completions.
"""

from __future__ import annotations

from typing import Any, Dict, List

from openai import AsyncOpenAI, AsyncStream
from openai.types.chat import ChatCompletionChunk

from docqa.config import settings
from docqa.embeddings.client import build_openai_client

DEFAULT_LLM_MODEL = settings.llm_model_name
DEFAULT_TEMPERATURE = 0.0

SYSTEM_PROMPT = (
    "You are a helpful assistant answering questions about a software project's documentation. "
    "Answer using the documentation provided by the user. "
    "If the documentation does not contain the answer, say so instead of guessing. "
    "Format the answer in Markdown and include code examples when they help."
)


def build_messages(prompt: str, contents: str) -> List[Dict[str, Any]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": "\n\n".join(
                [
                    "Here is the relevant documentation:",
                    contents,
                    f"Question: {prompt}",
                ]
            ),
        },
    ]


class LLMClient:
    def __init__(
        self,
        model: str = DEFAULT_LLM_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        api_key = settings.openai_api_key.get_secret_value() if settings.openai_api_key else None
        self.client = client or build_openai_client(api_key)

    async def chat_stream(self, prompt: str, contents: str) -> AsyncStream[ChatCompletionChunk]:
        """Open a streamed chat completion; the caller owns closing it."""
        return await self.client.chat.completions.create(
            model=self.model,
            temperature=self.temperature,
            messages=build_messages(prompt, contents),
            stream=True,
        )

    async def close(self) -> None:
        await self.client.close()


__all__ = ["LLMClient", "DEFAULT_LLM_MODEL", "DEFAULT_TEMPERATURE", "SYSTEM_PROMPT", "build_messages"]
