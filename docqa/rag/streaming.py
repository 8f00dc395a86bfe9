"""
Completion streaming: map chat completion deltas to client-facing text.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Awaitable, Callable

import httpx
from openai import OpenAIError

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error with your prompt"
EMPTY_DELTA_TEXT = "\n"

# The SDK does not wrap transport errors raised while reading a stream.
STREAM_ERRORS = (OpenAIError, httpx.HTTPError)


def delta_text(delta_event: Any) -> str:
    """Concatenate every choice's content, using a line break for empty ones."""
    parts = []
    for choice in delta_event.choices or []:
        content = choice.delta.content if choice.delta is not None else None
        parts.append(content if content is not None else EMPTY_DELTA_TEXT)
    return "".join(parts)


async def chat_completion_stream(deltas: AsyncIterator[Any]) -> AsyncIterator[str]:
    """
    Lazily yield text fragments for each delta event.

    Closing this generator (client disconnect) closes the upstream completion
    stream, so no further deltas are requested.
    """
    try:
        async for delta_event in deltas:
            text = delta_text(delta_event)
            if text:
                yield text
    except STREAM_ERRORS:
        logger.exception("Completion stream failed mid-answer")
    finally:
        close = getattr(deltas, "close", None) or getattr(deltas, "aclose", None)
        if close is not None:
            await close()


async def completion_stream(open_deltas: Callable[[], Awaitable[Any]]) -> AsyncIterator[str]:
    """
    Open the upstream completion on first pull, then stream it.

    Nothing is requested upstream until the consumer starts iterating, so a
    stream that is dropped unstarted leaves no connection behind.
    """
    try:
        deltas = await open_deltas()
    except STREAM_ERRORS:
        logger.exception("Completion request failed")
        yield ERROR_MESSAGE
        return

    fragments = chat_completion_stream(deltas)
    try:
        async for fragment in fragments:
            yield fragment
    finally:
        await fragments.aclose()


async def error_stream() -> AsyncIterator[str]:
    yield ERROR_MESSAGE


__all__ = ["chat_completion_stream", "completion_stream", "STREAM_ERRORS", "error_stream", "delta_text", "ERROR_MESSAGE", "EMPTY_DELTA_TEXT"]
