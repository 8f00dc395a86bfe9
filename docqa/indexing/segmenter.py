"""
Line-oriented segmentation of documentation text into embeddable chunks.

A chunk is either a fenced code block (fence lines included) or a prose
paragraph delimited by blank lines. Front matter and headings never end up in
a chunk.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List

CODE_FENCE = "```"
FRONT_MATTER_MARKER = "---"
HEADING_MARKER = "#"


class SegmenterState(Enum):
    IDLE = "idle"
    CODE_BLOCK = "code_block"
    FRONT_MATTER = "front_matter"
    PROSE = "prose"


@dataclass(frozen=True)
class Transition:
    state: SegmenterState
    buffer: str
    chunk: str | None = None


def _is_blank(line: str) -> bool:
    return not line.strip()


def transition(state: SegmenterState, buffer: str, line: str) -> Transition:
    """
    Pure transition function: consume one line, return the next state, the
    updated buffer and the chunk completed by this line, if any.
    """
    if state is SegmenterState.IDLE:
        if line.startswith(CODE_FENCE):
            return Transition(SegmenterState.CODE_BLOCK, line + "\n")
        if line.startswith(FRONT_MATTER_MARKER):
            return Transition(SegmenterState.FRONT_MATTER, "")
        if _is_blank(line) or line.startswith(HEADING_MARKER):
            return Transition(SegmenterState.IDLE, "")
        return Transition(SegmenterState.PROSE, line + "\n")

    if state is SegmenterState.CODE_BLOCK:
        buffer += line + "\n"
        if line.startswith(CODE_FENCE):
            return Transition(SegmenterState.IDLE, "", chunk=buffer)
        return Transition(SegmenterState.CODE_BLOCK, buffer)

    if state is SegmenterState.FRONT_MATTER:
        if line.startswith(FRONT_MATTER_MARKER):
            return Transition(SegmenterState.IDLE, "")
        return Transition(SegmenterState.FRONT_MATTER, "")

    # PROSE
    if _is_blank(line):
        return Transition(SegmenterState.IDLE, "", chunk=buffer)
    return Transition(SegmenterState.PROSE, buffer + line + "\n")


def _iter_lines(raw_text: str) -> Iterator[str]:
    lines = raw_text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line.rstrip("\r")


def segment(raw_text: str) -> List[str]:
    """
    Split raw documentation text into ordered, non-empty chunks.

    Never raises: unterminated fences or front matter still yield whatever
    could be assembled. A buffer left open at end of input is flushed as the
    last chunk.
    """
    chunks: List[str] = []
    state = SegmenterState.IDLE
    buffer = ""

    for line in _iter_lines(raw_text):
        step = transition(state, buffer, line)
        if step.chunk:
            chunks.append(step.chunk)
        state, buffer = step.state, step.buffer

    if buffer:
        chunks.append(buffer)
    return chunks


__all__ = ["segment", "transition", "SegmenterState", "Transition", "CODE_FENCE", "FRONT_MATTER_MARKER", "HEADING_MARKER"]
