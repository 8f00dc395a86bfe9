"""
Simple smoke run of the prompt pipeline: stream one answer to stdout.

Example:
    python -m scripts.ask --prompt "How do I deploy?"
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from docqa.config import setup_logging
from docqa.rag.pipeline import text_stream
from docqa.state import build_default_state


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ask one question about the documentation.")
    parser.add_argument("--prompt", "-p", required=True, help="Question")
    return parser.parse_args()


async def ask(prompt: str) -> None:
    app_state = build_default_state()
    result = await app_state.prompt_service.answer(prompt)
    async for fragment in text_stream(result):
        sys.stdout.write(fragment)
        sys.stdout.flush()
    sys.stdout.write("\n")


def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)
    args = parse_args()

    try:
        asyncio.run(ask(args.prompt))
    except Exception:
        logger.exception("Ask failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
