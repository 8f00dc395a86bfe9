"""
Run the HTTP service.

Example:
    python -m scripts.serve
"""

from __future__ import annotations

import uvicorn

from docqa.config import settings


def main() -> None:
    uvicorn.run("docqa.main:app", host=settings.app_host, port=settings.app_port)


if __name__ == "__main__":
    main()
