"""
Application configuration loaded from environment variables.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from docqa.errors import SetupError


class Settings(BaseSettings):
    """Centralised application settings."""

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openai_api_key: SecretStr | None = Field(default=None, alias="OPENAI_API_KEY")
    llm_model_name: str = Field(default="gpt-4.1-mini", alias="LLM_MODEL_NAME")
    embedding_model_name: str = Field(default="text-embedding-3-small", alias="EMBEDDING_MODEL_NAME")
    embedding_dimension: int = Field(default=1536, gt=0, alias="EMBEDDING_DIMENSION")
    embed_batch: int = Field(default=64, gt=0, alias="EMBED_BATCH")
    openai_timeout_sec: float = Field(default=30.0, gt=0, alias="OPENAI_TIMEOUT_SEC")
    openai_max_retries: int = Field(default=2, ge=0, alias="OPENAI_MAX_RETRIES")

    vector_store_backend: str = Field(default="chroma", alias="VECTOR_STORE_BACKEND")
    vector_store_path: str = Field(default="./data/vector_store", alias="VECTOR_STORE_PATH")
    vector_collection: str = Field(default="docs", alias="VECTOR_COLLECTION")
    vector_distance: str = Field(default="cosine", alias="VECTOR_DISTANCE")
    vector_store_timeout_sec: float = Field(default=10.0, gt=0, alias="VECTOR_STORE_TIMEOUT_SEC")

    chroma_host: str | None = Field(default=None, alias="CHROMA_HOST")
    chroma_port: int = Field(default=8000, alias="CHROMA_PORT")

    qdrant_url: str | None = Field(default=None, alias="QDRANT_URL")
    qdrant_api_key: SecretStr | None = Field(default=None, alias="QDRANT_API_KEY")

    docs_dir: str = Field(default="./docs", alias="DOCS_DIR")
    docs_suffix: str = Field(default=".mdx", alias="DOCS_SUFFIX")
    static_dir: str = Field(default="./static", alias="STATIC_DIR")
    embed_on_startup: bool = Field(default=False, alias="EMBED_ON_STARTUP")

    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")


settings = Settings()


def setup_logging() -> logging.Logger:
    """
    Configure base logging for the app.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    )
    return logging.getLogger("docqa")


def public_settings() -> Dict[str, Any]:
    """
    Return settings without secrets for safe logging/inspection.
    """
    return settings.model_dump(
        exclude={"openai_api_key", "qdrant_api_key"},
        exclude_none=True,
    )


def require_openai_api_key(current: Settings | None = None) -> str:
    """Return the OpenAI key or fail startup with SetupError."""
    current = current or settings
    if current.openai_api_key is None or not current.openai_api_key.get_secret_value():
        raise SetupError("OPENAI_API_KEY not available")
    return current.openai_api_key.get_secret_value()


__all__ = ["Settings", "settings", "setup_logging", "public_settings", "require_openai_api_key"]
