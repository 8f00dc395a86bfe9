from __future__ import annotations

from pydantic import BaseModel, Field


class PromptRequest(BaseModel):
    """Question about the documentation."""

    prompt: str = Field(..., description="User question")


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
    documents: int = Field(default=0, ge=0, description="Loaded documents")


__all__ = ["PromptRequest", "HealthResponse"]
