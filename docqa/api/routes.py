from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from docqa.models.schemas import HealthResponse, PromptRequest
from docqa.rag.pipeline import Failure, PromptResult, text_stream
from docqa.state import AppState

router = APIRouter()
logger = logging.getLogger(__name__)


def get_app_state(request: Request) -> AppState:
    return request.app.state.docqa


@router.get("/health", response_model=HealthResponse)
def health(app_state: AppState = Depends(get_app_state)) -> HealthResponse:
    return HealthResponse(status="ok", documents=len(app_state.documents))


@router.post("/prompt", summary="Ask a question about the documentation")
async def prompt(request: PromptRequest, app_state: AppState = Depends(get_app_state)) -> StreamingResponse:
    logger.info("Prompt request", extra={"len": len(request.prompt)})
    try:
        result: PromptResult = await app_state.prompt_service.answer(request.prompt)
    except Exception as exc:
        logger.exception("Unexpected prompt failure")
        result = Failure(exc)

    return StreamingResponse(text_stream(result), media_type="text/plain; charset=utf-8")


__all__ = ["router", "get_app_state"]
