import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from docqa.api.routes import router as api_router
from docqa.config import public_settings, settings, setup_logging
from docqa.indexing.pipeline import ReindexService
from docqa.state import AppState, build_default_state

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Indexing finishes before the first request is served.
    # Handles passed to create_app belong to the caller.
    owned = getattr(app.state, "docqa", None) is None
    if owned:
        app_state = build_default_state()
        if settings.embed_on_startup:
            service = ReindexService(app_state.vector_index, app_state.embeddings_client)
            try:
                await service.run(app_state.documents.documents())
            except Exception:
                await app_state.aclose()
                raise
        app.state.docqa = app_state
    logger.info("Serving documents", extra={"documents": len(app.state.docqa.documents)})
    try:
        yield
    finally:
        if owned:
            await app.state.docqa.aclose()
            app.state.docqa = None
            logger.info("Closed service clients")


def create_app(app_state: AppState | None = None, static_dir: str | None = None) -> FastAPI:
    app = FastAPI(title="Docs QA", lifespan=lifespan)
    app.state.docqa = app_state

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    app.include_router(api_router)

    static_path = Path(static_dir or settings.static_dir)
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=static_path, html=True), name="static")

    return app


logger.info("Application starting")
logger.info("Loaded settings: %s", public_settings())

app = create_app()
