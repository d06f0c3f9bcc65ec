import logging
from contextlib import asynccontextmanager
from uuid import uuid4

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skillswap.api.routes import ai, meta
from skillswap.core.config import Settings, get_settings
from skillswap.core.database import create_database
from skillswap.core.errors import ContentGenerationError
from skillswap.services.content import ContentGenerator
from skillswap.services.llm import build_llm_client

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logging.basicConfig(level=settings.log_level.upper())
        http = httpx.AsyncClient(timeout=settings.llm_timeout_seconds)
        database = None
        try:
            client = build_llm_client(settings, http)
            if settings.database_url:
                database = create_database(settings)
            else:
                logger.warning("DATABASE_URL is not configured; database queries are unavailable")
            app.state.settings = settings
            app.state.database = database
            app.state.generator = ContentGenerator(
                client,
                max_retries=settings.ai_max_retries,
                base_delay=settings.ai_retry_base_delay_seconds,
                strict=settings.ai_strict_mode,
            )
            yield
        finally:
            if database is not None:
                database.dispose()
            await http.aclose()

    app = FastAPI(title="SkillSwap AI API", version="0.1.0", lifespan=lifespan)

    origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-Id"],
    )

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = request.headers.get("X-Request-Id") or uuid4().hex
        response = await call_next(request)
        response.headers["X-Request-Id"] = request_id
        return response

    @app.exception_handler(ContentGenerationError)
    async def content_generation_failed(_: Request, exc: ContentGenerationError):
        return JSONResponse(status_code=502, content={"detail": str(exc), "kind": exc.kind})

    for prefix in ("", "/api"):
        app.include_router(ai.router, tags=["ai"], prefix=prefix)
        app.include_router(meta.router, tags=["meta"], prefix=prefix)

    return app


app = create_app()
