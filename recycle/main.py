"""Recycle API Main Application.

- POST /api/classify: 폐기물 이미지 분류 (Hugging Face 프록시 + dev mock fallback)
- GET  /api/health: 헬스 체크
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recycle.presentation.http.controllers import classify_router, health_router
from recycle.presentation.http.errors import register_exception_handlers
from recycle.presentation.http.middleware import AccessLogMiddleware
from recycle.setup.config import Settings, get_settings
from recycle.setup.dependencies import build_fallback_classifier, build_remote_classifier
from recycle.setup.logging import configure_logging
from recycle.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_httpx,
    shutdown_tracing,
)

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI 라이프스팬 이벤트."""
    settings: Settings = app.state.settings
    logger.info(
        f"Starting {settings.service_name} v{settings.service_version}",
        extra={
            "environment": settings.environment,
            "allow_fallback": settings.allow_fallback,
            "has_api_key": settings.huggingface_api_key is not None,
        },
    )
    if settings.huggingface_api_key is None:
        logger.warning("HUGGINGFACE_API_KEY is not set; remote classification will fail")

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await app.state.remote_classifier.close()
    shutdown_tracing()


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 생성."""
    settings = settings or get_settings()

    configure_tracing(settings)
    instrument_httpx(settings)

    app = FastAPI(
        title="Recycle API",
        description="Waste image classification proxy",
        version=settings.service_version,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.remote_classifier = build_remote_classifier(settings)
    app.state.fallback_classifier = build_fallback_classifier(settings)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AccessLogMiddleware)

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app, settings)

    register_exception_handlers(app)

    # Routers
    app.include_router(health_router, prefix="/api")
    app.include_router(classify_router, prefix="/api")

    return app


app = create_app()


def run() -> None:
    """`recycle-api` 콘솔 스크립트."""
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
