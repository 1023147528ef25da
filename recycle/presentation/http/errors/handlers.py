"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답 본문은 항상 {"message": ...} 형태 (500은 "error" 포함).
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recycle.application.common.exceptions.base import ApplicationError
from recycle.application.common.exceptions.classification import ClassificationFailedError
from recycle.application.common.exceptions.validation import (
    ImageRequiredError,
    ImageTooLargeError,
)
from recycle.domain.exceptions.base import DomainError

logger = logging.getLogger(__name__)

CLASSIFICATION_FAILED_MESSAGE = "Failed to classify image"


def _classification_failed(error: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"message": CLASSIFICATION_FAILED_MESSAGE, "error": error or "Unknown error"},
    )


def _is_body_error(error: dict) -> bool:
    loc = error.get("loc") or ()
    return bool(loc) and loc[0] == "body"


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ImageRequiredError)
    async def image_required_handler(request: Request, exc: ImageRequiredError):
        return JSONResponse(status_code=400, content={"message": exc.message})

    @app.exception_handler(ImageTooLargeError)
    async def image_too_large_handler(request: Request, exc: ImageTooLargeError):
        return JSONResponse(status_code=413, content={"message": exc.message})

    @app.exception_handler(ClassificationFailedError)
    async def classification_failed_handler(request: Request, exc: ClassificationFailedError):
        return _classification_failed(exc.message)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        # closed set 검증 실패 등은 서버 측 결함
        return _classification_failed(exc.message)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(status_code=400, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # multipart body의 유일한 필드는 image → 파일이 아닌 값은 누락과 동일
        errors = exc.errors()
        if any(_is_body_error(error) for error in errors):
            return JSONResponse(status_code=400, content={"message": ImageRequiredError().message})
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return _classification_failed(str(exc))
