"""Classify API Controller.

- POST /classify: multipart `image` 업로드 → {"category": ...}
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, File, Response, UploadFile
from pydantic import BaseModel, Field

from recycle.application.classify.commands import ClassifyImageRequest
from recycle.application.common.exceptions import (
    ApplicationError,
    ClassificationFailedError,
    ImageRequiredError,
)
from recycle.domain.enums import WasteCategory
from recycle.setup.dependencies import ClassifyCommandDep

router = APIRouter(tags=["classify"])
logger = logging.getLogger(__name__)

CLASSIFICATION_SOURCE_HEADER = "X-Classification-Source"


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────


class ClassificationResponse(BaseModel):
    """분류 결과 스키마."""

    category: WasteCategory = Field(description="재활용 카테고리")


class ErrorResponse(BaseModel):
    """입력 오류 응답 스키마 (400/413)."""

    message: str


class ClassificationErrorResponse(BaseModel):
    """분류 실패 응답 스키마 (500)."""

    message: str = Field(default="Failed to classify image")
    error: str = Field(default="Unknown error")


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.post(
    "/classify",
    response_model=ClassificationResponse,
    responses={
        400: {"model": ErrorResponse, "description": "이미지 누락"},
        413: {"model": ErrorResponse, "description": "업로드 크기 초과"},
        500: {"model": ClassificationErrorResponse, "description": "분류 실패"},
    },
)
async def classify(
    command: ClassifyCommandDep,
    response: Response,
    image: UploadFile | None = File(default=None),
) -> ClassificationResponse:
    """업로드 이미지 분류.

    Raises:
        ImageRequiredError: image 필드 없음 (400)
        ImageTooLargeError: 크기 제한 초과 (413)
        ClassificationFailedError: 원격 실패 + fallback 불가, 또는 예상치 못한 오류 (500)
    """
    if image is None:
        raise ImageRequiredError()

    # 제한 + 1 바이트까지만 읽어 초과 여부를 판단한다
    data = await image.read(command.max_upload_bytes + 1)
    request = ClassifyImageRequest(
        image=data,
        filename=image.filename,
        content_type=image.content_type,
    )

    try:
        result = await command.execute(request)
    except ApplicationError:
        raise
    except Exception as e:
        logger.exception("Unhandled error during classification")
        raise ClassificationFailedError(str(e) or None) from e

    response.headers[CLASSIFICATION_SOURCE_HEADER] = result.source.value
    return ClassificationResponse(category=result.category)
