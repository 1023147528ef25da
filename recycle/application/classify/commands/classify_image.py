"""Classify Image Command - 업로드 이미지 분류.

흐름:
1. 입력 검증 (이미지 누락/크기 초과)
2. 원격 분류기 호출 → Recognized | DefaultApplied | Failed
3. Failed + allow_fallback → mock 분류 / Failed + production → ClassificationFailedError
4. 최종 카테고리를 출처와 무관하게 closed set으로 재검증
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from recycle.application.classify.ports import FallbackClassifierPort, RemoteClassifierPort
from recycle.application.common.exceptions import (
    ClassificationFailedError,
    ImageRequiredError,
    ImageTooLargeError,
)
from recycle.domain.enums import ClassificationSource, WasteCategory
from recycle.domain.exceptions import InvalidCategoryError
from recycle.domain.value_objects import ClassificationOutcome, DefaultApplied, Failed

logger = logging.getLogger(__name__)

# 5 MiB
MAX_UPLOAD_BYTES = 5 * 1024 * 1024


@dataclass
class ClassifyImageRequest:
    """분류 요청 DTO."""

    image: bytes | None
    filename: str | None = None
    content_type: str | None = None


@dataclass
class ClassifyImageResponse:
    """분류 응답 DTO."""

    category: WasteCategory
    source: ClassificationSource


class ClassifyImageCommand:
    """이미지 분류 Command.

    fallback 허용 여부는 생성 시점에 명시적으로 주입받는다 (환경변수 직접 참조 X).
    """

    def __init__(
        self,
        remote_classifier: RemoteClassifierPort,
        fallback_classifier: FallbackClassifierPort,
        *,
        allow_fallback: bool,
        max_upload_bytes: int = MAX_UPLOAD_BYTES,
    ):
        """초기화.

        Args:
            remote_classifier: 원격 분류기 Port
            fallback_classifier: 대체(mock) 분류기 Port
            allow_fallback: 원격 실패 시 mock 분류 허용 여부 (production이면 False)
            max_upload_bytes: 업로드 크기 제한
        """
        self._remote = remote_classifier
        self._fallback = fallback_classifier
        self._allow_fallback = allow_fallback
        self._max_upload_bytes = max_upload_bytes

    @property
    def allow_fallback(self) -> bool:
        return self._allow_fallback

    @property
    def max_upload_bytes(self) -> int:
        return self._max_upload_bytes

    async def execute(self, request: ClassifyImageRequest) -> ClassifyImageResponse:
        """분류 실행.

        Raises:
            ImageRequiredError: 이미지 없음
            ImageTooLargeError: 크기 제한 초과
            ClassificationFailedError: 원격 실패 + fallback 불가
            InvalidCategoryError: 최종 카테고리가 closed set 밖
        """
        if not request.image:
            raise ImageRequiredError()
        if len(request.image) > self._max_upload_bytes:
            raise ImageTooLargeError(self._max_upload_bytes)

        start = time.perf_counter()
        logger.info(
            "Attempting classification with remote classifier",
            extra={
                "image_bytes": len(request.image),
                "content_type": request.content_type,
                "upload_filename": request.filename,
            },
        )

        outcome = await self._classify_remote(request.image)

        if isinstance(outcome, Failed):
            category, source = await self._handle_failure(outcome, request.image)
        elif isinstance(outcome, DefaultApplied):
            logger.warning(
                "Unrecognized label, default category applied",
                extra={"label": outcome.label, "category": outcome.category.value},
            )
            category, source = outcome.category, ClassificationSource.DEFAULT
        else:
            category, source = outcome.category, ClassificationSource.REMOTE

        validated = self._validate(category)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Classification completed",
            extra={
                "category": validated.value,
                "source": source.value,
                "elapsed_ms": round(elapsed_ms, 1),
            },
        )
        return ClassifyImageResponse(category=validated, source=source)

    async def _classify_remote(self, image: bytes) -> ClassificationOutcome:
        try:
            return await self._remote.classify(image)
        except Exception as e:
            logger.exception("Remote classifier raised unexpectedly")
            return Failed(reason=str(e) or type(e).__name__, error=e)

    async def _handle_failure(
        self, outcome: Failed, image: bytes
    ) -> tuple[WasteCategory | str, ClassificationSource]:
        logger.error(
            "Remote classification failed",
            extra={"reason": outcome.reason, "allow_fallback": self._allow_fallback},
        )
        if not self._allow_fallback:
            raise ClassificationFailedError(outcome.reason) from outcome.error

        logger.info("Falling back to mock classification")
        category = await self._fallback.classify(image)
        return category, ClassificationSource.MOCK

    @staticmethod
    def _validate(category: WasteCategory | str) -> WasteCategory:
        if isinstance(category, WasteCategory):
            return category
        if isinstance(category, str) and WasteCategory.is_valid(category):
            return WasteCategory(category)
        raise InvalidCategoryError(category)
