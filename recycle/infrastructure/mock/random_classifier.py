"""Random Waste Classifier - 개발용 mock 분류기.

원격 API 자격 증명이 없는 로컬/개발 환경에서 분류 흐름을 유지하기 위한 구현.
응답 지연을 흉내낸 뒤 5개 카테고리 중 하나를 균등 확률로 반환한다.
"""

from __future__ import annotations

import asyncio
import logging
import random

from recycle.application.classify.ports import FallbackClassifierPort
from recycle.domain.enums import WASTE_CATEGORIES, WasteCategory

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 1.0


class RandomWasteClassifier(FallbackClassifierPort):
    """균등 분포 mock 분류기."""

    def __init__(
        self,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        rng: random.Random | None = None,
    ) -> None:
        self._delay_seconds = delay_seconds
        self._rng = rng or random.Random()

    async def classify(self, image: bytes) -> WasteCategory:
        logger.info("Using mock classification service", extra={"image_bytes": len(image)})
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)

        category = self._rng.choice(WASTE_CATEGORIES)
        logger.info("Mock classified image", extra={"category": category.value})
        return category
