"""Fallback Classifier Port - 원격 실패 시 대체 분류기."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recycle.domain.enums import WasteCategory


class FallbackClassifierPort(ABC):
    """대체 분류기 포트.

    개발 환경에서 API 자격 증명 없이도 흐름을 유지하기 위한 용도.
    production에서는 호출되지 않는다.
    """

    @abstractmethod
    async def classify(self, image: bytes) -> WasteCategory | str:
        raise NotImplementedError
