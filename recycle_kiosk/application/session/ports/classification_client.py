"""Classification Client Port - 분류 서버 호출 추상화."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recycle_kiosk.domain.value_objects import CapturedImage, ClassificationResult


class ClassificationClientPort(ABC):
    @abstractmethod
    async def classify(self, image: CapturedImage) -> ClassificationResult:
        """이미지 업로드 후 분류 결과 반환. 재시도하지 않는다.

        Raises:
            NetworkError: 응답 없음
            ServerError: non-2xx
            InvalidResponseError: 2xx지만 본문이 유효하지 않음
        """
        raise NotImplementedError

    async def close(self) -> None:
        return None
