"""Remote Classifier Port - 외부 이미지 분류 모델 추상화."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recycle.domain.value_objects import ClassificationOutcome


class RemoteClassifierPort(ABC):
    """원격 분류 모델 포트.

    Hugging Face Inference API 등 구현체를 DI로 주입.
    구현체는 네트워크/응답 오류를 예외로 던지지 않고 `Failed` outcome으로 반환한다.
    """

    @abstractmethod
    async def classify(self, image: bytes) -> ClassificationOutcome:
        """이미지 분류.

        Args:
            image: 원본 이미지 바이트

        Returns:
            Recognized | DefaultApplied | Failed
        """
        raise NotImplementedError

    async def close(self) -> None:
        """보유한 리소스 정리 (HTTP 클라이언트 등)."""
        return None
