"""분류 요청 관련 예외."""

from __future__ import annotations

from recycle_kiosk.application.common.exceptions.base import KioskError


class ClassificationError(KioskError):
    """분류 요청 실패 베이스."""


class NetworkError(ClassificationError):
    """응답 자체를 받지 못함 (연결 실패, 타임아웃)."""

    def __init__(self, message: str = "Could not reach the classification server.") -> None:
        super().__init__(message)


class ServerError(ClassificationError):
    """서버가 non-2xx로 응답."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(ClassificationError):
    """2xx 응답이지만 본문이 유효한 분류 결과가 아님."""

    def __init__(self, message: str = "Received an invalid response from the server.") -> None:
        super().__init__(message)
