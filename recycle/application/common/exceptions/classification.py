"""분류 실패 애플리케이션 예외."""

from recycle.application.common.exceptions.base import ApplicationError


class ClassificationFailedError(ApplicationError):
    """분류 실패 (fallback 불가 또는 예상치 못한 오류).

    message에는 원인 예외의 메시지가 담기며, HTTP 응답의 `error` 필드로 노출된다.
    """

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason or "Unknown error")
