"""검증 관련 애플리케이션 예외."""

from recycle.application.common.exceptions.base import ApplicationError


class ImageRequiredError(ApplicationError):
    """이미지 필수 입력 누락."""

    def __init__(self) -> None:
        super().__init__("No image provided")


class ImageTooLargeError(ApplicationError):
    """업로드 크기 제한 초과."""

    def __init__(self, limit_bytes: int) -> None:
        self.limit_bytes = limit_bytes
        limit_mib = limit_bytes / (1024 * 1024)
        super().__init__(f"Image exceeds the {limit_mib:g} MiB upload limit")
