"""분류 관련 도메인 예외."""

from recycle.domain.exceptions.base import DomainError


class InvalidCategoryError(DomainError):
    """closed set에 없는 카테고리."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid waste category: {value!r}")


class InvalidPredictionPayloadError(DomainError):
    """원격 분류기 응답이 [{label, score}] 형태가 아님."""

    def __init__(self, reason: str = "Invalid response from classifier API") -> None:
        super().__init__(reason)
