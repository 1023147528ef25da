"""Kiosk 예외 베이스 클래스."""


class KioskError(Exception):
    """모든 키오스크 예외의 베이스 클래스.

    message는 그대로 화면에 표시할 수 있는 문장이어야 한다.
    """

    def __init__(self, message: str = "Something went wrong") -> None:
        self.message = message
        super().__init__(message)
