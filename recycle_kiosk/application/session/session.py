"""Kiosk Session - 화면 하나가 보유하는 일시적 상태."""

from __future__ import annotations

from dataclasses import dataclass

from recycle_kiosk.domain.enums import WasteCategory
from recycle_kiosk.domain.value_objects import CapturedImage


@dataclass
class KioskSession:
    """UI 세션 상태.

    classification 과 error_message 는 동시에 값을 갖지 않는다.
    """

    captured_image: CapturedImage | None = None
    classification: WasteCategory | None = None
    error_message: str | None = None
    is_voice_enabled: bool = False
    is_loading: bool = False
    camera_error: str | None = None

    def reset(self) -> None:
        """촬영 이미지/결과/오류 초기화. 음성 설정과 카메라 오류는 유지."""
        self.captured_image = None
        self.classification = None
        self.error_message = None

    def set_result(self, category: WasteCategory) -> None:
        self.classification = category
        self.error_message = None

    def set_error(self, message: str) -> None:
        self.error_message = message
        self.classification = None
