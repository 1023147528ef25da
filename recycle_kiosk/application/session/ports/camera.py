"""Camera Port - 장치 카메라 추상화.

구현체의 메서드는 모두 blocking 호출이다. 컨트롤러가 스레드로 넘겨 실행한다.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from recycle_kiosk.domain.enums import FacingMode

logger = logging.getLogger(__name__)


class VideoStream(ABC):
    """획득한 라이브 스트림. stop() 이후에는 재사용 불가."""

    @property
    @abstractmethod
    def facing_mode(self) -> FacingMode:
        raise NotImplementedError

    @property
    @abstractmethod
    def is_active(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_frame(self) -> Any | None:
        """현재 프레임 (BGR ndarray). 읽기 실패 시 None."""
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        """장치 해제. 여러 번 호출해도 안전해야 한다."""
        raise NotImplementedError


class CameraPort(ABC):
    """카메라 포트."""

    @abstractmethod
    def acquire(self, facing_mode: FacingMode) -> VideoStream:
        """스트림 획득.

        Raises:
            CameraUnavailableError: 카메라 백엔드 없음
            CameraPermissionDeniedError: 권한 거부
            CameraDeviceNotFoundError: 장치 없음
            CameraDeviceBusyError: 다른 프로세스가 사용 중
            CameraError: 그 외 플랫폼 오류
        """
        raise NotImplementedError

    @abstractmethod
    def capture_frame(self, stream: VideoStream) -> bytes:
        """현재 프레임을 JPEG으로 인코딩.

        Raises:
            CaptureFailedError: 프레임 없음 또는 인코딩 결과 없음
        """
        raise NotImplementedError

    def switch_facing(self, current: VideoStream | None, facing_mode: FacingMode) -> VideoStream:
        """기존 스트림을 먼저 해제한 뒤 새 방향으로 재획득. 두 스트림이 동시에 살아있지 않는다."""
        if current is not None:
            logger.info(
                "Releasing camera before switching",
                extra={"from": current.facing_mode.value, "to": facing_mode.value},
            )
            current.stop()
        return self.acquire(facing_mode)
