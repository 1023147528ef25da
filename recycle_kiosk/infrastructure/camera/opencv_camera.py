"""OpenCV Camera - CameraPort 구현.

facing mode → 장치 인덱스 매핑은 설정으로 주입한다 (environment=후면, user=전면).
OpenCV 는 장치 오류를 예외 대신 isOpened()/read() 실패로 알리므로
장치 노드 상태를 확인해 사용자용 오류로 변환한다.
"""

from __future__ import annotations

import errno
import logging
import os
import sys
import threading
from collections.abc import Callable, Sequence
from typing import Any

import cv2
import numpy as np

from recycle_kiosk.application.common.exceptions import (
    CameraDeviceBusyError,
    CameraDeviceNotFoundError,
    CameraError,
    CameraPermissionDeniedError,
    CameraUnavailableError,
    CaptureFailedError,
)
from recycle_kiosk.application.session.ports import CameraPort, VideoStream
from recycle_kiosk.domain.enums import FacingMode

logger = logging.getLogger(__name__)

DEFAULT_FRAME_SIZE = (1280, 720)
DEFAULT_JPEG_QUALITY = 95

_NOT_FOUND_ERRNOS = frozenset({errno.ENOENT, errno.ENODEV, errno.ENXIO})
_BUSY_ERRNOS = frozenset({errno.EBUSY})


def _default_backend_probe() -> Sequence[Any]:
    return cv2.videoio_registry.getCameraBackends()


class OpenCVVideoStream(VideoStream):
    """cv2.VideoCapture 래퍼. 미리보기 루프와 캡처 스레드가 함께 읽으므로 read 를 직렬화한다."""

    def __init__(self, capture: Any, facing_mode: FacingMode, device_index: int) -> None:
        self._capture = capture
        self._facing_mode = facing_mode
        self._device_index = device_index
        self._lock = threading.Lock()
        self._active = True

    @property
    def facing_mode(self) -> FacingMode:
        return self._facing_mode

    @property
    def device_index(self) -> int:
        return self._device_index

    @property
    def is_active(self) -> bool:
        return self._active

    def read_frame(self) -> np.ndarray | None:
        with self._lock:
            if not self._active:
                return None
            ok, frame = self._capture.read()
        if not ok or frame is None or frame.size == 0:
            return None
        return frame

    def stop(self) -> None:
        with self._lock:
            if not self._active:
                return
            self._active = False
            self._capture.release()
        logger.info(
            "Camera released",
            extra={"facing_mode": self._facing_mode.value, "device_index": self._device_index},
        )


class OpenCVCamera(CameraPort):
    """OpenCV 기반 카메라."""

    def __init__(
        self,
        device_indices: dict[FacingMode, int] | None = None,
        frame_size: tuple[int, int] = DEFAULT_FRAME_SIZE,
        jpeg_quality: int = DEFAULT_JPEG_QUALITY,
        capture_factory: Callable[[int], Any] | None = None,
        backend_probe: Callable[[], Sequence[Any]] | None = None,
    ) -> None:
        """초기화.

        Args:
            device_indices: facing mode → 장치 인덱스
            frame_size: 요청 해상도 (ideal, 장치가 무시할 수 있음)
            jpeg_quality: JPEG 품질 (0-100)
            capture_factory: 인덱스 → VideoCapture 생성 함수 (테스트 주입용)
            backend_probe: 사용 가능한 카메라 백엔드 목록 조회 함수
        """
        self._device_indices = device_indices or {
            FacingMode.ENVIRONMENT: 0,
            FacingMode.USER: 1,
        }
        self._frame_size = frame_size
        self._jpeg_quality = jpeg_quality
        self._capture_factory = capture_factory or cv2.VideoCapture
        self._backend_probe = backend_probe or _default_backend_probe

    def device_index(self, facing_mode: FacingMode) -> int:
        return self._device_indices[facing_mode]

    def acquire(self, facing_mode: FacingMode) -> VideoStream:
        if not self._backend_probe():
            raise CameraUnavailableError()

        index = self.device_index(facing_mode)
        logger.info(
            "Opening camera",
            extra={"facing_mode": facing_mode.value, "device_index": index},
        )

        try:
            capture = self._capture_factory(index)
        except OSError as e:
            raise self._map_os_error(e) from e
        except cv2.error as e:
            raise CameraError() from e

        if not capture.isOpened():
            capture.release()
            raise self._diagnose_unopened(index)

        width, height = self._frame_size
        capture.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        capture.set(cv2.CAP_PROP_FRAME_HEIGHT, height)

        # 장치가 열렸어도 다른 프로세스가 스트리밍 중이면 첫 프레임에서 실패한다
        ok, _ = capture.read()
        if not ok:
            capture.release()
            raise CameraDeviceBusyError()

        return OpenCVVideoStream(capture, facing_mode, index)

    def capture_frame(self, stream: VideoStream) -> bytes:
        frame = stream.read_frame()
        if frame is None:
            raise CaptureFailedError()

        ok, buffer = cv2.imencode(
            ".jpg", frame, [int(cv2.IMWRITE_JPEG_QUALITY), self._jpeg_quality]
        )
        if not ok or buffer is None or buffer.size == 0:
            raise CaptureFailedError()

        data = buffer.tobytes()
        logger.info(
            "Frame captured",
            extra={"image_bytes": len(data), "width": frame.shape[1], "height": frame.shape[0]},
        )
        return data

    @staticmethod
    def _map_os_error(error: OSError) -> CameraError:
        if isinstance(error, PermissionError):
            return CameraPermissionDeniedError()
        if error.errno in _BUSY_ERRNOS:
            return CameraDeviceBusyError()
        if isinstance(error, FileNotFoundError) or error.errno in _NOT_FOUND_ERRNOS:
            return CameraDeviceNotFoundError()
        return CameraError()

    @staticmethod
    def _diagnose_unopened(index: int) -> CameraError:
        if not sys.platform.startswith("linux"):
            return CameraDeviceNotFoundError()

        device = f"/dev/video{index}"
        if not os.path.exists(device):
            return CameraDeviceNotFoundError()
        if not os.access(device, os.R_OK | os.W_OK):
            return CameraPermissionDeniedError()
        return CameraError()
