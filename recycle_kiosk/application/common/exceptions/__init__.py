"""Kiosk 애플리케이션 예외."""

from recycle_kiosk.application.common.exceptions.base import KioskError
from recycle_kiosk.application.common.exceptions.camera import (
    CameraDeviceBusyError,
    CameraDeviceNotFoundError,
    CameraError,
    CameraPermissionDeniedError,
    CameraUnavailableError,
    CaptureFailedError,
)
from recycle_kiosk.application.common.exceptions.classification import (
    ClassificationError,
    InvalidResponseError,
    NetworkError,
    ServerError,
)
from recycle_kiosk.application.common.exceptions.session import InvalidStateTransitionError

__all__ = [
    "CameraDeviceBusyError",
    "CameraDeviceNotFoundError",
    "CameraError",
    "CameraPermissionDeniedError",
    "CameraUnavailableError",
    "CaptureFailedError",
    "ClassificationError",
    "InvalidResponseError",
    "InvalidStateTransitionError",
    "KioskError",
    "NetworkError",
    "ServerError",
]
