"""Camera 관련 예외."""

from recycle_kiosk.application.common.exceptions.base import KioskError


class CameraError(KioskError):
    """카메라 획득 실패 (플랫폼 오류를 분류할 수 없는 경우)."""

    def __init__(
        self,
        message: str = "Could not access camera. Please try again or use a different device.",
    ) -> None:
        super().__init__(message)


class CameraUnavailableError(CameraError):
    """카메라 백엔드 자체가 없음."""

    def __init__(self) -> None:
        super().__init__("Camera not supported on this device.")


class CameraPermissionDeniedError(CameraError):
    def __init__(self) -> None:
        super().__init__("Camera access denied. Please grant permission to use your camera.")


class CameraDeviceNotFoundError(CameraError):
    def __init__(self) -> None:
        super().__init__("No camera found on your device.")


class CameraDeviceBusyError(CameraError):
    def __init__(self) -> None:
        super().__init__("Camera is already in use by another application.")


class CaptureFailedError(KioskError):
    """프레임 캡처/인코딩 실패."""

    def __init__(self) -> None:
        super().__init__("Failed to capture image")
