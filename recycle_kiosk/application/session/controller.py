"""Kiosk Controller - 촬영 → 분류 요청 → 결과 표시/음성 안내 오케스트레이션.

상태 전이:
    idle ──start_camera──▶ capturing ──capture──▶ awaiting_result
    awaiting_result ──성공──▶ showing_result / ──실패──▶ showing_error
    showing_result | showing_error ──reset──▶ capturing (스트림 없으면 idle)

로딩 중에는 capture/switch/reset 이 거부된다.
카메라 호출은 blocking 이므로 asyncio.to_thread 로 실행한다.
"""

from __future__ import annotations

import asyncio
import logging

from recycle_kiosk.application.common.exceptions import (
    CameraError,
    InvalidStateTransitionError,
    KioskError,
)
from recycle_kiosk.application.session.ports import (
    AnnouncerPort,
    CameraPort,
    ClassificationClientPort,
    VideoStream,
)
from recycle_kiosk.application.session.session import KioskSession
from recycle_kiosk.domain.enums import FacingMode, KioskState
from recycle_kiosk.domain.value_objects import CapturedImage, ClassificationResult

logger = logging.getLogger(__name__)

GENERIC_CLASSIFY_ERROR = "Failed to classify the image. Please try again."

_TRANSITIONS: dict[KioskState, frozenset[KioskState]] = {
    KioskState.IDLE: frozenset({KioskState.CAPTURING, KioskState.AWAITING_RESULT}),
    KioskState.CAPTURING: frozenset(
        {KioskState.AWAITING_RESULT, KioskState.SHOWING_ERROR, KioskState.IDLE}
    ),
    KioskState.AWAITING_RESULT: frozenset({KioskState.SHOWING_RESULT, KioskState.SHOWING_ERROR}),
    KioskState.SHOWING_RESULT: frozenset({KioskState.CAPTURING, KioskState.IDLE}),
    KioskState.SHOWING_ERROR: frozenset({KioskState.CAPTURING, KioskState.IDLE}),
}


class KioskController:
    """키오스크 세션 컨트롤러. KioskSession 을 단독 소유한다."""

    def __init__(
        self,
        camera: CameraPort | None,
        classifier: ClassificationClientPort,
        announcer: AnnouncerPort | None = None,
        *,
        facing_mode: FacingMode = FacingMode.ENVIRONMENT,
        voice_enabled: bool = False,
    ) -> None:
        """초기화.

        Args:
            camera: 카메라 포트 (파일 분류 모드에서는 None)
            classifier: 분류 서버 클라이언트
            announcer: 음성 안내 (없으면 음성 비활성)
            facing_mode: 최초 카메라 방향 (기본 후면)
            voice_enabled: 음성 안내 초기값
        """
        self._camera = camera
        self._classifier = classifier
        self._announcer = announcer
        self._facing_mode = facing_mode
        self._stream: VideoStream | None = None
        self._state = KioskState.IDLE
        self.session = KioskSession(is_voice_enabled=voice_enabled)

    # ─────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> KioskState:
        return self._state

    @property
    def stream(self) -> VideoStream | None:
        return self._stream

    @property
    def facing_mode(self) -> FacingMode:
        return self._facing_mode

    @property
    def has_camera(self) -> bool:
        return self._camera is not None

    @property
    def can_capture(self) -> bool:
        return (
            self._state is KioskState.CAPTURING
            and self.has_camera
            and self._stream is not None
            and not self.session.is_loading
        )

    @property
    def can_switch(self) -> bool:
        return self.has_camera and not self.session.is_loading

    @property
    def can_reset(self) -> bool:
        return (
            self._state in (KioskState.SHOWING_RESULT, KioskState.SHOWING_ERROR)
            and not self.session.is_loading
        )

    def _transition(self, target: KioskState) -> None:
        if target is self._state:
            return
        if target not in _TRANSITIONS[self._state]:
            raise InvalidStateTransitionError(f"enter {target.value}", self._state.value)
        logger.debug("Kiosk state change", extra={"from": self._state.value, "to": target.value})
        self._state = target

    def _require(self, allowed: bool, action: str) -> None:
        if not allowed:
            raise InvalidStateTransitionError(action, self._state.value)

    # ─────────────────────────────────────────────────────────────────────
    # Camera
    # ─────────────────────────────────────────────────────────────────────

    async def start_camera(self) -> bool:
        """카메라 획득 (재시도 포함). 실패 시 idle 유지 + camera_error 설정.

        Returns:
            성공 여부
        """
        if self._camera is None:
            return False
        if self._stream is not None and self._stream.is_active:
            return True

        try:
            self._stream = await asyncio.to_thread(self._camera.acquire, self._facing_mode)
        except CameraError as e:
            logger.warning(
                "Camera acquisition failed",
                extra={"facing_mode": self._facing_mode.value, "reason": e.message},
            )
            self._stream = None
            self.session.camera_error = e.message
            return False

        self.session.camera_error = None
        if self._state is KioskState.IDLE:
            self._transition(KioskState.CAPTURING)
        logger.info("Camera started", extra={"facing_mode": self._facing_mode.value})
        return True

    async def switch_camera(self) -> bool:
        """전면/후면 전환. 기존 스트림을 먼저 해제한다."""
        self._require(self.can_switch, "switch camera")

        new_mode = self._facing_mode.opposite
        current, self._stream = self._stream, None
        self._facing_mode = new_mode

        try:
            self._stream = await asyncio.to_thread(self._camera.switch_facing, current, new_mode)
        except CameraError as e:
            logger.warning(
                "Camera switch failed",
                extra={"facing_mode": new_mode.value, "reason": e.message},
            )
            self.session.camera_error = e.message
            if self._state is KioskState.CAPTURING:
                self._transition(KioskState.IDLE)
            return False

        self.session.camera_error = None
        if self._state is KioskState.IDLE:
            self._transition(KioskState.CAPTURING)
        logger.info("Camera switched", extra={"facing_mode": new_mode.value})
        return True

    # ─────────────────────────────────────────────────────────────────────
    # Classification
    # ─────────────────────────────────────────────────────────────────────

    async def capture_and_classify(self) -> ClassificationResult | None:
        """현재 프레임 촬영 후 분류 요청."""
        self._require(self.can_capture, "capture")

        try:
            data = await asyncio.to_thread(self._camera.capture_frame, self._stream)
        except KioskError as e:
            logger.error("Frame capture failed", extra={"reason": e.message})
            self.session.set_error(e.message)
            self._transition(KioskState.SHOWING_ERROR)
            return None

        return await self._classify(CapturedImage.from_camera(data))

    async def classify_image(self, image: CapturedImage) -> ClassificationResult | None:
        """카메라 없이 주어진 이미지를 분류 (파일 모드)."""
        self._require(
            self._state in (KioskState.IDLE, KioskState.CAPTURING) and not self.session.is_loading,
            "classify",
        )
        return await self._classify(image)

    async def _classify(self, image: CapturedImage) -> ClassificationResult | None:
        self.session.captured_image = image
        self.session.is_loading = True
        self._transition(KioskState.AWAITING_RESULT)
        logger.info(
            "Sending image for classification",
            extra={"image_bytes": len(image), "media_type": image.media_type},
        )

        try:
            result = await self._classifier.classify(image)
        except KioskError as e:
            logger.warning("Classification failed", extra={"reason": e.message})
            self._fail(e.message)
            return None
        except Exception:
            logger.exception("Unexpected error during classification")
            self._fail(GENERIC_CLASSIFY_ERROR)
            return None
        finally:
            self.session.is_loading = False

        self.session.set_result(result.category)
        self._transition(KioskState.SHOWING_RESULT)
        logger.info("Classification result", extra={"category": result.category.value})

        if self.session.is_voice_enabled:
            self._announce()
        return result

    def _fail(self, message: str) -> None:
        self.session.set_error(message)
        self._transition(KioskState.SHOWING_ERROR)

    # ─────────────────────────────────────────────────────────────────────
    # Reset / Voice / Shutdown
    # ─────────────────────────────────────────────────────────────────────

    def reset(self) -> None:
        """결과/오류 화면에서 촬영 화면으로 복귀."""
        self._require(self.can_reset, "reset")
        self.session.reset()
        has_stream = self._stream is not None and self._stream.is_active
        self._transition(KioskState.CAPTURING if has_stream else KioskState.IDLE)

    def set_voice_enabled(self, enabled: bool) -> None:
        """음성 안내 토글. 결과 표시 중 켜면 요청 없이 즉시 안내한다."""
        was_enabled = self.session.is_voice_enabled
        self.session.is_voice_enabled = enabled
        if enabled and not was_enabled and self._state is KioskState.SHOWING_RESULT:
            self._announce()
        elif not enabled and self._announcer is not None:
            self._announcer.stop()

    def toggle_voice(self) -> bool:
        self.set_voice_enabled(not self.session.is_voice_enabled)
        return self.session.is_voice_enabled

    def _announce(self) -> None:
        category = self.session.classification
        if category is None or self._announcer is None:
            return
        self._announcer.announce(category)

    async def shutdown(self) -> None:
        """카메라/음성/HTTP 리소스 해제."""
        if self._stream is not None:
            await asyncio.to_thread(self._stream.stop)
            self._stream = None
        if self._announcer is not None:
            await asyncio.to_thread(self._announcer.close)
        await self._classifier.close()
        logger.info("Kiosk controller shut down")
