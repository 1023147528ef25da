"""Kiosk Window - asyncio 루프로 구동하는 OpenCV 창.

키:
    SPACE  촬영 후 분류
    R      새 사진 (결과/오류 초기화)
    S      전면/후면 카메라 전환
    V      음성 안내 토글
    T      카메라 재시도
    Q/ESC  종료
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

import cv2
import numpy as np

from recycle_kiosk.application.common.exceptions import KioskError
from recycle_kiosk.application.session import KioskController
from recycle_kiosk.domain.enums import FacingMode
from recycle_kiosk.domain.value_objects import CapturedImage
from recycle_kiosk.presentation.window.overlay import ScreenModel, render_screen

logger = logging.getLogger(__name__)

KEY_NONE = -1
KEY_ESC = 27
KEY_SPACE = 32

FRAME_INTERVAL_SECONDS = 1 / 30

_FACING_LABELS = {FacingMode.ENVIRONMENT: "Back", FacingMode.USER: "Front"}


class OpenCVDisplay:
    """cv2.imshow / waitKey 래퍼."""

    def __init__(self, title: str) -> None:
        self.title = title
        self._opened = False

    def show(self, image: np.ndarray) -> None:
        try:
            if not self._opened:
                cv2.namedWindow(self.title, cv2.WINDOW_NORMAL)
                self._opened = True
            cv2.imshow(self.title, image)
        except cv2.error as e:
            raise KioskError(
                "OpenCV was built without GUI support; install a GUI-enabled opencv-python build"
            ) from e

    def poll_key(self, delay_ms: int = 1) -> int:
        key = cv2.waitKey(delay_ms)
        return KEY_NONE if key == KEY_NONE else key & 0xFF

    def close(self) -> None:
        if self._opened:
            cv2.destroyWindow(self.title)
            self._opened = False


class KioskWindow:
    """키 입력을 컨트롤러 동작으로 바꾸고 매 프레임 화면을 다시 그린다.

    오래 걸리는 동작(촬영/분류, 카메라 전환)은 태스크로 띄워 그리는 동안에도 화면이 갱신되게 한다.
    한 번에 하나의 태스크만 진행한다.
    """

    def __init__(
        self,
        controller: KioskController,
        display: OpenCVDisplay,
        frame_size: tuple[int, int] = (1280, 720),
        frame_interval: float = FRAME_INTERVAL_SECONDS,
    ) -> None:
        self._controller = controller
        self._display = display
        self._frame_size = frame_size
        self._frame_interval = frame_interval
        self._task: asyncio.Task | None = None
        self._preview_source: CapturedImage | None = None
        self._preview: np.ndarray | None = None
        self._last_frame: np.ndarray | None = None

    @property
    def busy(self) -> bool:
        return self._task is not None and not self._task.done()

    def _schedule(self, coro: Coroutine[Any, Any, Any]) -> bool:
        if self.busy:
            coro.close()
            return False
        self._task = asyncio.create_task(coro)
        self._task.add_done_callback(self._on_task_done)
        return True

    @staticmethod
    def _on_task_done(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Kiosk action failed", exc_info=error)

    def handle_key(self, key: int) -> bool:
        """키 처리.

        Returns:
            계속 실행하면 True, 종료 요청이면 False
        """
        if key == KEY_NONE:
            return True
        if key in (KEY_ESC, ord("q"), ord("Q")):
            return False

        controller = self._controller
        if key == KEY_SPACE:
            if controller.can_capture and not self.busy:
                self._schedule(controller.capture_and_classify())
        elif key in (ord("r"), ord("R")):
            if controller.can_reset and not self.busy:
                controller.reset()
        elif key in (ord("s"), ord("S")):
            if controller.can_switch and not self.busy:
                self._schedule(controller.switch_camera())
        elif key in (ord("v"), ord("V")):
            controller.toggle_voice()
        elif key in (ord("t"), ord("T")):
            if controller.session.camera_error is not None and not self.busy:
                self._schedule(controller.start_camera())
        return True

    def _base_image(self) -> np.ndarray | None:
        captured = self._controller.session.captured_image
        if captured is not None:
            if captured is not self._preview_source:
                self._preview_source = captured
                self._preview = cv2.imdecode(
                    np.frombuffer(captured.data, dtype=np.uint8), cv2.IMREAD_COLOR
                )
            return self._preview

        stream = self._controller.stream
        if stream is None or not stream.is_active:
            return None
        # 캡처 스레드가 장치를 읽는 동안에는 마지막 프레임을 유지한다
        if not self.busy:
            frame = stream.read_frame()
            if frame is not None:
                self._last_frame = frame
        return self._last_frame

    def render(self) -> np.ndarray:
        controller = self._controller
        model = ScreenModel(
            state=controller.state,
            session=controller.session,
            facing_label=_FACING_LABELS[controller.facing_mode],
            has_camera=self._controller.has_camera,
        )
        return render_screen(model, self._base_image(), self._frame_size)

    async def run(self, initial_image: CapturedImage | None = None) -> None:
        """창 루프 실행. 종료 시 컨트롤러 리소스를 모두 해제한다."""
        controller = self._controller
        if self._controller.has_camera:
            await controller.start_camera()
        if initial_image is not None:
            self._schedule(controller.classify_image(initial_image))

        try:
            while True:
                self._display.show(self.render())
                if not self.handle_key(self._display.poll_key(1)):
                    break
                await asyncio.sleep(self._frame_interval)
        finally:
            if self._task is not None and not self._task.done():
                self._task.cancel()
            await controller.shutdown()
            self._display.close()
            logger.info(
                "Kiosk window closed",
                extra={"last_state": controller.state.value},
            )
