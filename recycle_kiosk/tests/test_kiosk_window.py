"""KioskWindow Tests."""

import asyncio

import numpy as np
import pytest

from recycle_kiosk.application.session import KioskController
from recycle_kiosk.domain.enums import KioskState, WasteCategory
from recycle_kiosk.domain.value_objects import CapturedImage
from recycle_kiosk.presentation.window import KioskWindow
from recycle_kiosk.presentation.window.kiosk_window import KEY_ESC, KEY_NONE, KEY_SPACE
from recycle_kiosk.tests.fakes import FakeAnnouncer, FakeCamera, FakeClassificationClient


class FakeDisplay:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.frames: list[np.ndarray] = []
        self.closed = False

    def show(self, image):
        self.frames.append(image)

    def poll_key(self, delay_ms=1):
        return self.keys.pop(0) if self.keys else ord("q")

    def close(self):
        self.closed = True


@pytest.fixture
def controller():
    return KioskController(
        FakeCamera(), FakeClassificationClient(WasteCategory.METAL), FakeAnnouncer()
    )


def _window(controller, display=None) -> KioskWindow:
    return KioskWindow(
        controller, display or FakeDisplay(), frame_size=(320, 240), frame_interval=0
    )


async def _settle(window: KioskWindow) -> None:
    while window.busy:
        await asyncio.sleep(0)


class TestHandleKey:
    """키 매핑 테스트."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", [ord("q"), ord("Q"), KEY_ESC])
    async def test_quit_keys(self, controller, key):
        assert _window(controller).handle_key(key) is False

    @pytest.mark.asyncio
    async def test_no_key_continues(self, controller):
        assert _window(controller).handle_key(KEY_NONE) is True

    @pytest.mark.asyncio
    async def test_space_captures_and_classifies(self, controller):
        window = _window(controller)
        await controller.start_camera()

        window.handle_key(KEY_SPACE)
        await _settle(window)

        assert controller.state is KioskState.SHOWING_RESULT
        assert controller.session.classification is WasteCategory.METAL

    @pytest.mark.asyncio
    async def test_space_ignored_while_busy(self, controller):
        window = _window(controller)
        await controller.start_camera()

        window.handle_key(KEY_SPACE)
        window.handle_key(KEY_SPACE)
        await _settle(window)

        assert len(controller._classifier.images) == 1

    @pytest.mark.asyncio
    async def test_reset_key(self, controller):
        window = _window(controller)
        await controller.start_camera()
        await controller.capture_and_classify()

        window.handle_key(ord("r"))

        assert controller.state is KioskState.CAPTURING

    @pytest.mark.asyncio
    async def test_voice_key_toggles(self, controller):
        window = _window(controller)
        window.handle_key(ord("v"))
        assert controller.session.is_voice_enabled is True

    @pytest.mark.asyncio
    async def test_switch_key(self, controller):
        window = _window(controller)
        await controller.start_camera()

        window.handle_key(ord("s"))
        await _settle(window)

        assert controller.facing_mode.value == "user"


class TestRender:
    @pytest.mark.asyncio
    async def test_render_sizes(self, controller):
        window = _window(controller)
        assert window.render().shape == (240, 320, 3)

        await controller.start_camera()
        await controller.capture_and_classify()
        assert window.render().shape == (240, 320, 3)


class TestRun:
    @pytest.mark.asyncio
    async def test_run_until_quit_releases_resources(self, controller):
        display = FakeDisplay(keys=[KEY_NONE, KEY_NONE, ord("q")])

        await _window(controller, display).run()

        assert len(display.frames) == 3
        assert display.closed is True
        assert controller.stream is None
        assert controller._classifier.closed is True

    @pytest.mark.asyncio
    async def test_run_with_initial_image(self):
        classifier = FakeClassificationClient(WasteCategory.PAPER)
        controller = KioskController(None, classifier)
        display = FakeDisplay(keys=[KEY_NONE] * 5)

        await _window(controller, display).run(CapturedImage.from_file_bytes(b"\xff\xd8\xffjpeg"))

        assert controller.session.classification is WasteCategory.PAPER
