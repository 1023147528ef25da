"""KioskController Tests."""

import pytest

from recycle_kiosk.application.common.exceptions import (
    CameraDeviceNotFoundError,
    CameraPermissionDeniedError,
    CaptureFailedError,
    InvalidStateTransitionError,
    NetworkError,
    ServerError,
)
from recycle_kiosk.application.session import KioskController
from recycle_kiosk.domain.enums import FacingMode, KioskState, WasteCategory
from recycle_kiosk.domain.value_objects import CapturedImage
from recycle_kiosk.tests.fakes import (
    JPEG_BYTES,
    FakeAnnouncer,
    FakeCamera,
    FakeClassificationClient,
)


@pytest.fixture
def camera():
    return FakeCamera()


@pytest.fixture
def classifier():
    return FakeClassificationClient(WasteCategory.GLASS)


@pytest.fixture
def announcer():
    return FakeAnnouncer()


@pytest.fixture
def controller(camera, classifier, announcer):
    return KioskController(camera, classifier, announcer)


class TestCamera:
    """카메라 획득/전환 테스트."""

    @pytest.mark.asyncio
    async def test_start_camera_enters_capturing(self, controller, camera):
        assert controller.state is KioskState.IDLE

        assert await controller.start_camera() is True

        assert controller.state is KioskState.CAPTURING
        assert camera.events == ["acquire:environment"]
        assert controller.session.camera_error is None

    @pytest.mark.asyncio
    async def test_camera_error_stays_idle_with_message(self, classifier):
        camera = FakeCamera({FacingMode.ENVIRONMENT: CameraPermissionDeniedError()})
        controller = KioskController(camera, classifier)

        assert await controller.start_camera() is False

        assert controller.state is KioskState.IDLE
        assert controller.session.camera_error == (
            "Camera access denied. Please grant permission to use your camera."
        )
        assert controller.can_capture is False

    @pytest.mark.asyncio
    async def test_retry_after_camera_error(self, classifier):
        camera = FakeCamera({FacingMode.ENVIRONMENT: CameraDeviceNotFoundError()})
        controller = KioskController(camera, classifier)
        await controller.start_camera()

        camera.acquire_errors.clear()
        assert await controller.start_camera() is True

        assert controller.state is KioskState.CAPTURING
        assert controller.session.camera_error is None

    @pytest.mark.asyncio
    async def test_switch_releases_before_acquiring(self, controller, camera):
        await controller.start_camera()

        assert await controller.switch_camera() is True

        assert camera.events == ["acquire:environment", "stop:environment", "acquire:user"]
        assert controller.facing_mode is FacingMode.USER
        assert controller.stream.facing_mode is FacingMode.USER

    @pytest.mark.asyncio
    async def test_switch_failure_goes_idle(self, controller, camera):
        await controller.start_camera()
        camera.acquire_errors[FacingMode.USER] = CameraDeviceNotFoundError()

        assert await controller.switch_camera() is False

        assert controller.state is KioskState.IDLE
        assert controller.stream is None
        assert controller.session.camera_error == "No camera found on your device."
        assert camera.streams[0].active is False


class TestCaptureAndClassify:
    """촬영 → 분류 흐름 테스트."""

    @pytest.mark.asyncio
    async def test_success_shows_result(self, controller, classifier):
        await controller.start_camera()

        result = await controller.capture_and_classify()

        assert result.category is WasteCategory.GLASS
        assert controller.state is KioskState.SHOWING_RESULT
        assert controller.session.classification is WasteCategory.GLASS
        assert controller.session.error_message is None
        assert controller.session.is_loading is False
        assert controller.session.captured_image == CapturedImage(JPEG_BYTES, "image/jpeg")
        assert classifier.images[0].media_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_success_announces_when_voice_enabled(self, camera, classifier, announcer):
        controller = KioskController(camera, classifier, announcer, voice_enabled=True)
        await controller.start_camera()

        await controller.capture_and_classify()

        assert announcer.announced == [WasteCategory.GLASS]

    @pytest.mark.asyncio
    async def test_success_silent_when_voice_disabled(self, controller, announcer):
        await controller.start_camera()
        await controller.capture_and_classify()
        assert announcer.announced == []

    @pytest.mark.asyncio
    async def test_server_error_shows_message(self, controller, classifier):
        await controller.start_camera()
        classifier.error = ServerError("Failed to classify image", 500)

        assert await controller.capture_and_classify() is None

        assert controller.state is KioskState.SHOWING_ERROR
        assert controller.session.error_message == "Failed to classify image"
        assert controller.session.classification is None
        assert controller.session.is_loading is False

    @pytest.mark.asyncio
    async def test_unexpected_error_uses_generic_message(self, controller, classifier):
        await controller.start_camera()
        classifier.error = RuntimeError("boom")

        await controller.capture_and_classify()

        assert controller.session.error_message == (
            "Failed to classify the image. Please try again."
        )

    @pytest.mark.asyncio
    async def test_capture_failure_shows_error(self, controller, camera, classifier):
        await controller.start_camera()
        camera.capture_error = CaptureFailedError()

        await controller.capture_and_classify()

        assert controller.state is KioskState.SHOWING_ERROR
        assert controller.session.error_message == "Failed to capture image"
        assert classifier.images == []

    @pytest.mark.asyncio
    async def test_error_then_success_clears_error(self, controller, classifier):
        await controller.start_camera()
        classifier.error = NetworkError()
        await controller.capture_and_classify()
        controller.reset()

        classifier.error = None
        await controller.capture_and_classify()

        assert controller.session.error_message is None
        assert controller.session.classification is WasteCategory.GLASS

    @pytest.mark.asyncio
    async def test_capture_refused_without_stream(self, controller):
        with pytest.raises(InvalidStateTransitionError):
            await controller.capture_and_classify()

    @pytest.mark.asyncio
    async def test_controls_disabled_while_loading(self, controller):
        await controller.start_camera()
        controller.session.is_loading = True

        assert controller.can_capture is False
        assert controller.can_switch is False
        assert controller.can_reset is False
        with pytest.raises(InvalidStateTransitionError):
            await controller.switch_camera()


class TestResetAndVoice:
    """reset / 음성 토글 테스트."""

    @pytest.mark.asyncio
    async def test_reset_returns_to_capturing(self, controller):
        await controller.start_camera()
        await controller.capture_and_classify()

        controller.reset()

        assert controller.state is KioskState.CAPTURING
        assert controller.session.captured_image is None
        assert controller.session.classification is None
        assert controller.session.error_message is None

    def test_reset_refused_while_idle(self, controller):
        with pytest.raises(InvalidStateTransitionError):
            controller.reset()

    @pytest.mark.asyncio
    async def test_voice_on_while_showing_result_announces(self, controller, classifier, announcer):
        await controller.start_camera()
        await controller.capture_and_classify()

        controller.set_voice_enabled(True)

        assert announcer.announced == [WasteCategory.GLASS]
        assert len(classifier.images) == 1

    @pytest.mark.asyncio
    async def test_voice_on_while_capturing_is_silent(self, controller, announcer):
        await controller.start_camera()
        assert controller.toggle_voice() is True
        assert announcer.announced == []

    def test_voice_off_stops_speech(self, camera, classifier, announcer):
        controller = KioskController(camera, classifier, announcer, voice_enabled=True)
        assert controller.toggle_voice() is False
        assert announcer.stops == 1


class TestFileMode:
    """카메라 없는 파일 분류 모드."""

    @pytest.mark.asyncio
    async def test_classify_image_without_camera(self, classifier):
        controller = KioskController(None, classifier)
        image = CapturedImage.from_file_bytes(b"\x89PNG\r\n\x1a\n....")

        result = await controller.classify_image(image)

        assert result.category is WasteCategory.GLASS
        assert classifier.images[0].media_type == "image/png"
        assert controller.can_switch is False
        assert await controller.start_camera() is False

        controller.reset()
        assert controller.state is KioskState.IDLE

    @pytest.mark.asyncio
    async def test_capture_and_switch_refused_without_camera(self, classifier):
        controller = KioskController(None, classifier)

        assert controller.can_capture is False
        with pytest.raises(InvalidStateTransitionError):
            await controller.capture_and_classify()
        with pytest.raises(InvalidStateTransitionError):
            await controller.switch_camera()
        assert classifier.images == []


class TestShutdown:
    @pytest.mark.asyncio
    async def test_shutdown_releases_everything(self, controller, camera, classifier, announcer):
        await controller.start_camera()

        await controller.shutdown()

        assert camera.streams[0].active is False
        assert announcer.closed is True
        assert classifier.closed is True
        assert controller.stream is None
