"""Value Object Tests."""

import pytest

from recycle_kiosk.domain.enums import FacingMode, WasteCategory
from recycle_kiosk.domain.value_objects import CapturedImage, ClassificationResult
from recycle_kiosk.domain.value_objects.captured_image import sniff_media_type


class TestCapturedImage:
    @pytest.mark.parametrize(
        "data, media_type, filename",
        [
            (b"\xff\xd8\xff\xe0rest", "image/jpeg", "capture.jpg"),
            (b"\x89PNG\r\n\x1a\nrest", "image/png", "capture.png"),
            (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp", "capture.webp"),
            (b"GIF89a....", "image/gif", "capture.gif"),
            (b"plain text", "application/octet-stream", "capture.bin"),
        ],
    )
    def test_from_file_bytes_sniffs_type(self, data, media_type, filename):
        image = CapturedImage.from_file_bytes(data)
        assert image.media_type == media_type
        assert image.filename == filename

    def test_camera_capture_is_jpeg(self):
        image = CapturedImage.from_camera(b"anything")
        assert image.media_type == "image/jpeg"
        assert len(image) == 8

    def test_sniff_short_input(self):
        assert sniff_media_type(b"") == "application/octet-stream"


class TestClassificationResult:
    def test_from_payload(self):
        result = ClassificationResult.from_payload({"category": "organic"})
        assert result.category is WasteCategory.ORGANIC

    @pytest.mark.parametrize(
        "payload",
        [{"category": "Paper"}, {"category": None}, {}, [], "paper"],
    )
    def test_from_payload_rejects(self, payload):
        with pytest.raises(ValueError):
            ClassificationResult.from_payload(payload)

    def test_immutable(self):
        result = ClassificationResult(WasteCategory.PAPER)
        with pytest.raises(AttributeError):
            result.category = WasteCategory.GLASS


class TestFacingMode:
    def test_opposite(self):
        assert FacingMode.USER.opposite is FacingMode.ENVIRONMENT
        assert FacingMode.ENVIRONMENT.opposite is FacingMode.USER
