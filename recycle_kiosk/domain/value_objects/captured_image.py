"""Captured Image Value Object."""

from __future__ import annotations

from dataclasses import dataclass

JPEG_MEDIA_TYPE = "image/jpeg"
OCTET_STREAM = "application/octet-stream"

_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
    "image/bmp": "bmp",
}


def sniff_media_type(data: bytes) -> str:
    """매직 바이트로 이미지 media type 추정."""
    if data.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    if data[:6] in (b"GIF87a", b"GIF89a"):
        return "image/gif"
    if data.startswith(b"BM"):
        return "image/bmp"
    return OCTET_STREAM


@dataclass(frozen=True, slots=True)
class CapturedImage:
    """촬영(또는 파일) 이미지. 메모리에만 존재하며 저장하지 않는다."""

    data: bytes
    media_type: str = JPEG_MEDIA_TYPE

    @classmethod
    def from_camera(cls, data: bytes) -> CapturedImage:
        return cls(data=data, media_type=JPEG_MEDIA_TYPE)

    @classmethod
    def from_file_bytes(cls, data: bytes) -> CapturedImage:
        return cls(data=data, media_type=sniff_media_type(data))

    @property
    def filename(self) -> str:
        """multipart 업로드용 파일명."""
        return f"capture.{_EXTENSIONS.get(self.media_type, 'bin')}"

    def __len__(self) -> int:
        return len(self.data)
