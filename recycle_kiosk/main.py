"""Recycle Kiosk entry point.

    recycle-kiosk                      # 카메라 모드
    recycle-kiosk --image item.jpg     # 파일 분류 모드
    recycle-kiosk --base-url http://kiosk-api:5000 --voice
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from recycle_kiosk.application.common.exceptions import KioskError
from recycle_kiosk.application.session import KioskController
from recycle_kiosk.domain.enums import FacingMode
from recycle_kiosk.domain.value_objects import CapturedImage
from recycle_kiosk.infrastructure.camera import OpenCVCamera
from recycle_kiosk.infrastructure.http import HttpClassificationClient
from recycle_kiosk.infrastructure.speech import Pyttsx3Announcer
from recycle_kiosk.presentation.window import KioskWindow, OpenCVDisplay
from recycle_kiosk.setup.config import Settings, get_settings
from recycle_kiosk.setup.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recycle-kiosk",
        description="Photograph an item and find out which recycling bin it belongs in.",
    )
    parser.add_argument("--image", type=Path, help="classify this image file instead of the camera")
    parser.add_argument("--base-url", help="classification server base URL")
    parser.add_argument(
        "--voice", action="store_true", default=None, help="announce results with speech"
    )
    parser.add_argument(
        "--facing",
        choices=[mode.value for mode in FacingMode],
        help="initial camera (environment=back, user=front)",
    )
    parser.add_argument("--log-level", help="logging level (default from settings)")
    return parser


def build_controller(settings: Settings, use_camera: bool) -> KioskController:
    camera = (
        OpenCVCamera(
            device_indices=settings.camera_indices,
            frame_size=settings.frame_size,
            jpeg_quality=settings.jpeg_quality,
        )
        if use_camera
        else None
    )
    return KioskController(
        camera=camera,
        classifier=HttpClassificationClient(settings.api_base_url, settings.request_timeout),
        announcer=Pyttsx3Announcer(),
        facing_mode=settings.initial_facing_mode,
        voice_enabled=settings.voice_enabled,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides: dict = {}
    if args.base_url:
        overrides["api_base_url"] = args.base_url
    if args.voice is not None:
        overrides["voice_enabled"] = args.voice
    if args.facing:
        overrides["initial_facing_mode"] = FacingMode(args.facing)
    settings = get_settings().model_copy(update=overrides)
    # model_copy 는 validator 를 거치지 않으므로 직접 정규화
    settings.api_base_url = settings.api_base_url.rstrip("/")

    configure_logging(args.log_level or settings.log_level)

    initial_image = None
    if args.image is not None:
        try:
            initial_image = CapturedImage.from_file_bytes(args.image.read_bytes())
        except OSError as e:
            logger.error("Cannot read image file", extra={"path": str(args.image), "error": str(e)})
            return 2

    controller = build_controller(settings, use_camera=initial_image is None)
    window = KioskWindow(
        controller,
        OpenCVDisplay(settings.window_title),
        frame_size=settings.frame_size,
    )
    logger.info(
        "Starting recycle kiosk",
        extra={"api_base_url": settings.api_base_url, "file_mode": initial_image is not None},
    )

    try:
        asyncio.run(window.run(initial_image))
    except KioskError as e:
        logger.error(e.message)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
