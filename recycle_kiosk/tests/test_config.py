"""Kiosk Config Tests."""

import os
from unittest.mock import patch

import pytest

from recycle_kiosk.domain.enums import FacingMode
from recycle_kiosk.main import build_parser
from recycle_kiosk.setup.config import Settings


def _settings(env: dict[str, str]) -> Settings:
    with patch.dict(os.environ, env, clear=True):
        return Settings(_env_file=None)


class TestSettings:
    def test_defaults(self):
        settings = _settings({})
        assert settings.api_base_url == "http://localhost:5000"
        assert settings.camera_indices == {FacingMode.ENVIRONMENT: 0, FacingMode.USER: 1}
        assert settings.frame_size == (1280, 720)
        assert settings.jpeg_quality == 95
        assert settings.voice_enabled is False
        assert settings.initial_facing_mode is FacingMode.ENVIRONMENT

    @pytest.mark.parametrize("key", ["API_BASE_URL", "RECYCLE_KIOSK_API_BASE_URL"])
    def test_base_url_alias_and_trailing_slash(self, key):
        settings = _settings({key: "https://recycle.example.com/"})
        assert settings.api_base_url == "https://recycle.example.com"

    def test_camera_indices_from_env(self):
        settings = _settings(
            {"RECYCLE_KIOSK_ENVIRONMENT_CAMERA_INDEX": "2", "RECYCLE_KIOSK_USER_CAMERA_INDEX": "0"}
        )
        assert settings.camera_indices == {FacingMode.ENVIRONMENT: 2, FacingMode.USER: 0}


class TestParser:
    def test_image_and_voice(self):
        args = build_parser().parse_args(["--image", "item.jpg", "--voice"])
        assert str(args.image) == "item.jpg"
        assert args.voice is True

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.image is None
        assert args.voice is None
        assert args.base_url is None
