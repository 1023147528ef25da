"""Recycle Kiosk Configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from recycle_kiosk.domain.enums import FacingMode

DEFAULT_API_BASE_URL = "http://localhost:5000"


class Settings(BaseSettings):
    """Kiosk 설정 (env prefix RECYCLE_KIOSK_)."""

    # === Classification Server ===
    api_base_url: str = Field(
        DEFAULT_API_BASE_URL,
        validation_alias=AliasChoices("RECYCLE_KIOSK_API_BASE_URL", "API_BASE_URL"),
        description="분류 서버 base URL (끝 슬래시 제거)",
    )
    request_timeout: float = Field(60.0, gt=0, description="분류 요청 타임아웃 (초)")

    # === Camera ===
    environment_camera_index: int = Field(0, ge=0, description="후면(environment) 카메라 인덱스")
    user_camera_index: int = Field(1, ge=0, description="전면(user) 카메라 인덱스")
    initial_facing_mode: FacingMode = Field(FacingMode.ENVIRONMENT)
    frame_width: int = Field(1280, gt=0)
    frame_height: int = Field(720, gt=0)
    jpeg_quality: int = Field(95, ge=1, le=100)

    # === UI ===
    voice_enabled: bool = Field(False, description="음성 안내 초기값")
    window_title: str = Field("Recycling Classifier")

    # === Logging ===
    log_level: str = Field("INFO")

    model_config = SettingsConfigDict(
        env_prefix="RECYCLE_KIOSK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/") or DEFAULT_API_BASE_URL

    @property
    def camera_indices(self) -> dict[FacingMode, int]:
        return {
            FacingMode.ENVIRONMENT: self.environment_camera_index,
            FacingMode.USER: self.user_camera_index,
        }

    @property
    def frame_size(self) -> tuple[int, int]:
        return (self.frame_width, self.frame_height)


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
