"""Recycle Service Configuration.

외부화 원칙:
- 런타임 모드(development/production) → env. mock fallback 허용 여부를 결정
- 원격 분류기 주소/타임아웃 → env
- API Key → SecretStr (로깅 마스킹)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from recycle.infrastructure.huggingface import DEFAULT_CLASSIFIER_URL
from recycle.setup.constants import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_ENVIRONMENT,
    SERVICE_NAME,
    SERVICE_VERSION,
)

PRODUCTION_ENVIRONMENTS = frozenset({"production", "prod"})


class Settings(BaseSettings):
    """Recycle API 설정.

    운영 환경에서는 반드시 RECYCLE_ENVIRONMENT=production 으로 주입할 것.
    """

    # === Service Identity ===
    service_name: str = Field(SERVICE_NAME, description="Service name")
    service_version: str = Field(SERVICE_VERSION, description="Service version")
    environment: str = Field(
        DEFAULT_ENVIRONMENT,
        validation_alias=AliasChoices("RECYCLE_ENVIRONMENT", "ENVIRONMENT", "NODE_ENV"),
        description="Runtime mode (development, production)",
    )

    # === Server ===
    host: str = Field("0.0.0.0", description="Bind host")
    port: int = Field(5000, ge=1, le=65535, description="Bind port")

    # === Remote Classifier ===
    huggingface_api_key: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("HUGGINGFACE_API_KEY", "RECYCLE_HUGGINGFACE_API_KEY"),
        description="Hugging Face API token",
    )
    classifier_url: str = Field(
        DEFAULT_CLASSIFIER_URL,
        description="Hosted classifier model URL",
    )
    classifier_timeout: float = Field(
        30.0,
        gt=0,
        le=120,
        description="Remote classifier timeout (seconds)",
    )

    # === Upload / Fallback ===
    max_upload_bytes: int = Field(
        5 * 1024 * 1024,
        ge=1,
        description="Max multipart image size (bytes)",
    )
    mock_delay_seconds: float = Field(
        1.0,
        ge=0,
        le=10,
        description="Simulated latency of the mock classifier",
    )

    # === CORS (env 외부화) ===
    cors_origins_str: str = Field(
        DEFAULT_CORS_ORIGINS,
        description="Allowed CORS origins (콤마 구분)",
    )

    # === OpenTelemetry ===
    otel_enabled: bool = Field(False, description="Enable OpenTelemetry tracing")
    otel_exporter_otlp_endpoint: str = Field(
        "http://localhost:4318",
        description="OTLP/HTTP exporter endpoint",
    )
    otel_sampling_rate: float = Field(1.0, ge=0, le=1)

    model_config = SettingsConfigDict(
        env_prefix="RECYCLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        """CORS origins 파싱."""
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in PRODUCTION_ENVIRONMENTS

    @property
    def allow_fallback(self) -> bool:
        """원격 분류 실패 시 mock 분류 허용 여부 (production에서는 절대 허용 X)."""
        return not self.is_production

    @property
    def huggingface_token(self) -> str | None:
        if self.huggingface_api_key is None:
            return None
        return self.huggingface_api_key.get_secret_value()


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
