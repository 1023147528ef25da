"""Recycle Dependencies - FastAPI Dependency Injection.

Settings와 어댑터는 create_app()에서 app.state에 한 번 묶이고,
요청 시점에는 request.app.state에서만 읽는다 (환경 변수 재조회 X).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from recycle.application.classify.commands import ClassifyImageCommand
from recycle.application.classify.ports import FallbackClassifierPort, RemoteClassifierPort
from recycle.infrastructure.huggingface import HuggingFaceWasteClassifier
from recycle.infrastructure.mock import RandomWasteClassifier
from recycle.setup.config import Settings

# ─────────────────────────────────────────────────────────────────────────────
# Builders (create_app 에서 호출)
# ─────────────────────────────────────────────────────────────────────────────


def build_remote_classifier(settings: Settings) -> HuggingFaceWasteClassifier:
    """원격(Hugging Face) 분류기 생성. 앱 수명 동안 공유."""
    return HuggingFaceWasteClassifier(
        api_key=settings.huggingface_token,
        api_url=settings.classifier_url,
        timeout=settings.classifier_timeout,
    )


def build_fallback_classifier(settings: Settings) -> RandomWasteClassifier:
    return RandomWasteClassifier(delay_seconds=settings.mock_delay_seconds)


# ─────────────────────────────────────────────────────────────────────────────
# Infrastructure Dependencies
# ─────────────────────────────────────────────────────────────────────────────


def get_app_settings(request: Request) -> Settings:
    """create_app()에 전달된 Settings 반환."""
    return request.app.state.settings


def get_remote_classifier(request: Request) -> RemoteClassifierPort:
    return request.app.state.remote_classifier


def get_fallback_classifier(request: Request) -> FallbackClassifierPort:
    return request.app.state.fallback_classifier


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Commands)
# ─────────────────────────────────────────────────────────────────────────────


def get_classify_command(
    settings: Annotated[Settings, Depends(get_app_settings)],
    remote_classifier: Annotated[RemoteClassifierPort, Depends(get_remote_classifier)],
    fallback_classifier: Annotated[FallbackClassifierPort, Depends(get_fallback_classifier)],
) -> ClassifyImageCommand:
    """Classify Image Command 인스턴스 반환.

    fallback 허용 여부는 앱 Settings에서 한 번 결정되어 Command에 주입된다.
    """
    return ClassifyImageCommand(
        remote_classifier=remote_classifier,
        fallback_classifier=fallback_classifier,
        allow_fallback=settings.allow_fallback,
        max_upload_bytes=settings.max_upload_bytes,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


ClassifyCommandDep = Annotated[ClassifyImageCommand, Depends(get_classify_command)]
