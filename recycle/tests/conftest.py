"""Pytest configuration for recycle tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from recycle.application.classify.ports import RemoteClassifierPort
from recycle.setup.config import get_settings
from recycle.setup.dependencies import get_fallback_classifier, get_remote_classifier
from recycle.tests.fakes import StubFallbackClassifier, make_settings


@pytest.fixture
def fallback_classifier() -> StubFallbackClassifier:
    return StubFallbackClassifier()


@pytest.fixture
def make_client(fallback_classifier):
    """Settings/원격 분류기를 주입한 TestClient 팩토리."""
    from recycle.main import create_app

    created: list[TestClient] = []

    def _make(remote: RemoteClassifierPort, **settings_overrides) -> TestClient:
        settings = make_settings(**settings_overrides)
        app = create_app(settings)
        app.dependency_overrides[get_remote_classifier] = lambda: remote
        app.dependency_overrides[get_fallback_classifier] = lambda: fallback_classifier
        client = TestClient(app)
        created.append(client)
        return client

    yield _make

    for client in created:
        client.close()


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
