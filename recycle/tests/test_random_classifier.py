"""RandomWasteClassifier Tests."""

import random
from collections import Counter
from unittest.mock import AsyncMock, patch

import pytest

from recycle.domain.enums import WASTE_CATEGORIES, WasteCategory
from recycle.infrastructure.mock import RandomWasteClassifier


class TestRandomWasteClassifier:
    """Mock 분류기 테스트."""

    @pytest.mark.asyncio
    async def test_distribution_over_1000_calls(self):
        """1000회 호출 시 모든 카테고리가 유효하고 고르게 나온다."""
        classifier = RandomWasteClassifier(delay_seconds=0, rng=random.Random(42))

        counts = Counter([await classifier.classify(b"img") for _ in range(1000)])

        assert set(counts) <= set(WASTE_CATEGORIES)
        assert set(counts) == set(WasteCategory)
        # 기대값 200, 여유 있게 하한 100
        assert min(counts.values()) > 100

    @pytest.mark.asyncio
    async def test_sleeps_for_configured_delay(self):
        classifier = RandomWasteClassifier(delay_seconds=1.0)

        with patch(
            "recycle.infrastructure.mock.random_classifier.asyncio.sleep", new=AsyncMock()
        ) as mock_sleep:
            await classifier.classify(b"img")

        mock_sleep.assert_awaited_once_with(1.0)

    @pytest.mark.asyncio
    async def test_zero_delay_skips_sleep(self):
        classifier = RandomWasteClassifier(delay_seconds=0)

        with patch(
            "recycle.infrastructure.mock.random_classifier.asyncio.sleep", new=AsyncMock()
        ) as mock_sleep:
            await classifier.classify(b"img")

        mock_sleep.assert_not_awaited()
