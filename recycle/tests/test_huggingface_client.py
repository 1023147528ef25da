"""HuggingFaceWasteClassifier Tests."""

import base64
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from recycle.domain.enums import WasteCategory
from recycle.domain.exceptions import InvalidPredictionPayloadError
from recycle.domain.value_objects import DefaultApplied, Failed, Prediction, Recognized
from recycle.infrastructure.huggingface import (
    DEFAULT_CLASSIFIER_URL,
    HuggingFaceWasteClassifier,
    parse_predictions,
)


def _json_response(payload, status_code: int = 200) -> httpx.Response:
    request = httpx.Request("POST", DEFAULT_CLASSIFIER_URL)
    return httpx.Response(status_code, json=payload, request=request)


class TestParsePredictions:
    """parse_predictions 테스트."""

    def test_valid_payload(self):
        data = [{"label": "paper", "score": 0.8}, {"label": "glass", "score": 1}]
        assert parse_predictions(data) == [Prediction("paper", 0.8), Prediction("glass", 1.0)]

    @pytest.mark.parametrize("data", [[], {}, None, "paper", {"label": "paper", "score": 1.0}])
    def test_non_array_or_empty_raises(self, data):
        with pytest.raises(InvalidPredictionPayloadError):
            parse_predictions(data)

    @pytest.mark.parametrize(
        "entry",
        [
            "paper",
            {"score": 0.5},
            {"label": "paper"},
            {"label": "paper", "score": "0.5"},
            {"label": "paper", "score": True},
        ],
    )
    def test_malformed_entry_raises(self, entry):
        with pytest.raises(InvalidPredictionPayloadError):
            parse_predictions([entry])


class TestHuggingFaceWasteClassifier:
    """HuggingFaceWasteClassifier 테스트."""

    @pytest.fixture
    def classifier(self):
        return HuggingFaceWasteClassifier(api_key="hf_test_token")

    @pytest.fixture
    def mock_http_client(self):
        return AsyncMock(spec=httpx.AsyncClient)

    @pytest.mark.asyncio
    async def test_posts_base64_payload(self, classifier, mock_http_client):
        mock_http_client.post.return_value = _json_response([{"label": "glass", "score": 0.9}])
        image = b"\xff\xd8\xffimage-bytes"

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            await classifier.classify(image)

        args, kwargs = mock_http_client.post.call_args
        assert args[0] == DEFAULT_CLASSIFIER_URL
        assert kwargs["json"] == {"inputs": {"image": base64.b64encode(image).decode("ascii")}}

    @pytest.mark.asyncio
    async def test_recognized_top_label(self, classifier, mock_http_client):
        mock_http_client.post.return_value = _json_response(
            [{"label": "paper", "score": 0.2}, {"label": "Metal", "score": 0.7}]
        )

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            outcome = await classifier.classify(b"img")

        assert isinstance(outcome, Recognized)
        assert outcome.category is WasteCategory.METAL

    @pytest.mark.asyncio
    async def test_tie_first_entry_wins(self, classifier, mock_http_client):
        mock_http_client.post.return_value = _json_response(
            [{"label": "paper", "score": 0.5}, {"label": "metal", "score": 0.5}]
        )

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            outcome = await classifier.classify(b"img")

        assert outcome.category is WasteCategory.PAPER

    @pytest.mark.asyncio
    async def test_unknown_label_applies_default(self, classifier, mock_http_client):
        mock_http_client.post.return_value = _json_response([{"label": "styrofoam", "score": 0.99}])

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            outcome = await classifier.classify(b"img")

        assert isinstance(outcome, DefaultApplied)
        assert outcome.category is WasteCategory.PLASTIC

    @pytest.mark.asyncio
    async def test_empty_array_fails(self, classifier, mock_http_client):
        mock_http_client.post.return_value = _json_response([])

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            outcome = await classifier.classify(b"img")

        assert isinstance(outcome, Failed)
        assert outcome.reason == "Invalid response from classifier API"

    @pytest.mark.asyncio
    async def test_non_array_fails(self, classifier, mock_http_client):
        mock_http_client.post.return_value = _json_response({"error": "Model is loading"})

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            outcome = await classifier.classify(b"img")

        assert isinstance(outcome, Failed)

    @pytest.mark.asyncio
    async def test_http_error_fails(self, classifier, mock_http_client):
        mock_http_client.post.return_value = _json_response({"error": "unauthorized"}, 401)

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            outcome = await classifier.classify(b"img")

        assert isinstance(outcome, Failed)
        assert "401" in outcome.reason
        assert isinstance(outcome.error, httpx.HTTPStatusError)

    @pytest.mark.asyncio
    async def test_timeout_fails(self, classifier, mock_http_client):
        mock_http_client.post.side_effect = httpx.ReadTimeout("timed out")

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            outcome = await classifier.classify(b"img")

        assert isinstance(outcome, Failed)
        assert outcome.reason == "Classifier API timed out after 30s"

    @pytest.mark.asyncio
    async def test_network_error_fails(self, classifier, mock_http_client):
        mock_http_client.post.side_effect = httpx.ConnectError("connection refused")

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            outcome = await classifier.classify(b"img")

        assert isinstance(outcome, Failed)
        assert "connection refused" in outcome.reason

    @pytest.mark.asyncio
    async def test_non_json_body_fails(self, classifier, mock_http_client):
        response = MagicMock()
        response.raise_for_status = MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        mock_http_client.post.return_value = response

        with patch.object(classifier, "_get_client", return_value=mock_http_client):
            outcome = await classifier.classify(b"img")

        assert isinstance(outcome, Failed)
        assert outcome.reason == "Classifier API returned a non-JSON body"

    @pytest.mark.asyncio
    async def test_client_sends_bearer_token(self, classifier):
        client = await classifier._get_client()
        try:
            assert client.headers["Authorization"] == "Bearer hf_test_token"
            assert client.timeout.read == 30.0
        finally:
            await classifier.close()

    @pytest.mark.asyncio
    async def test_close_resets_client(self, classifier):
        await classifier._get_client()
        await classifier.close()
        assert classifier._client is None
