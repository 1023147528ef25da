"""Logging Tests."""

import json
import logging
import sys

from recycle.setup.logging import ECSJsonFormatter, TextFormatter, mask_sensitive_data


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("recycle.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestMaskSensitiveData:
    def test_masks_token_keys(self):
        masked = mask_sensitive_data({"api_key": "hf_abcdefghijklmn", "category": "paper"})
        assert masked["api_key"] == "hf_a...klmn"
        assert masked["category"] == "paper"

    def test_short_values_fully_masked(self):
        assert mask_sensitive_data({"token": "abc"})["token"] == "***REDACTED***"

    def test_nested(self):
        masked = mask_sensitive_data({"headers": {"Authorization": "Bearer hf_secret_value"}})
        assert "hf_secret" not in masked["headers"]["Authorization"]


class TestECSJsonFormatter:
    def test_core_fields(self):
        formatter = ECSJsonFormatter(environment="test")
        data = json.loads(formatter.format(_record(category="glass")))

        assert data["message"] == "hello"
        assert data["log.level"] == "info"
        assert data["service.name"] == "recycle-api"
        assert data["service.environment"] == "test"
        assert data["labels"] == {"category": "glass"}

    def test_exception_fields(self):
        formatter = ECSJsonFormatter()
        try:
            raise ValueError("bad payload")
        except ValueError:
            record = logging.LogRecord(
                "recycle.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        data = json.loads(formatter.format(record))
        assert data["error.type"] == "ValueError"
        assert data["error.message"] == "bad payload"


class TestTextFormatter:
    def test_appends_extra(self):
        line = TextFormatter().format(_record(source="mock"))
        assert line.endswith("| hello | source=mock")
        assert "asctime" not in line
