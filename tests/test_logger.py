"""Tests for logger setup and credential masking."""

import logging

import pytest

from fitbit_gateway.logger import REDACTED, SecretFilter, get_logger, redact


@pytest.mark.parametrize("message,expected", [
    ("Authorization: Bearer abc.def-123", f"Authorization: Bearer {REDACTED}"),
    ("FITBIT_ENCRYPTION_KEY=c2VjcmV0a2V5", f"FITBIT_ENCRYPTION_KEY={REDACTED}"),
    ("FITBIT_ACCESS_TOKEN=tok and more", f"FITBIT_ACCESS_TOKEN={REDACTED} and more"),
    ("GET https://api.fitbit.com/1/activities.json", "GET https://api.fitbit.com/1/activities.json"),
])
def test_redact(message, expected):
    assert redact(message) == expected


def test_filter_rewrites_formatted_record():
    record = logging.LogRecord(
        "fitbit_gateway", logging.ERROR, __file__, 1,
        "headers: %s", ({"Authorization": "Bearer tok123"},), None,
    )

    assert SecretFilter().filter(record) is True
    assert "tok123" not in record.getMessage()
    assert record.args == ()


def test_get_logger_writes_masked_file(monkeypatch, tmp_path):
    monkeypatch.setattr("fitbit_gateway.config.Config.LOGS_DIR", tmp_path / "logs")
    monkeypatch.setattr("fitbit_gateway.config.Config.DATA_DIR", tmp_path / "data")

    logger = get_logger("fitbit_gateway.test_masked_file")
    try:
        logger.warning("request failed with Bearer secret-token")
        for handler in logger.handlers:
            handler.flush()

        log_files = list((tmp_path / "logs").glob("fitbit_*.log"))
        assert len(log_files) == 1
        content = log_files[0].read_text(encoding="utf-8")
        assert "secret-token" not in content
        assert f"Bearer {REDACTED}" in content
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_get_logger_reuses_handlers(monkeypatch, tmp_path):
    monkeypatch.setattr("fitbit_gateway.config.Config.LOGS_DIR", tmp_path / "logs")
    monkeypatch.setattr("fitbit_gateway.config.Config.DATA_DIR", tmp_path / "data")

    logger = get_logger("fitbit_gateway.test_reuse")
    try:
        assert get_logger("fitbit_gateway.test_reuse") is logger
        assert len(logger.handlers) == 2
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
