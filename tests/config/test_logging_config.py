"""Testes do logging JSON estruturado."""

from __future__ import annotations

import io
import json
import logging

import pytest

from config.logging import CorrelationIdFilter, configure_logging, create_json_formatter


def test_configure_logging_rejects_invalid_level() -> None:
    with pytest.raises(ValueError):
        configure_logging(level="VERBOSE")


def test_json_formatter_emits_renamed_fields() -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter("vibra_test", lambda: "corr-1"))
    logger = logging.getLogger("tests.json_formatter")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    try:
        logger.info("request_received", extra={"handler": "hello"})
    finally:
        logger.removeHandler(handler)

    record = json.loads(stream.getvalue())
    assert record["message"] == "request_received"
    assert record["level"] == "INFO"
    assert record["logger"] == "tests.json_formatter"
    assert record["service"] == "vibra_test"
    assert record["correlation_id"] == "corr-1"
    assert record["handler"] == "hello"


def test_filter_preserves_explicit_correlation_id() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.correlation_id = "explicit"

    assert CorrelationIdFilter("svc", lambda: "ctx").filter(record) is True
    assert record.correlation_id == "explicit"
    assert record.service == "svc"
