from __future__ import annotations

import io
import logging

import pytest

from gearup_service.logging_setup import (
    CorrelationIdFilter,
    configure_logging,
    correlation_id_ctx,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("gearup", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_defaults_to_dash_outside_a_request():
    record = _record()

    assert CorrelationIdFilter().filter(record) is True
    assert record.correlation_id == "-"


def test_filter_stamps_bound_correlation_id():
    token = correlation_id_ctx.set("req-123")
    try:
        record = _record()
        CorrelationIdFilter().filter(record)
    finally:
        correlation_id_ctx.reset(token)

    assert record.correlation_id == "req-123"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_formats_with_correlation_id(restore_root_logger):
    configure_logging("debug")
    root = restore_root_logger
    (handler,) = root.handlers
    stream = io.StringIO()
    handler.setStream(stream)

    token = correlation_id_ctx.set("abc")
    try:
        logging.getLogger("gearup.test").debug("cache hit")
    finally:
        correlation_id_ctx.reset(token)

    assert root.level == logging.DEBUG
    assert "DEBUG [abc] gearup.test: cache hit" in stream.getvalue()
