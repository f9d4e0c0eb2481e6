"""Tests for structured logging configuration."""

import io
import json
import logging

from bookshelf.logging import (
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
)


def test_generate_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(len(request_id) == 14 for request_id in ids)


def test_request_context_roundtrip():
    request_id = set_request_context()

    assert get_request_id() == request_id

    clear_request_context()
    assert get_request_id() is None


def test_set_request_context_keeps_given_id():
    try:
        assert set_request_context("req-123") == "req-123"
        assert get_request_id() == "req-123"
    finally:
        clear_request_context()


def test_json_output_includes_request_id():
    stream = io.StringIO()
    configure_logging(debug=False, stream=stream)
    logger = get_logger("bookshelf.tests.json")

    set_request_context("req-456")
    try:
        logger.info("Book added", book_id=9)
    finally:
        clear_request_context()

    event = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert event["event"] == "Book added"
    assert event["book_id"] == 9
    assert event["request_id"] == "req-456"
    assert event["level"] == "info"


def test_level_override_filters_info():
    stream = io.StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    logger = get_logger("bookshelf.tests.filtered")

    logger.info("hidden")
    logger.warning("shown")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "shown" in output


def test_get_logger_binds_initial_values():
    stream = io.StringIO()
    configure_logging(debug=False, stream=stream)
    logger = get_logger("bookshelf.tests.bound", component="store")

    logger.info("Data store created")

    event = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert event["component"] == "store"
    assert event["logger"] == "bookshelf.tests.bound"
