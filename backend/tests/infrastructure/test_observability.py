"""Tests for the JSON log formatter and logging setup."""

import json
import logging
from uuid import UUID

import pytest

from storefront.infrastructure.observability import (
    JSONFormatter, build_formatter, setup_logging,
)


def _record(**extra):
    record = logging.LogRecord(
        "storefront.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_formats_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "storefront.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_surfaces_request_fields_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="RESOURCE_NOT_FOUND", path="/users/1", secret="x"),
    ))
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert log["path"] == "/users/1"
    assert "secret" not in log


def test_stringifies_non_json_values():
    resource_id = UUID("12345678-1234-5678-1234-567812345678")
    log = json.loads(JSONFormatter().format(_record(resource_id=resource_id)))
    assert log["resource_id"] == str(resource_id)


def test_text_format_for_anything_but_json():
    assert isinstance(build_formatter("json"), JSONFormatter)
    assert not isinstance(build_formatter("text"), JSONFormatter)


def test_setup_logging_replaces_its_handler(restore_root_logger):
    first = setup_logging("DEBUG", "text")
    second = setup_logging("WARNING", "json")
    assert first not in restore_root_logger.handlers
    assert second in restore_root_logger.handlers
    assert restore_root_logger.level == logging.WARNING
