"""Tests for structured logging setup."""

from __future__ import annotations

import io
import json
import logging

import pytest

from typeahead.config.settings import ObservabilitySettings
from typeahead.observability.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_json_lines(self) -> None:
        stream = io.StringIO()
        setup_logging(ObservabilitySettings(log_level="info", log_format="json"), stream=stream)

        logging.getLogger("typeahead.core.engine").warning("Category '%s' dropped", "comment")
        line = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert line["event"] == "Category 'comment' dropped"
        assert line["level"] == "warning"
        assert line["logger"] == "typeahead.core.engine"

    def test_level_filters_debug(self) -> None:
        stream = io.StringIO()
        setup_logging(ObservabilitySettings(log_level="warning"), stream=stream)

        logging.getLogger("typeahead.test").info("hidden")
        assert stream.getvalue() == ""

    def test_http_loggers_quieted(self) -> None:
        setup_logging(ObservabilitySettings(log_level="info"), stream=io.StringIO())
        assert logging.getLogger("httpx").level == logging.WARNING

        setup_logging(ObservabilitySettings(log_level="debug"), stream=io.StringIO())
        assert logging.getLogger("httpx").level == logging.DEBUG
