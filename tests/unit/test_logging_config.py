"""Tests for structlog-backed logging setup and writer log records."""

from __future__ import annotations

import io
import json
import logging

import pytest
import structlog

from streamfmt.core.config import ObservabilityConfig
from streamfmt.core.logging_config import setup_logging
from streamfmt.exceptions import UnbalancedStructureError
from streamfmt.formatters.json_writer import JsonWriter


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    pkg = logging.getLogger("streamfmt")
    saved = (list(root.handlers), root.level, pkg.level)
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    pkg.setLevel(saved[2])


class TestSetupLogging:
    def test_installs_single_processor_handler(self, restore_logging):
        setup_logging(ObservabilityConfig(log_level="debug"))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert logging.getLogger("streamfmt").level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, restore_logging):
        setup_logging(ObservabilityConfig(log_level="chatty"))
        assert logging.getLogger().level == logging.WARNING

    def test_json_format_writes_json_lines(self, restore_logging):
        stream = io.StringIO()
        setup_logging(ObservabilityConfig(log_level="INFO", log_format="json"), stream=stream)
        logging.getLogger("streamfmt.replay").info("replayed")
        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["event"] == "replayed"
        assert record["level"] == "info"
        assert record["logger"] == "streamfmt.replay"

    def test_console_format_on_plain_stream(self, restore_logging):
        stream = io.StringIO()
        setup_logging(ObservabilityConfig(log_level="INFO", log_format="console"), stream=stream)
        logging.getLogger("streamfmt.cli").warning("careful")
        line = stream.getvalue()
        assert "careful" in line
        assert not line.lstrip().startswith("{")

    def test_returns_installed_handler(self, restore_logging):
        handler = setup_logging(ObservabilityConfig(), stream=io.StringIO())
        assert logging.getLogger().handlers == [handler]


class TestWriterLogging:
    def test_logs_document_close(self, caplog):
        caplog.set_level(logging.DEBUG, logger="streamfmt")
        JsonWriter().begin_document().end_document()
        assert any(m.startswith("Document closed") for m in caplog.messages)

    def test_logs_rejected_close(self, caplog):
        caplog.set_level(logging.DEBUG, logger="streamfmt")
        with pytest.raises(UnbalancedStructureError):
            JsonWriter().end_array()
        assert "Rejected close of array with no open container" in caplog.messages
