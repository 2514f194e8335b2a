"""
Unit tests for core.logger module.

Tests:
- Logger initialization with name and output mode
- format_kv_pairs() escaping and truncation
- StructuredFormatter output
- All log levels dispatch to the wrapped logger
- JSON output mode
"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from srvdiscovery.core import Logger
from srvdiscovery.core.logger import StructuredFormatter, format_kv_pairs


class TestInit:
    """Logger initialization."""

    def test_name(self):
        logger = Logger("srvdiscovery.test")
        assert logger.name == "srvdiscovery.test"

    def test_default_not_json(self):
        logger = Logger("test")
        assert logger._json_output is False

    def test_json_mode(self):
        logger = Logger("test", json_output=True)
        assert logger._json_output is True

    def test_default_max_value_length(self):
        assert Logger("test")._max_value_length == 1000


class TestFormatKvPairs:
    """Key-value pairs formatting and escaping."""

    def test_simple(self):
        assert format_kv_pairs({"host": "a.example.com"}) == " host=a.example.com"
        assert format_kv_pairs({"count": 3}) == " count=3"

    def test_with_spaces(self):
        assert format_kv_pairs({"error": "no answer"}) == ' error="no answer"'

    def test_with_equals(self):
        assert format_kv_pairs({"token": "ssl=true"}) == ' token="ssl=true"'

    def test_with_double_quotes(self):
        assert format_kv_pairs({"key": 'say "hello"'}) == ' key="say \\"hello\\""'

    def test_empty_value(self):
        assert format_kv_pairs({"key": ""}) == ' key=""'

    def test_empty_dict(self):
        assert format_kv_pairs({}) == ""

    def test_truncation(self):
        result = format_kv_pairs({"record": "x" * 1500}, max_value_length=1000)
        assert "truncated 500 chars" in result

    def test_no_truncation(self):
        result = format_kv_pairs({"record": "x" * 1500}, max_value_length=None)
        assert "truncated" not in result

    def test_custom_prefix(self):
        assert format_kv_pairs({"key": "val"}, prefix="") == "key=val"


class TestStructuredFormatter:
    """Root-handler formatting of structured and plain records."""

    def _record(self, **extra):
        record = logging.LogRecord(
            "srvdiscovery.discovery",
            logging.WARNING,
            __file__,
            1,
            "srv_record_rejected",
            None,
            None,
        )
        for k, v in extra.items():
            setattr(record, k, v)
        return record

    def test_plain_record(self):
        out = StructuredFormatter().format(self._record())
        assert out == "warning srvdiscovery.discovery srv_record_rejected"

    def test_structured_record(self):
        record = self._record(structured_kv={"target": "node.evil.com"})
        out = StructuredFormatter().format(record)
        assert out.endswith("srv_record_rejected target=node.evil.com")


class TestLogLevels:
    """All log levels."""

    @pytest.fixture
    def mock_logger(self):
        logger = Logger("test")
        mock = MagicMock()
        mock.isEnabledFor.return_value = True
        logger._logger = mock
        return logger, mock

    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_level_dispatch(self, mock_logger, method, level):
        logger, mock = mock_logger
        getattr(logger, method)("event", count=1)
        mock.log.assert_called_once()
        args, kwargs = mock.log.call_args
        assert args[0] == level
        assert args[1] == "event"
        assert kwargs["extra"] == {"structured_kv": {"count": 1}}

    def test_exception_attaches_traceback(self, mock_logger):
        logger, mock = mock_logger
        logger.exception("failed", host="example.com")
        assert mock.log.call_args.kwargs["exc_info"] is True

    def test_disabled_level_is_skipped(self, mock_logger):
        logger, mock = mock_logger
        mock.isEnabledFor.return_value = False
        logger.debug("noisy")
        mock.log.assert_not_called()


class TestIntegration:
    """Integration tests with real logging."""

    def test_log_to_handler(self, caplog):
        with caplog.at_level(logging.INFO):
            logger = Logger("integration_test")
            logger.info("seedlist_resolved", count=2)

        assert len(caplog.records) == 1
        assert caplog.records[0].message == "seedlist_resolved"
        assert caplog.records[0].structured_kv == {"count": 2}

    def test_values_truncated_in_extra(self, caplog):
        with caplog.at_level(logging.INFO):
            logger = Logger("integration_test", max_value_length=10)
            logger.info("txt_record", record="x" * 20)

        assert "truncated 10 chars" in caplog.records[0].structured_kv["record"]

    def test_json_log_to_handler(self, caplog):
        with caplog.at_level(logging.INFO):
            logger = Logger("json_test", json_output=True)
            logger.warning("srv_lookup_failed", host="example.com")

        parsed = json.loads(caplog.records[0].message)
        assert parsed["message"] == "srv_lookup_failed"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "json_test"
        assert parsed["host"] == "example.com"

    def test_json_exception_keeps_error_level(self, caplog):
        with caplog.at_level(logging.ERROR):
            logger = Logger("json_test", json_output=True)
            try:
                raise OSError("resolver unreachable")
            except OSError:
                logger.exception("txt_lookup_failed", host="example.com")

        record = caplog.records[0]
        assert json.loads(record.message)["level"] == "error"
        assert record.exc_info is not None
