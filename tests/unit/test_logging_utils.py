"""
Unit tests for logging_utils and logging_levels modules.
"""

import importlib
import logging
from unittest.mock import patch

import pytest

from utils import logging_levels, logging_utils
from utils.logging_levels import TRACE_LEVEL, is_trace_enabled


class TestTraceLevel:
    """Tests for the TRACE level registration."""

    def test_level_name_registered(self) -> None:
        assert TRACE_LEVEL == 5
        assert logging.getLevelName(TRACE_LEVEL) == "TRACE"
        assert TRACE_LEVEL < logging.DEBUG

    def test_reload_is_idempotent(self) -> None:
        trace_method = logging.Logger.trace
        importlib.reload(logging_levels)
        assert logging.Logger.trace is trace_method

    def test_logger_trace_method(self, caplog) -> None:
        caplog.set_level(TRACE_LEVEL, logger="tests.levels")
        logging.getLogger("tests.levels").trace("value=%s", 42)

        records = [r for r in caplog.records if r.name == "tests.levels"]
        assert len(records) == 1
        assert records[0].levelname == "TRACE"
        assert records[0].getMessage() == "value=42"

    def test_is_trace_enabled(self, caplog) -> None:
        logger = logging.getLogger("tests.levels.enabled")
        caplog.set_level(logging.DEBUG, logger=logger.name)
        assert is_trace_enabled(logger) is False

        caplog.set_level(TRACE_LEVEL, logger=logger.name)
        assert is_trace_enabled(logger) is True


class TestLoggingUtils:
    """Test cases for logging utilities."""

    @pytest.mark.parametrize(
        "debug, trace, expected",
        [
            (False, False, logging.INFO),
            (True, False, logging.DEBUG),
            (False, True, TRACE_LEVEL),
            (True, True, TRACE_LEVEL),
        ],
    )
    def test_resolve_level(self, debug: bool, trace: bool, expected: int) -> None:
        assert logging_utils.resolve_level(debug, trace) == expected

    def test_get_server_logger_with_suffix(self) -> None:
        logger = logging_utils.get_server_logger("routes")
        assert logger.name == "app.server.routes"

    def test_get_trace_logger(self) -> None:
        assert logging_utils.get_trace_logger().name == "app.trace"
        assert logging_utils.get_trace_logger("requests").name == "app.trace.requests"

    @patch("utils.logging_utils._loggers_initialized", False)
    @patch("utils.logging_utils._log_timestamp", None)
    def test_init_logging_idempotent(self) -> None:
        parent = logging.getLogger("app")
        original_level = parent.level
        try:
            with patch("logging.basicConfig") as mock_basic_config:
                logging_utils.init_logging(debug=True)
                logging_utils.init_logging(debug=False)

            mock_basic_config.assert_called_once()
            assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG
            assert parent.level == logging.DEBUG
        finally:
            parent.setLevel(original_level)

    @patch("utils.logging_utils._loggers_initialized", False)
    @patch("utils.logging_utils._log_timestamp", None)
    def test_init_logging_sets_parent_level(self) -> None:
        parent = logging.getLogger("app")
        original_level = parent.level
        try:
            with patch("logging.basicConfig"):
                logging_utils.init_logging(trace=True)
            assert parent.level == TRACE_LEVEL
        finally:
            parent.setLevel(original_level)

    @patch("utils.logging_utils._loggers_initialized", False)
    @patch("utils.logging_utils._log_timestamp", None)
    def test_init_logging_with_log_folder(self, tmp_path) -> None:
        log_folder = tmp_path / "logs"
        parent = logging.getLogger("app")
        original_level = parent.level
        handlers_before = list(parent.handlers)
        try:
            with patch("logging.basicConfig"):
                logging_utils.init_logging(log_folder=str(log_folder))

            log_files = list(log_folder.glob("trace_*.log"))
            assert len(log_files) == 1
            new_handlers = [h for h in parent.handlers if h not in handlers_before]
            assert len(new_handlers) == 1
            assert isinstance(new_handlers[0], logging.FileHandler)
        finally:
            for handler in parent.handlers:
                if handler not in handlers_before:
                    parent.removeHandler(handler)
                    handler.close()
            parent.setLevel(original_level)
