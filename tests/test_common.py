"""Tests for common utilities."""

import json
import logging
import sys

from link_redirector.common.logging_config import JsonLineFormatter, setup_logging, get_logger


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_level(self):
        logger = setup_logging(level="warning")

        assert logger.name == "link_redirector"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_setup_logging_replaces_handlers(self):
        setup_logging(level="INFO")
        logger = setup_logging(level="INFO")

        assert len(logger.handlers) == 1

    def test_setup_logging_file(self, tmp_path):
        log_file = tmp_path / "service.log"
        logger = setup_logging(level="INFO", log_file=str(log_file), json_format=True)

        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        line = log_file.read_text().strip()
        assert line.startswith("{")
        assert '"message": "hello"' in line

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_get_logger_namespacing(self):
        assert get_logger().name == "link_redirector"
        assert get_logger("web").name == "link_redirector.web"
        assert get_logger("link_redirector.store").name == "link_redirector.store"

    def test_json_format_escapes_messages(self, tmp_path):
        log_file = tmp_path / "service.log"
        logger = setup_logging(level="INFO", log_file=str(log_file), json_format=True)

        logger.info('Created link: abc -> https://example.com/"quoted"\\path')
        for handler in logger.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip())
        assert entry["message"] == 'Created link: abc -> https://example.com/"quoted"\\path'
        assert entry["level"] == "INFO"
        assert entry["logger"] == "link_redirector"

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_json_format_includes_exception(self):
        formatter = JsonLineFormatter()
        try:
            raise ConnectionError("store unavailable")
        except ConnectionError:
            record = logging.LogRecord(
                "link_redirector", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        entry = json.loads(formatter.format(record))
        assert entry["message"] == "failed"
        assert "ConnectionError: store unavailable" in entry["exception"]
