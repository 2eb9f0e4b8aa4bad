import io
import json
import logging

from nbssh.infrastructure.logging import StructuredFormatter, setup_logging


class TestStructuredLogging:
    """Test suite for the JSON log output."""

    def test_json_output_with_extra(self, package_logger):
        """Test that records are JSON with extra fields."""
        stream = io.StringIO()
        setup_logging("DEBUG", "json", stream)

        logging.getLogger("nbssh.test").debug("Built SSH command", extra={'argv': ["ssh", "h"]})

        entry = json.loads(stream.getvalue().strip())
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "nbssh.test"
        assert entry["message"] == "Built SSH command"
        assert entry["argv"] == ["ssh", "h"]
        assert "timestamp" in entry

    def test_unserializable_extra(self):
        """Test that unknown objects are rendered with str()."""
        record = logging.LogRecord("nbssh", logging.INFO, __file__, 1, "msg", (), None)
        record.path = object()
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["path"].startswith("<object object")

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            import sys
            record = logging.LogRecord("nbssh", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        entry = json.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]

    def test_text_format(self, package_logger):
        stream = io.StringIO()
        setup_logging("INFO", "text", stream)
        logging.getLogger("nbssh.test").info("hello")
        assert "INFO nbssh.test: hello" in stream.getvalue()

    def test_setup_replaces_previous_handler(self, package_logger):
        """Test that repeated setup does not duplicate output."""
        first, second = io.StringIO(), io.StringIO()
        setup_logging("INFO", "json", first)
        setup_logging("INFO", "json", second)
        logging.getLogger("nbssh").info("once")
        assert first.getvalue() == ""
        assert len(second.getvalue().strip().splitlines()) == 1
