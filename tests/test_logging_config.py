# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import unittest

from arz.config.logging_config import setup_logging


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Clean up the arz logger before each test."""
        root_logger = logging.getLogger("arz")
        self._saved = list(root_logger.handlers)
        root_logger.handlers.clear()

    def tearDown(self) -> None:
        root_logger = logging.getLogger("arz")
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers[:] = self._saved

    def test_setup_creates_log_file(self) -> None:
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_naming_convention(self) -> None:
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^run_\d{8}_\d{6}\.log$")

    def test_root_logger_has_handlers(self) -> None:
        setup_logging()
        self.assertGreaterEqual(len(logging.getLogger("arz").handlers), 2)

    def test_file_handler_level_debug(self) -> None:
        setup_logging()
        file_handlers = [
            h
            for h in logging.getLogger("arz").handlers
            if isinstance(h, logging.FileHandler)
        ]
        self.assertTrue(len(file_handlers) >= 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)

    def test_console_handler_level_warning(self) -> None:
        setup_logging()
        stream_handlers: list[logging.Handler] = [
            h
            for h in logging.getLogger("arz").handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertTrue(len(stream_handlers) >= 1)
        self.assertEqual(stream_handlers[0].level, logging.WARNING)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        setup_logging()
        root_logger = logging.getLogger("arz")
        count_before = len(root_logger.handlers)
        setup_logging()
        self.assertEqual(count_before, len(root_logger.handlers))

    def test_scraper_records_reach_log_file(self) -> None:
        """Child loggers such as arz.gold write into the run log."""
        log_path = setup_logging()
        logging.getLogger("arz.gold").warning("gold row skipped")
        for handler in logging.getLogger("arz").handlers:
            handler.flush()
        self.assertIn("gold row skipped", log_path.read_text(encoding="utf-8"))

    def _console_handler(self) -> logging.Handler:
        return next(
            h
            for h in logging.getLogger("arz").handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        )

    def test_console_level_configurable(self) -> None:
        setup_logging(logging.INFO)
        self.assertEqual(self._console_handler().level, logging.INFO)

    def test_console_line_names_the_source(self) -> None:
        setup_logging()
        handler = self._console_handler()
        record = logging.getLogger("arz.crypto").makeRecord(
            "arz.crypto", logging.WARNING, __file__, 1,
            "Unparseable price", None, None,
        )
        self.assertTrue(handler.filter(record))
        self.assertEqual(
            handler.format(record), "WARNING  | crypto   | Unparseable price"
        )

    def test_log_file_inside_logs_dir(self) -> None:
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")


if __name__ == "__main__":
    unittest.main()
