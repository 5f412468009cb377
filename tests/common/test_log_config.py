"""Tests for catalog_feed/common/log_config.py"""

import io
import logging
import sys

from catalog_feed.common.log_config import FeedLogFormatter, setup_logging


def _record(level, msg, name="catalog_feed.parsing.catalog_parser"):
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


class TestSetupLogging:
    def teardown_method(self):
        """Reset logger between tests."""
        logger = logging.getLogger("catalog_feed")
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

    def test_levels(self):
        assert setup_logging().level == logging.INFO
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(quiet=True).level == logging.WARNING

    def test_default_stream_is_stderr(self):
        logger = setup_logging()
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_repeated_calls_do_not_duplicate_handlers(self):
        setup_logging()
        setup_logging(verbose=True)
        assert len(logging.getLogger("catalog_feed").handlers) == 1

    def test_verbose_shows_parser_counts(self, make_row):
        from catalog_feed.parsing import parse_catalog

        stream = io.StringIO()
        setup_logging(verbose=True, stream=stream)
        parse_catalog(make_row(standard_price="n/a") + "\nshort")

        assert (
            "DEBUG catalog_feed.parsing.catalog_parser: "
            "Parsed 2 catalog items (1 short rows padded, 1 amounts coerced to 0)"
        ) in stream.getvalue()

    def test_default_hides_parser_counts(self, make_row):
        from catalog_feed.parsing import parse_catalog

        stream = io.StringIO()
        setup_logging(stream=stream)
        parse_catalog(make_row(standard_price="n/a"))
        assert stream.getvalue() == ""


class TestFeedLogFormatter:
    def test_short_labels(self):
        formatter = FeedLogFormatter()
        assert formatter.format(_record(logging.WARNING, "odd row")) == "WARN  odd row"
        assert formatter.format(_record(logging.INFO, "done")) == "INFO  done"

    def test_names_in_verbose_mode(self):
        formatter = FeedLogFormatter(show_names=True)
        line = formatter.format(_record(logging.ERROR, "cannot read", name="catalog_feed.cli"))
        assert line == "ERROR catalog_feed.cli: cannot read"

    def test_exception_text_appended(self):
        formatter = FeedLogFormatter()
        try:
            raise OSError("disk full")
        except OSError:
            record = logging.LogRecord("catalog_feed", logging.ERROR, __file__, 1, "write failed", None, sys.exc_info())
        output = formatter.format(record)
        assert output.startswith("ERROR write failed\n")
        assert "OSError: disk full" in output
