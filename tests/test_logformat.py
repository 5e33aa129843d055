"""Tests for the logging bridge."""

import logging
import sys

from paralog.logformat import ParagraphFormatter


def make_record(msg, *args, level=logging.WARNING, exc_info=None):
    return logging.LogRecord("paralog.test", level, __file__, 1, msg, args, exc_info)


class TestParagraphFormatter:
    def test_single_line(self, clock):
        formatter = ParagraphFormatter(clock=clock)
        record = make_record("hello %s", "world")
        assert formatter.format(record) == "[WARNING] hello world - 14:05:09\n"

    def test_multi_line_is_aligned(self, clock):
        formatter = ParagraphFormatter(clock=clock)
        record = make_record("a\nbbb", level=logging.INFO)
        assert formatter.format(record) == (
            "[INFO] a   - 14:05:09\n[INFO] bbb - 14:05:09\n"
        )

    def test_custom_template_and_suffix(self):
        formatter = ParagraphFormatter(template="%(name)s:", suffix="")
        assert formatter.format(make_record("hi")) == "paralog.test: hi\n"

    def test_exception_is_part_of_the_paragraph(self, clock):
        try:
            1 / 0
        except ZeroDivisionError:
            record = make_record("boom", level=logging.ERROR, exc_info=sys.exc_info())
        result = ParagraphFormatter(clock=clock).format(record)
        lines = result[:-1].split("\n")
        assert "ZeroDivisionError" in result
        assert all(line.startswith("[ERROR] ") for line in lines)
        assert all(line.endswith("- 14:05:09") for line in lines)
