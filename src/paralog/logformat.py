"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0
Date Modified: 2026-10-19

- Called by: main.py
- Purpose: logging.Formatter that prints records as log paragraphs

Paralog Log Formatter - Paragraph Formatting for the logging Module

PURPOSE:
    Lets the standard logging module produce the same paragraphs as a
    Logger: the level tag is the prefix of every line of the message,
    the time is the aligned suffix.

WHO READS ME:
    - main.py: installs ParagraphFormatter on the root handlers

WHO I READ:
    - engine.py: format_paragraph()

DEPENDENCIES:
    - logging: Standard library logging.Formatter

KEY EXPORTS:
    - ParagraphFormatter: logging.Formatter subclass

LOG FORMAT:
    [WARNING] Unknown log level: FOO - 13:04:26

    The handler adds its own line terminator, the formatter leaves out
    one of the two closing newlines.
"""

import logging

from paralog.engine import PARAGRAPH_TERMINATOR, format_paragraph
from paralog.models import Clock


class ParagraphFormatter(logging.Formatter):
    """return a formatter that prints log messages as paragraphs"""

    template = "[%(levelname)s]"
    suffix = "- {{{15:04:05}}}"

    def __init__(
        self,
        template: str | None = None,
        suffix: str | None = None,
        clock: Clock | None = None,
    ):
        super().__init__()
        if template is not None:
            self.template = template
        if suffix is not None:
            self.suffix = suffix
        self.clock = clock

    def prefix(self, record: logging.LogRecord) -> str:
        return self.template % record.__dict__

    def format(self, record):
        record.message = record.getMessage()
        content = record.message
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            content = f"{content}\n{record.exc_text}"
        if record.stack_info:
            content = f"{content}\n{self.formatStack(record.stack_info)}"
        paragraph = format_paragraph(
            content, self.prefix(record), self.suffix, self.clock
        )
        return paragraph[: -len(PARAGRAPH_TERMINATOR) + 1]
