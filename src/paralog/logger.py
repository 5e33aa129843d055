"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0
Date Modified: 2026-10-19

- Called by: config.py, main.py, user code
- Purpose: keep a prefix, a suffix and a default writer, emit paragraphs

Paralog Logger - Prefix/Suffix/Writer Holder

PURPOSE:
    A Logger remembers the prefix, the suffix and the default writer of
    one kind of log and forwards every call to engine.format_paragraph().
    Setters return the logger so they can be chained:

        logger = Logger().set_prefix("[ERROR]").set_suffix("- {{{15:04:05}}}")
        logger.log("CRITICAL ERROR")

WHO READS ME:
    - config.py: Config.logger() builds one
    - main.py: emits the command line messages

WHO I READ:
    - engine.py: format_paragraph()
    - models.py: Clock, Writer

KEY EXPORTS:
    - Logger: the holder
    - sprint(*args): join arguments into one string

METHODS:
    - slog / slogf: return the paragraph as a string
    - flog / flogf: write the paragraph to the given writer
    - log / logf: write the paragraph to the default writer

ERRORS:
    Whatever the writer raises is propagated as is.
"""

import io
import sys

from paralog.engine import format_paragraph
from paralog.models import Clock, Writer


def sprint(*args) -> str:
    """concatenate the str() of every argument, a space is put between two
    neighbours when neither of them is a string
    """
    parts: list[str] = []
    previous_is_str = True
    for arg in args:
        is_str = isinstance(arg, str)
        if parts and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(str(arg))
        previous_is_str = is_str
    return "".join(parts)


def _is_binary(writer: Writer) -> bool:
    if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(writer, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_paragraph(writer: Writer, paragraph: str) -> int:
    """write paragraph with a single write() call, returns what the writer
    reports as written (the payload length if it reports nothing)
    """
    payload = paragraph.encode("utf-8") if _is_binary(writer) else paragraph
    written = writer.write(payload)
    return len(payload) if written is None else written


class Logger:
    """one logger system: prefix, suffix and default writer"""

    def __init__(
        self,
        prefix: str = "",
        suffix: str = "",
        writer: Writer | None = None,
        clock: Clock | None = None,
    ):
        self._prefix = prefix
        self._suffix = suffix
        self._writer = writer
        self._clock = clock

    def __repr__(self) -> str:
        return f"Logger(prefix={self._prefix!r}, suffix={self._suffix!r})"

    @property
    def prefix(self) -> str:
        """the prefix of each line, e.g. "[ERROR]" """
        return self._prefix

    @property
    def suffix(self) -> str:
        """the suffix of each line, e.g. "- {{{15:04:05}}}" """
        return self._suffix

    @property
    def writer(self) -> Writer:
        """the default writer, standard output unless set"""
        return self._writer if self._writer is not None else sys.stdout

    def set_prefix(self, prefix: str) -> "Logger":
        self._prefix = prefix
        return self

    def set_suffix(self, suffix: str) -> "Logger":
        self._suffix = suffix
        return self

    def set_writer(self, writer: Writer | None) -> "Logger":
        """set the default writer used by log() and logf(), None goes back
        to standard output
        """
        self._writer = writer
        return self

    def slog(self, *args) -> str:
        """join the arguments (see sprint) and format them as a paragraph"""
        return format_paragraph(sprint(*args), self._prefix, self._suffix, self._clock)

    def slogf(self, fmt: str, *args) -> str:
        """like slog() but %-formats the arguments into fmt first"""
        return self.slog(fmt % args if args else fmt)

    def flog(self, writer: Writer, *args) -> int:
        return write_paragraph(writer, self.slog(*args))

    def flogf(self, writer: Writer, fmt: str, *args) -> int:
        return write_paragraph(writer, self.slogf(fmt, *args))

    def log(self, *args) -> int:
        return self.flog(self.writer, *args)

    def logf(self, fmt: str, *args) -> int:
        return self.flogf(self.writer, fmt, *args)
