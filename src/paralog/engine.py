"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0
Date Modified: 2026-10-19

- Called by: logger.py, logformat.py, main.py
- Purpose: turn arbitrary text into a log paragraph

Paralog Engine - Log Paragraph Formatting Pipeline

PURPOSE:
    Formats multi-line content as a "log paragraph": each line gets the
    prefix, each line is padded so that the suffixes line up in a column,
    timestamp placeholders are expanded and a blank line closes the
    paragraph.

WHO READS ME:
    - logger.py: Logger.slog() calls format_paragraph()
    - logformat.py: ParagraphFormatter.format() calls format_paragraph()

WHO I READ:
    - layout.py: format_time() for placeholder expansion
    - models.py: Clock, local_now()

DEPENDENCIES:
    - re: placeholder pattern

KEY EXPORTS:
    - prefix_lines(text, prefix)
    - suffix_lines(text, suffix)
    - expand_placeholders(text, clock=None)
    - append_terminator(text)
    - format_paragraph(content, prefix="", suffix="", clock=None)

PIPELINE:
    prefix_lines -> suffix_lines -> expand_placeholders -> append_terminator

PLACEHOLDERS:
    "{{{<layout>}}}" anywhere in content, prefix or suffix, where <layout>
    is a reference-time layout (see layout.py), e.g. "{{{15:04:05}}}".
    Each occurrence reads the clock when it is expanded, so two
    placeholders of one paragraph may straddle a clock tick.

EXAMPLE:
    >>> format_paragraph("a\\nbb", "", "#")
    'a  #\\nbb #\\n\\n'
"""

import re

from paralog.layout import format_time
from paralog.models import Clock, local_now

PLACEHOLDER = re.compile(r"\{\{\{.*?\}\}\}")
PARAGRAPH_TERMINATOR = "\n\n"


def prefix_lines(text: str, prefix: str) -> str:
    """put prefix and a space in front of every line of text, an empty
    prefix returns text unchanged
    """
    if not prefix:
        return text
    return "\n".join(f"{prefix} {line}" for line in text.split("\n"))


def suffix_lines(text: str, suffix: str) -> str:
    """append suffix to every line of text, padded with spaces so all the
    suffixes start in the same column, one space after the longest line.

    Line lengths are counted in code points, not bytes and not display
    cells. CRLF line endings are normalized to LF. An empty suffix
    returns text unchanged.
    """
    if not suffix:
        return text
    lines = text.replace("\r\n", "\n").split("\n")
    width = max(len(line) for line in lines)
    return "\n".join(
        line + " " * (width - len(line) + 1) + suffix for line in lines
    )


def expand_placeholders(text: str, clock: Clock | None = None) -> str:
    """replace every {{{layout}}} in text by the time formatted per layout.

    Occurrences are expanded left to right, the clock is read once per
    occurrence. Text produced by an expansion is not scanned again.
    """
    clock = clock or local_now

    def _expand(match: re.Match) -> str:
        layout = match.group(0)[3:-3]
        return format_time(clock(), layout)

    return PLACEHOLDER.sub(_expand, text)


def append_terminator(text: str) -> str:
    """close the paragraph with a blank line"""
    return text + PARAGRAPH_TERMINATOR


def format_paragraph(
    content: str, prefix: str = "", suffix: str = "", clock: Clock | None = None
) -> str:
    """create a log paragraph from content, prefix and suffix"""
    composed = suffix_lines(prefix_lines(content, prefix), suffix)
    return append_terminator(expand_placeholders(composed, clock))
