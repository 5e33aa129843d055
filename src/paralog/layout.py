"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0
Date Modified: 2026-10-19

- Called by: engine.py, main.py
- Purpose: reference-time layout formatter for timestamp placeholders

Paralog Layout - Reference-Time Layout Formatting

PURPOSE:
    Renders a datetime using a layout written as the reference instant
    "Mon Jan 2 15:04:05 MST 2006". Every part of the layout that spells
    a field of the reference instant is replaced by the same field of the
    time being formatted, everything else is copied verbatim.

WHO READS ME:
    - engine.py: format_time() for each {{{layout}}} placeholder
    - main.py: TOKENS for --list-tokens

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - datetime: the values being formatted
    - functools: lru_cache for parsed layouts

KEY EXPORTS:
    - format_time(moment, layout): render moment per layout
    - parse_layout(layout): split a layout into literal and token chunks
    - TOKENS: (token, description) pairs, in documentation order

EXAMPLES:
    format_time(moment, "15:04:05")            -> "12:08:34"
    format_time(moment, "Mon. Jan. 2 2006")    -> "Mon. Oct. 19 2026"
    format_time(moment, "2006-01-02T15:04:05Z07:00")
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from functools import lru_cache

TOKENS = (
    ("January", "month name"),
    ("Jan", "month name, 3 letters"),
    ("Monday", "weekday name"),
    ("Mon", "weekday name, 3 letters"),
    ("1", "month number"),
    ("01", "month number, zero padded"),
    ("2", "day of month"),
    ("02", "day of month, zero padded"),
    ("_2", "day of month, space padded"),
    ("__2", "day of year, space padded"),
    ("002", "day of year, zero padded"),
    ("15", "hour, 24-hour clock"),
    ("3", "hour, 12-hour clock"),
    ("03", "hour, 12-hour clock, zero padded"),
    ("4", "minute"),
    ("04", "minute, zero padded"),
    ("5", "second"),
    ("05", "second, zero padded"),
    ("2006", "year"),
    ("06", "year, 2 digits"),
    ("PM", "AM/PM"),
    ("pm", "am/pm"),
    ("MST", "time zone abbreviation"),
    ("-0700", "UTC offset, hhmm"),
    ("-07:00", "UTC offset, hh:mm"),
    ("-07", "UTC offset, hh"),
    ("-070000", "UTC offset, hhmmss"),
    ("-07:00:00", "UTC offset, hh:mm:ss"),
    ("Z0700", "Z for UTC, else UTC offset hhmm"),
    ("Z07:00", "Z for UTC, else UTC offset hh:mm"),
    ("Z07", "Z for UTC, else UTC offset hh"),
    ("Z070000", "Z for UTC, else UTC offset hhmmss"),
    ("Z07:00:00", "Z for UTC, else UTC offset hh:mm:ss"),
    (".000", "fractional seconds, fixed width (1-9 digits, ',' also accepted)"),
    (".999", "fractional seconds, trailing zeros removed (1-9 digits)"),
)

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# numeric zone layouts: (token, iso8601, colon, minutes, seconds)
_ZONES = (
    ("-07:00:00", False, True, True, True),
    ("-070000", False, False, True, True),
    ("-07:00", False, True, True, False),
    ("-0700", False, False, True, False),
    ("-07", False, False, False, False),
    ("Z07:00:00", True, True, True, True),
    ("Z070000", True, False, True, True),
    ("Z07:00", True, True, True, False),
    ("Z0700", True, False, True, False),
    ("Z07", True, False, False, False),
)

@dataclass(frozen=True)
class Chunk:
    """a piece of a parsed layout, either literal text or a token"""

    text: str
    token: str | None = None
    separator: str = ""


def _starts_with_lower(layout: str, pos: int) -> bool:
    return pos < len(layout) and "a" <= layout[pos] <= "z"


def _match_token(layout: str, pos: int) -> tuple[str, int] | None:
    """return (token, length) of the token starting at pos, None if the
    character at pos starts literal text
    """
    rest = layout[pos:]
    char = rest[0]
    if char == "J":
        if rest.startswith("January"):
            return "January", 7
        if rest.startswith("Jan") and not _starts_with_lower(layout, pos + 3):
            return "Jan", 3
    elif char == "M":
        if rest.startswith("Monday"):
            return "Monday", 6
        if rest.startswith("Mon") and not _starts_with_lower(layout, pos + 3):
            return "Mon", 3
        if rest.startswith("MST"):
            return "MST", 3
    elif char == "0":
        if rest.startswith("002"):
            return "002", 3
        if len(rest) > 1 and rest[1] in "123456":
            return rest[:2], 2
    elif char == "1":
        if rest.startswith("15"):
            return "15", 2
        return "1", 1
    elif char == "2":
        if rest.startswith("2006"):
            return "2006", 4
        return "2", 1
    elif char == "_":
        if rest.startswith("_2"):
            # "_2006" is a literal underscore followed by the year
            if rest.startswith("_2006"):
                return None
            return "_2", 2
        if rest.startswith("__2"):
            return "__2", 3
    elif char in "345":
        return char, 1
    elif char == "P":
        if rest.startswith("PM"):
            return "PM", 2
    elif char == "p":
        if rest.startswith("pm"):
            return "pm", 2
    elif char in "-Z":
        for zone, *_ in _ZONES:
            if rest.startswith(zone):
                return zone, len(zone)
    elif char in ".,":
        if len(rest) > 1 and rest[1] in "09":
            digit = rest[1]
            end = 1
            while end < len(rest) and rest[end] == digit:
                end += 1
            if end < len(rest) and rest[end].isdigit():
                return None
            if end - 1 > 9:
                return None
            return digit * (end - 1), end
    return None


@lru_cache(maxsize=256)
def parse_layout(layout: str) -> tuple[Chunk, ...]:
    """split the layout into literal and token chunks"""
    chunks: list[Chunk] = []
    literal: list[str] = []
    pos = 0
    while pos < len(layout):
        match = _match_token(layout, pos)
        if match is None:
            literal.append(layout[pos])
            pos += 1
            continue
        token, length = match
        if literal:
            chunks.append(Chunk("".join(literal)))
            literal = []
        if layout[pos] in ".,":
            chunks.append(Chunk(layout[pos : pos + length], token, layout[pos]))
        else:
            chunks.append(Chunk(token, token))
        pos += length
    if literal:
        chunks.append(Chunk("".join(literal)))
    return tuple(chunks)


def _format_offset(offset: timedelta | None, token: str) -> str:
    _, iso8601, colon, minutes, seconds = next(z for z in _ZONES if z[0] == token)
    total = int(offset.total_seconds()) if offset is not None else 0
    if iso8601 and total == 0:
        return "Z"
    sign = "-" if total < 0 else "+"
    total = abs(total)
    parts = [f"{total // 3600:02d}"]
    if minutes:
        parts.append(f"{total // 60 % 60:02d}")
    if seconds:
        parts.append(f"{total % 60:02d}")
    return sign + (":" if colon else "").join(parts)


def _format_fraction(moment: datetime, chunk: Chunk) -> str:
    # datetime only carries microseconds, deeper digits are zero
    digits = f"{moment.microsecond:06d}000"[: len(chunk.token)]
    if chunk.token[0] == "9":
        digits = digits.rstrip("0")
        if not digits:
            return ""
    return chunk.separator + digits


def _format_token(moment: datetime, chunk: Chunk) -> str:
    token = chunk.token
    hour12 = moment.hour % 12 or 12
    if token == "January":
        return _MONTHS[moment.month - 1]
    if token == "Jan":
        return _MONTHS[moment.month - 1][:3]
    if token == "Monday":
        return _WEEKDAYS[moment.weekday()]
    if token == "Mon":
        return _WEEKDAYS[moment.weekday()][:3]
    if token == "1":
        return str(moment.month)
    if token == "01":
        return f"{moment.month:02d}"
    if token == "2":
        return str(moment.day)
    if token == "02":
        return f"{moment.day:02d}"
    if token == "_2":
        return f"{moment.day:>2d}"
    if token == "__2":
        return f"{moment.timetuple().tm_yday:>3d}"
    if token == "002":
        return f"{moment.timetuple().tm_yday:03d}"
    if token == "15":
        return f"{moment.hour:02d}"
    if token == "3":
        return str(hour12)
    if token == "03":
        return f"{hour12:02d}"
    if token == "4":
        return str(moment.minute)
    if token == "04":
        return f"{moment.minute:02d}"
    if token == "5":
        return str(moment.second)
    if token == "05":
        return f"{moment.second:02d}"
    if token == "2006":
        return f"{moment.year:04d}"
    if token == "06":
        return f"{moment.year % 100:02d}"
    if token == "PM":
        return "PM" if moment.hour >= 12 else "AM"
    if token == "pm":
        return "pm" if moment.hour >= 12 else "am"
    if token == "MST":
        name = moment.tzname()
        if name:
            return name
        return _format_offset(moment.utcoffset(), "-0700")
    if token[0] in "-Z":
        return _format_offset(moment.utcoffset(), token)
    return _format_fraction(moment, chunk)


def format_time(moment: datetime, layout: str) -> str:
    """render moment using the reference-time layout, text that is not a
    layout token is kept as is
    """
    return "".join(
        chunk.text if chunk.token is None else _format_token(moment, chunk)
        for chunk in parse_layout(layout)
    )
