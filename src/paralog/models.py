"""
Paralog Data Models - Shared Types and Error Handling

PURPOSE:
    Defines the exception hierarchy and the small shared types used
    throughout paralog.

WHO READS ME:
    - engine.py: Clock type for injectable time sources
    - logger.py: Clock, Writer
    - config.py, main.py: ParalogError

WHO I READ:
    - None (leaf module, no internal dependencies)

KEY EXPORTS:
    - ParalogError: Base exception class for all paralog errors
    - Clock: callable returning the current time
    - Writer: anything with a write() method
    - local_now(): the default clock, current local time
"""

from datetime import datetime
from typing import Any, Callable, Protocol


class ParalogError(Exception):
    """Base class for all errors raised by paralog"""


Clock = Callable[[], datetime]


class Writer(Protocol):
    """a sink accepting str (text streams) or bytes (binary streams)"""

    def write(self, data: Any, /) -> Any: ...


def local_now() -> datetime:
    """the current wall-clock time in the local time zone"""
    return datetime.now().astimezone()
