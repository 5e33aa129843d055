"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0

- Called by: Python import system (when `import paralog` is executed), entry_points (CLI commands)
- Reads from: importlib.metadata (package metadata), engine.py, logger.py, config.py, main.py
- Writes to: None (package initialization only, exports public API)

Purpose: Package initialization for paralog. Defines public API exports, loads package
         metadata (__version__, __description__), and provides central import point
         for the log paragraph formatter.

Package Structure:
    - engine.py: Prefix, aligned suffix, placeholder expansion pipeline
    - layout.py: Reference-time layout formatter for {{{layout}}} placeholders
    - logger.py: Logger holding prefix, suffix and default writer
    - logformat.py: logging.Formatter producing paragraphs
    - config.py: Configuration management
    - models.py: Errors and shared types
    - main.py: CLI entry point and argument parsing

Entry Points:
    - paralog: CLI command (calls main.main())
    - python -m paralog: Direct module execution

Public API Exports:
    - format_paragraph(), prefix_lines(), suffix_lines(), expand_placeholders()
    - format_time(): layout formatting
    - Logger, Config, ParagraphFormatter, ParalogError
    - __version__, __description__: Package metadata
"""

import importlib.metadata as importlib_metadata

from .engine import expand_placeholders, format_paragraph, prefix_lines, suffix_lines
from .layout import format_time
from .logger import Logger
from .logformat import ParagraphFormatter
from .config import Config
from .models import ParalogError

_metadata = importlib_metadata.metadata("paralog")
__version__ = _metadata["Version"]
__description__ = _metadata["Summary"]


__all__ = [
    "Config",
    "Logger",
    "ParagraphFormatter",
    "ParalogError",
    "expand_placeholders",
    "format_paragraph",
    "format_time",
    "prefix_lines",
    "suffix_lines",
]
