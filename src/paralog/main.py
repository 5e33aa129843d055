# File Chain (see DEVELOPER.md):
# Doc Version: v1.0.0
#
"""
Paralog Main Entry Point - CLI Argument Parsing and Application Bootstrap

PURPOSE:
    Entry point for the paralog CLI tool. Handles argument parsing,
    configuration loading and writes each message as a log paragraph.

WHO READS ME:
    - Users: via CLI command `paralog` or `python -m paralog`

WHO I READ:
    - config.py: Configuration loading and defaults
    - models.py: ParalogError exception handling
    - logger.py: Logger
    - layout.py: TOKENS for --list-tokens
    - logformat.py: Paragraph log formatting

DEPENDENCIES:
    - argparse: CLI argument parsing
    - logging: Application logging
    - os, sys: System operations

KEY EXPORTS:
    - main(): Application entry point
    - create_argparser(): Creates and configures the argument parser

FLOW:
    1. Parse CLI arguments (create_argparser)
    2. Load configuration from paralog.toml (or defaults)
    3. Apply -P/-S/-o overrides, optionally write the configuration
    4. Emit every MESSAGE (or standard input) as one paragraph
"""

import argparse
import logging
import os
import sys

import paralog
from paralog.config import Config
from paralog.layout import TOKENS
from paralog.logformat import ParagraphFormatter
from paralog.logger import Logger
from paralog.models import ParalogError

_LOGGER = logging.getLogger(__name__)


def create_argparser(parser_class=argparse.ArgumentParser):
    """create the argparser for paralog"""
    parser = parser_class(
        prog=paralog.__name__, description=paralog.__description__
    )
    config_settings = parser.add_argument_group("configuration")

    config_settings.add_argument(
        "-c",
        "--config",
        dest="configfile",
        help="Use the configuration from this file, defaults to %(default)s",
        default="paralog.toml",
    )
    config_settings.add_argument(
        "-w",
        "--write",
        dest="writeconfig",
        action="store_true",
        help="Write the effective configuration to a file and exit",
        default=False,
    )
    config_settings.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {paralog.__version__}"
    )
    config_settings.add_argument(
        "-l",
        "--loglevel",
        type=str,
        default=os.environ.get("LOG_LEVEL", "WARN"),
        help="DEBUG, INFO, WARN, ERROR, CRITICAL, defaults to %(default)s",
    )

    parser.add_argument(
        "-P",
        "--prefix",
        type=str,
        default=None,
        help='Prefix of every line, overrides the configuration (e.g. "[LOG]")',
    )
    parser.add_argument(
        "-S",
        "--suffix",
        type=str,
        default=None,
        help='Suffix of every line, overrides the configuration (e.g. "- {{{15:04:05}}}")',
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="stdout, stderr or a file to append to, overrides the configuration",
    )
    parser.add_argument(
        "--list-tokens",
        dest="listtokens",
        action="store_true",
        help="List all timestamp layout tokens",
    )
    parser.add_argument(
        "messages",
        nargs="*",
        metavar="MESSAGE",
        help="Messages to log, one paragraph each; standard input if none",
    )
    return parser


def get_log_level(level_name: str) -> tuple[int, bool]:
    log_levels = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    level_name = level_name.upper()
    if level_name in log_levels:
        return log_levels[level_name], False
    else:
        return logging.WARNING, True


def setup_logging(loglevel: str):
    """sets up the logging, takes the given loglevel and uses the
    paragraph log formatter
    """
    logging.basicConfig(level=logging.WARN)
    level, unknown_loglevel = get_log_level(loglevel)
    logging.root.setLevel(level)
    paragraph_formatter = ParagraphFormatter()
    for handler in logging.root.handlers:
        handler.setFormatter(paragraph_formatter)
    if unknown_loglevel:
        _LOGGER.warning("Unknown log level: %s", loglevel.upper())


def read_stdin() -> str:
    """the whole standard input without its final newline"""
    text = sys.stdin.read()
    if text.endswith("\n"):
        text = text[:-1]
    return text


def emit(logger: Logger, messages: list[str]) -> int:
    """log every message, returns the total written"""
    written = 0
    for message in messages:
        written += logger.log(message)
    _LOGGER.info("%d paragraph(s), %d written", len(messages), written)
    return written


def main():
    """main function, returns 0 on success, 1 otherwise"""
    parser = create_argparser()
    args = parser.parse_args()
    setup_logging(args.loglevel)

    if args.listtokens:
        width = max(len(token) for token, _ in TOKENS)
        print("Available layout tokens:")
        for token, description in TOKENS:
            print(f"  {token:<{width}}  {description}")
        return 0

    cfg = Config.load(args.configfile)
    if args.prefix is not None:
        cfg.prefix = args.prefix
    if args.suffix is not None:
        cfg.suffix = args.suffix
    if args.output is not None:
        cfg.output = args.output

    try:
        if args.writeconfig:
            cfg.save(args.configfile)
            _LOGGER.info("Configuration written to %s", args.configfile)
            return 0

        messages = args.messages or [read_stdin()]
        if cfg.to_stream:
            emit(cfg.logger(), messages)
        else:
            with open(cfg.output, "a", encoding="utf-8") as handle:
                emit(Logger(cfg.prefix, cfg.suffix, handle), messages)
        retval = 0
    except (ParalogError, OSError) as exc:
        _LOGGER.error(exc)
        retval = 1
    return retval


if __name__ == "__main__":
    sys.exit(main())
