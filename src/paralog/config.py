"""
File Chain (see DEVELOPER.md):
Doc Version: v1.0.0
Date Modified: 2026-10-19

- Called by: main.py
- Purpose: Configuration loading and defaults management

Paralog Configuration - Configuration Loading and Defaults Management

PURPOSE:
    Manages configuration loading from TOML files and provides defaults
    for the prefix, the suffix and the output of the paralog command.

WHO READS ME:
    - main.py: Loads configuration via Config.load() during bootstrap

WHO I READ:
    - logger.py: Logger, built by Config.logger()
    - models.py: ParalogError

DEPENDENCIES:
    - serde: TOML serialization/deserialization (@deserialize, @serialize)
    - serde.toml: from_toml(), to_toml()
    - dataclasses: @dataclass decorator
    - logging: Configuration loading status messages

KEY EXPORTS:
    - Config: Dataclass containing all configuration parameters

CONFIG PARAMETERS:
    - prefix: put in front of every line (default: "")
    - suffix: aligned after every line (default: "")
    - output: "stdout", "stderr" or a file path to append to (default: stdout)

FILE FORMAT:
    paralog.toml example:
    ```toml
    prefix = "[LOG]"
    suffix = "- {{{15:04:05}}}"
    output = "stdout"
    ```
"""

import logging
import sys
from dataclasses import dataclass

from serde import deserialize, serialize, SerdeError
from serde.toml import from_toml, to_toml

from paralog.logger import Logger
from paralog.models import ParalogError

_LOGGER = logging.getLogger(__name__)

STREAMS = ("stdout", "stderr")


@deserialize
@serialize
@dataclass
class Config:
    """paralog configuration"""

    prefix: str = ""
    suffix: str = ""
    output: str = "stdout"

    @classmethod
    def load(cls, filename: str) -> "Config":
        """load the configuration from the given file"""
        try:
            with open(filename, encoding="utf-8") as handle:
                cfg = from_toml(cls, handle.read())
            _LOGGER.info("Configuration loaded from file %s", filename)
        except (FileNotFoundError, TypeError, ValueError, SerdeError) as exc:
            if not isinstance(exc, FileNotFoundError):
                _LOGGER.error(exc)
            cfg = cls()
            _LOGGER.warning("using configuration defaults")
        return cfg

    def save(self, filename: str):
        """save the configuration to the given file"""
        with open(filename, "w+", encoding="utf-8") as handle:
            handle.write(to_toml(self))

    @property
    def to_stream(self) -> bool:
        """True if the output is one of the standard streams"""
        return self.output in STREAMS

    def logger(self) -> Logger:
        """a logger writing to the configured standard stream"""
        if not self.to_stream:
            raise ParalogError(
                f"output {self.output!r} is a file, open it and pass it to the logger"
            )
        return Logger(self.prefix, self.suffix, getattr(sys, self.output))
