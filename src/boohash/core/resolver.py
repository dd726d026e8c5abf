"""Turn raw command-line tokens into a validated :class:`Configuration`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

from boohash import PROGRAM_NAME
from boohash.core.algorithms import Algorithm
from boohash.core.errors import (
    DuplicateOptionError,
    InsufficientArgumentsError,
    MalformedOptionError,
    MissingInputFileError,
    UnknownAlgorithmError,
    UnrecognizedOptionError,
)

logger = logging.getLogger(__name__)

INPUT_FLAG = "-i"
OUTPUT_FLAG = "-f"
HELP_FLAGS = frozenset({"-h", "--help"})
RECOGNISED_FLAGS = (INPUT_FLAG, OUTPUT_FLAG)

USAGE = f"usage: {PROGRAM_NAME} <sha256|sha512> {INPUT_FLAG} <input-file> [{OUTPUT_FLAG} <output-file>]"


@dataclass(frozen=True)
class Configuration:
    """Validated, read-only result of parsing the command line.

    Compares by value but is unhashable, because ``options`` is a read-only
    mapping view.
    """

    command: Algorithm
    options: Mapping[str, str]
    program: str = field(default=PROGRAM_NAME)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if INPUT_FLAG not in self.options:
            raise MissingInputFileError(f"no input file provided; try again with {INPUT_FLAG} <file_name>")
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    @property
    def input_path(self) -> str:
        return self.options[INPUT_FLAG]

    @property
    def output_path(self) -> str | None:
        return self.options.get(OUTPUT_FLAG)


def is_help_request(tokens: Sequence[str]) -> bool:
    """Return ``True`` when the algorithm slot holds a help flag."""

    return len(tokens) > 1 and tokens[1] in HELP_FLAGS


def _scan_options(tokens: Sequence[str]) -> dict[str, str]:
    options: dict[str, str] = {}
    index = 0
    while index < len(tokens):
        flag = tokens[index]
        if flag not in RECOGNISED_FLAGS:
            raise UnrecognizedOptionError(f"unrecognised option {flag!r}; expected one of {', '.join(RECOGNISED_FLAGS)}")
        if flag in options:
            raise DuplicateOptionError(f"option {flag} given more than once")
        if index + 1 >= len(tokens):
            raise MalformedOptionError(f"option {flag} requires a value")
        value = tokens[index + 1]
        if value == "":
            raise MalformedOptionError(f"option {flag} requires a non-empty value")
        options[flag] = value
        index += 2
    return options


def build(tokens: Sequence[str]) -> Configuration:
    """Parse ``tokens`` (``argv`` style, program name first) into a configuration.

    Raises a :class:`~boohash.core.errors.ConfigError` subclass describing the
    first problem found; nothing is read from or written to disk.
    """

    if len(tokens) < 2:
        raise InsufficientArgumentsError("not enough arguments; consider using option --help")

    command = Algorithm.from_token(tokens[1])
    if command is None:
        raise UnknownAlgorithmError(f"hashing algorithm {tokens[1]!r} not implemented; choose sha256 or sha512")

    config = Configuration(command=command, options=_scan_options(tokens[2:]))
    logger.debug("Resolved %s with options %s", config.command.value, dict(config.options))
    return config


__all__ = [
    "Configuration",
    "HELP_FLAGS",
    "INPUT_FLAG",
    "OUTPUT_FLAG",
    "USAGE",
    "build",
    "is_help_request",
]
