"""Error taxonomy shared by the resolver, the digest engine and the router."""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    """Stable identifiers for every failure the pipeline can report."""

    INSUFFICIENT_ARGUMENTS = "InsufficientArguments"
    UNKNOWN_ALGORITHM = "UnknownAlgorithm"
    MALFORMED_OPTION = "MalformedOption"
    DUPLICATE_OPTION = "DuplicateOption"
    UNRECOGNIZED_OPTION = "UnrecognizedOption"
    MISSING_INPUT_FILE = "MissingInputFile"
    INPUT_FILE_NOT_FOUND = "InputFileNotFound"
    INPUT_FILE_UNREADABLE = "InputFileUnreadable"
    READ_ERROR = "ReadError"
    OUTPUT_WRITE_ERROR = "OutputWriteError"


class BoohashError(Exception):
    """Base class for all errors raised by boohash."""

    kind: ErrorKind


class ConfigError(BoohashError):
    """Command-line tokens could not be turned into a configuration."""


class InsufficientArgumentsError(ConfigError):
    kind = ErrorKind.INSUFFICIENT_ARGUMENTS


class UnknownAlgorithmError(ConfigError):
    kind = ErrorKind.UNKNOWN_ALGORITHM


class MalformedOptionError(ConfigError):
    kind = ErrorKind.MALFORMED_OPTION


class DuplicateOptionError(ConfigError):
    kind = ErrorKind.DUPLICATE_OPTION


class UnrecognizedOptionError(ConfigError):
    kind = ErrorKind.UNRECOGNIZED_OPTION


class MissingInputFileError(ConfigError):
    kind = ErrorKind.MISSING_INPUT_FILE


class DigestError(BoohashError):
    """The input file could not be opened or streamed."""


class InputFileNotFoundError(DigestError):
    kind = ErrorKind.INPUT_FILE_NOT_FOUND


class InputFileUnreadableError(DigestError):
    kind = ErrorKind.INPUT_FILE_UNREADABLE


class ReadError(DigestError):
    kind = ErrorKind.READ_ERROR


class OutputError(BoohashError):
    """The computed digest could not be delivered."""


class OutputWriteError(OutputError):
    kind = ErrorKind.OUTPUT_WRITE_ERROR

    def __init__(self, message: str, *, digest: str) -> None:
        super().__init__(message)
        self.digest = digest


__all__ = [
    "BoohashError",
    "ConfigError",
    "DigestError",
    "DuplicateOptionError",
    "ErrorKind",
    "InputFileNotFoundError",
    "InputFileUnreadableError",
    "InsufficientArgumentsError",
    "MalformedOptionError",
    "MissingInputFileError",
    "OutputError",
    "OutputWriteError",
    "ReadError",
    "UnknownAlgorithmError",
    "UnrecognizedOptionError",
]
