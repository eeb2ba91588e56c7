# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by writ.

Writ separates two kinds of failure:

- Specification errors describe an invalid Command/Option tree (blank names,
  duplicate names, missing decoders, rejected static defaults). They are
  programming errors, raised eagerly before any user input is processed.
- Decode errors describe invalid user input (unknown options, missing
  arguments, values that fail conversion, repeated singular options). They are
  raised from `Command.decode()` and are meant to be shown to the user.

Exception Hierarchy:
- WritError
    ├── SpecError
    │   ├── OptionSpecError
    │   └── CommandSpecError
    ├── DecodeError
    └── ConversionError (also a ValueError)
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from writ.path import Path


class WritError(Exception):
    """Base exception for writ."""


class SpecError(WritError):
    """Exception raised when a Command or Option declaration is invalid."""


class OptionSpecError(SpecError):
    """Exception raised when an Option declaration or its decoder is invalid."""


class CommandSpecError(SpecError):
    """Exception raised when a Command declaration is invalid."""


class ConversionError(WritError, ValueError):
    """Exception raised by decoders when an argument cannot be converted."""


class DecodeError(WritError):
    """
    Exception raised when program arguments cannot be decoded.

    Attributes:
        path (Path | None): The command path reached before the failure.
        positional (list[str]): Positional arguments collected before the failure.
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        positional: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.positional: list[str] = positional if positional is not None else []
