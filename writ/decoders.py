# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Option decoders convert raw argument strings into typed values.

Every `Option` owns exactly one decoder. A decoder is any object with a
`decode(arg)` method; it writes the converted value into the destination it was
built against and raises `ValueError` (usually `ConversionError`) when the
argument is not valid for that destination. Decoders that also implement
`set_default()` take part in default layering (see `writ.defaults`).

The standard decoders are bound to a `(target, key)` pair. When `target` is a
mutable mapping the value is stored as `target[key]`, otherwise it is stored as
the attribute `key` of `target`.

Decoders:
- IntDecoder / UintDecoder / FloatDecoder: width-checked numbers.
- StringDecoder: stores the argument as-is.
- StringListDecoder: appends each argument to a list.
- StringMapDecoder: upserts `KEY=VALUE` arguments into a dict.
- InputDecoder / OutputDecoder: open files, `-` meaning stdin/stdout.
- DateTimeDecoder: parses dates with python-dateutil.
- FlagDecoder / FlagAccumulator: presence-only flags (bool / counter).

Factories:
- new_option_decoder: pick a decoder from a destination type.
- new_flag_decoder / new_flag_accumulator: build flag decoders.
- strip_optional: unwrap `X | None` destination types.
"""
from __future__ import annotations

import math
import re
import struct
import sys
import types
from collections.abc import MutableMapping
from datetime import datetime
from typing import Any, Protocol, Union, get_args, get_origin, runtime_checkable

from dateutil import parser as date_parser

from writ.exceptions import ConversionError, OptionSpecError
from writ.types import (
    FLOAT_WIDTHS,
    SIGNED_WIDTHS,
    UNSIGNED_WIDTHS,
    InputFile,
    OutputFile,
)

_SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_PATTERN = re.compile(r"[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
# Halfway between the largest float32 and 2**128. Values at or past it round to infinity.
_FLOAT32_OVERFLOW = 3.4028235677973366e38


@runtime_checkable
class OptionDecoder(Protocol):
    """Converts an option argument and stores it in a destination."""

    def decode(self, arg: str) -> None: ...


@runtime_checkable
class OptionDefaulter(Protocol):
    """Initializes a destination to its default before decoding starts."""

    def set_default(self) -> None: ...


class FieldDecoder:
    """Base class for decoders bound to a `(target, key)` destination."""

    def __init__(self, target: Any, key: str) -> None:
        if target is None:
            raise OptionSpecError("decoder target cannot be None")
        self.target = target
        self.key = key

    def get(self) -> Any:
        if isinstance(self.target, MutableMapping):
            return self.target.get(self.key)
        return getattr(self.target, self.key, None)

    def set(self, value: Any) -> None:
        if isinstance(self.target, MutableMapping):
            self.target[self.key] = value
        else:
            setattr(self.target, self.key, value)

    def decode(self, arg: str) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"


class IntDecoder(FieldDecoder):
    """Decodes base-10 signed integers limited to `bits` of width."""

    def __init__(self, target: Any, key: str, bits: int = 64) -> None:
        super().__init__(target, key)
        self.bits = bits

    def decode(self, arg: str) -> None:
        if not _SIGNED_PATTERN.fullmatch(arg):
            raise ConversionError(f"parsing {arg!r}: invalid syntax")
        value = int(arg)
        limit = 1 << (self.bits - 1)
        if not -limit <= value < limit:
            raise ConversionError(f"value {value} would overflow int{self.bits}")
        self.set(value)


class UintDecoder(FieldDecoder):
    """Decodes base-10 unsigned integers limited to `bits` of width."""

    def __init__(self, target: Any, key: str, bits: int = 64) -> None:
        super().__init__(target, key)
        self.bits = bits

    def decode(self, arg: str) -> None:
        if not _UNSIGNED_PATTERN.fullmatch(arg):
            raise ConversionError(f"parsing {arg!r}: invalid syntax")
        value = int(arg)
        if value >= 1 << self.bits:
            raise ConversionError(f"value {value} would overflow uint{self.bits}")
        self.set(value)


class FloatDecoder(FieldDecoder):
    """
    Decodes floating point numbers as a `bits`-wide float.

    Finite numerals that do not fit the width are rejected. 32-bit destinations
    are rounded to single precision.
    """

    def __init__(self, target: Any, key: str, bits: int = 64) -> None:
        super().__init__(target, key)
        self.bits = bits

    def decode(self, arg: str) -> None:
        if not _FLOAT_PATTERN.fullmatch(arg):
            raise ConversionError(f"parsing {arg!r}: invalid syntax")
        value = float(arg)
        literal_inf = "inf" in arg.lower()
        if math.isinf(value) and not literal_inf:
            raise ConversionError(f"parsing {arg!r}: value out of range")
        if self.bits == 32:
            if math.isfinite(value) and abs(value) >= _FLOAT32_OVERFLOW:
                raise ConversionError(f"value {value} would overflow float32")
            value = struct.unpack("f", struct.pack("f", value))[0]
        self.set(value)


class StringDecoder(FieldDecoder):
    """Stores the argument unchanged."""

    def decode(self, arg: str) -> None:
        self.set(arg)


class StringListDecoder(FieldDecoder):
    """Appends each argument to a list, creating the list when absent."""

    def decode(self, arg: str) -> None:
        values = self.get()
        if values is None:
            values = []
            self.set(values)
        values.append(arg)


class StringMapDecoder(FieldDecoder):
    """Upserts `KEY=VALUE` arguments into a dict, splitting on the first `=`."""

    def decode(self, arg: str) -> None:
        key, sep, value = arg.partition("=")
        if not sep:
            raise ConversionError(f"argument {arg!r} is not in key=value format")
        mapping = self.get()
        if mapping is None:
            mapping = {}
            self.set(mapping)
        mapping[key] = value


class InputDecoder(FieldDecoder):
    """Opens an existing file for reading. `-` selects standard input."""

    def decode(self, arg: str) -> None:
        if arg == "-":
            self.set(sys.stdin)
            return
        try:
            stream = open(arg, "r", encoding="UTF-8")
        except OSError as error:
            raise ConversionError(f"cannot open {arg!r}: {error.strerror}") from error
        self.set(stream)


class OutputDecoder(FieldDecoder):
    """
    Creates a file for writing. `-` selects standard output.

    An existing file at the given path is truncated.
    """

    def decode(self, arg: str) -> None:
        if arg == "-":
            self.set(sys.stdout)
            return
        try:
            stream = open(arg, "w", encoding="UTF-8")
        except OSError as error:
            raise ConversionError(f"cannot create {arg!r}: {error.strerror}") from error
        self.set(stream)


class DateTimeDecoder(FieldDecoder):
    """Parses dates and times with `dateutil.parser`."""

    def decode(self, arg: str) -> None:
        try:
            value = date_parser.parse(arg)
        except (ValueError, OverflowError) as error:
            raise ConversionError(
                f"value {arg!r} could not be parsed as a datetime"
            ) from error
        self.set(value)


class FlagDecoder(FieldDecoder):
    """Sets a boolean destination to True whenever the flag is seen."""

    def decode(self, arg: str) -> None:
        self.set(True)


class FlagAccumulator(FieldDecoder):
    """Increments an integer destination every time the flag is seen."""

    def decode(self, arg: str) -> None:
        self.set((self.get() or 0) + 1)


def strip_optional(value_type: Any) -> Any:
    """Unwrap `X | None` into `X`."""
    origin = get_origin(value_type)
    if origin is Union or isinstance(value_type, types.UnionType):
        members = [arg for arg in get_args(value_type) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return value_type


def new_option_decoder(target: Any, key: str, value_type: Any) -> FieldDecoder:
    """
    Build a decoder for a destination of the given type.

    Supported types:
        int, int8, int16, int32, int64
        uint, uint8, uint16, uint32, uint64
        float, float32, float64
        str, list[str], dict[str, str]
        datetime
        InputFile
            Argument must be a path to an existing file, or "-" for stdin.
        OutputFile
            Argument is used to create a new file, or "-" for stdout. An
            existing file at that path is overwritten.

    Args:
        target (Any): The object or mapping holding the destination.
        key (str): The attribute name or mapping key of the destination.
        value_type (Any): The destination type. `X | None` is treated as `X`.

    Returns:
        FieldDecoder: A decoder bound to the destination.

    Raises:
        OptionSpecError: If no decoder exists for the type.
    """
    value_type = strip_optional(value_type)
    origin = get_origin(value_type)
    args = get_args(value_type)

    if value_type is InputFile:
        return InputDecoder(target, key)
    if value_type is OutputFile:
        return OutputDecoder(target, key)
    if value_type is bool:
        raise OptionSpecError("bool destinations must use a flag decoder")
    if value_type in SIGNED_WIDTHS:
        return IntDecoder(target, key, SIGNED_WIDTHS[value_type])
    if value_type in UNSIGNED_WIDTHS:
        return UintDecoder(target, key, UNSIGNED_WIDTHS[value_type])
    if value_type in FLOAT_WIDTHS:
        return FloatDecoder(target, key, FLOAT_WIDTHS[value_type])
    if value_type is str:
        return StringDecoder(target, key)
    if value_type is datetime:
        return DateTimeDecoder(target, key)
    if value_type is list or (origin is list and args in ((), (str,))):
        return StringListDecoder(target, key)
    if value_type is dict or (origin is dict and args in ((), (str, str))):
        return StringMapDecoder(target, key)
    raise OptionSpecError(f"no option decoder available for type {value_type!r}")


def new_flag_decoder(target: Any, key: str) -> FlagDecoder:
    """Build a decoder that sets a boolean destination when the flag is seen."""
    return FlagDecoder(target, key)


def new_flag_accumulator(target: Any, key: str) -> FlagAccumulator:
    """Build a decoder that counts how many times the flag is seen."""
    return FlagAccumulator(target, key)
