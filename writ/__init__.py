"""
Writ Argument Decoder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import Command
from .decoders import (
    OptionDecoder,
    OptionDefaulter,
    new_flag_accumulator,
    new_flag_decoder,
    new_option_decoder,
)
from .defaults import Defaulter, EnvDefaulter
from .exceptions import (
    CommandSpecError,
    ConversionError,
    DecodeError,
    OptionSpecError,
    SpecError,
    WritError,
)
from .help import CommandGroup, Help, OptionGroup
from .option import Option
from .path import Path
from .spec import command, flag, new, option
from .types import (
    InputFile,
    OutputFile,
    float32,
    float64,
    int8,
    int16,
    int32,
    int64,
    uint,
    uint8,
    uint16,
    uint32,
    uint64,
)

logger = logging.getLogger("writ")


__all__ = [
    "Command",
    "Option",
    "Path",
    "OptionDecoder",
    "OptionDefaulter",
    "new_option_decoder",
    "new_flag_decoder",
    "new_flag_accumulator",
    "Defaulter",
    "EnvDefaulter",
    "Help",
    "OptionGroup",
    "CommandGroup",
    "new",
    "option",
    "flag",
    "command",
    "WritError",
    "SpecError",
    "OptionSpecError",
    "CommandSpecError",
    "ConversionError",
    "DecodeError",
    "InputFile",
    "OutputFile",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "float32",
    "float64",
]
