"""
Writ Argument Decoder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_scanner import ArgumentScanner
from .decode import parse_args

__all__ = [
    "ArgumentScanner",
    "parse_args",
]
