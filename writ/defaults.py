# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Default layering for option destinations.

Before any argument is decoded, `Command.decode()` walks the command tree and
calls `set_default()` on every option decoder that supports it. The two
standard wrappers here forward `decode()` to the decoder they wrap and add a
default source:

- Defaulter: decodes a static literal. A literal the decoder rejects is a
  programming error and raises `OptionSpecError`.
- EnvDefaulter: decodes the value of an environment variable. If the variable
  is unset, empty, or rejected, it defers to the wrapped decoder's own
  `set_default()`, if any.

Stacking `EnvDefaulter(Defaulter(decoder, "84"), "STACKED")` gives the chain
environment value, then static literal, then the destination's zero value.
Values decoded from the command line always win, since they are decoded after
defaults are set.
"""
from __future__ import annotations

import os
from typing import TYPE_CHECKING

from writ.decoders import OptionDecoder, OptionDefaulter
from writ.exceptions import OptionSpecError
from writ.logger import logger

if TYPE_CHECKING:
    from writ.command import Command


class Defaulter:
    """Wraps a decoder and sets its destination from a static literal."""

    def __init__(self, decoder: OptionDecoder, default_arg: str) -> None:
        self.decoder = decoder
        self.default_arg = default_arg

    def decode(self, arg: str) -> None:
        self.decoder.decode(arg)

    def set_default(self) -> None:
        try:
            self.decoder.decode(self.default_arg)
        except ValueError as error:
            raise OptionSpecError(
                "error setting default value: decoder rejected arg "
                f"{self.default_arg!r}"
            ) from error

    def __repr__(self) -> str:
        return f"Defaulter({self.decoder!r}, default_arg={self.default_arg!r})"


class EnvDefaulter:
    """Wraps a decoder and sets its destination from an environment variable."""

    def __init__(self, decoder: OptionDecoder, key: str) -> None:
        self.decoder = decoder
        self.key = key

    def decode(self, arg: str) -> None:
        self.decoder.decode(arg)

    def set_default(self) -> None:
        value = os.environ.get(self.key, "")
        if value:
            try:
                self.decoder.decode(value)
                logger.debug("Default for %s taken from environment.", self.key)
                return
            except ValueError as error:
                logger.debug(
                    "Ignoring environment value for %s: %s", self.key, error
                )

        if isinstance(self.decoder, OptionDefaulter):
            self.decoder.set_default()

    def __repr__(self) -> str:
        return f"EnvDefaulter({self.decoder!r}, key={self.key!r})"


def set_defaults(command: Command) -> None:
    """
    Apply defaults to every option in the command tree.

    Options are visited parent before children and in declaration order among
    siblings.
    """
    for option in command.options:
        if isinstance(option.decoder, OptionDefaulter):
            option.decoder.set_default()
    for subcommand in command.subcommands:
        set_defaults(subcommand)
