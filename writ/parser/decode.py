# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The decoding engine: matches an argument vector against a command tree.

`parse_args()` follows GNU getopt_long conventions:

- Short options: `-v`, `-vvv` (flags aggregate), `-ofile`, `-o file`.
- Long options: `--verbose`, `--output=file`, `--output file`.
- A bare `-` is a positional argument (commonly "read from stdin").
- A bare `--` ends option parsing; everything after it is positional.

Subcommand names are only matched in the leading run of tokens: the first
positional argument (or `-`, or `--`) ends subcommand matching for good.
Options are resolved against the commands entered so far, nearest command
first. If "first" has a subcommand "second" with option "foo", then
`first second --foo` is valid but `first --foo second` is not. If both define
"bar", `first --bar second` decodes "bar" on "first", and
`first second --bar` decodes it on "second".

Any failure raises `DecodeError` and stops the scan. Values decoded before the
failure are not rolled back.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from writ.exceptions import DecodeError
from writ.logger import logger
from writ.parser.argument_scanner import ArgumentScanner
from writ.path import Path

if TYPE_CHECKING:
    from writ.command import Command
    from writ.option import Option


def parse_args(command: Command, args: Sequence[str]) -> tuple[Path, list[str]]:
    """
    Decode `args` against `command` and its subcommands.

    The command tree should already be validated and have its defaults set;
    `Command.decode()` does both before calling this.

    Args:
        command (Command): The root command.
        args (Sequence[str]): Program arguments, without the program name.

    Returns:
        tuple[Path, list[str]]: The selected command path and the positional
        arguments. The path always starts with `command`; positional is always
        a list, possibly empty.

    Raises:
        DecodeError: If an option is unknown, lacks a required argument, gets an
            argument it does not accept, fails to decode, or is repeated without
            being plural.
    """
    path = Path([command])
    positional: list[str] = []
    seen: set[Option] = set()
    parse_commands, parse_options = True, True

    scanner = ArgumentScanner(args)
    for token in scanner:
        if parse_commands:
            subcommand = path.last().subcommand(token)
            if subcommand is not None:
                logger.debug("[%s] Entering subcommand '%s'", path, subcommand.name)
                path.append(subcommand)
                continue

        if parse_options and token.startswith("-"):
            if token == "-":
                positional.append(token)
                parse_commands = False
                continue
            if token == "--":
                parse_options, parse_commands = False, False
                continue

            try:
                option, current = _process_option(path, scanner, token)
            except DecodeError as error:
                error.path, error.positional = path, positional
                raise
            if option in seen and not option.plural:
                raise DecodeError(
                    f'option "{current}" specified too many times', path, positional
                )
            seen.add(option)
            continue

        parse_commands = False
        positional.append(token)

    return path, positional


def _process_option(
    path: Path, scanner: ArgumentScanner, token: str
) -> tuple[Option, str]:
    if token.startswith("--"):
        return _process_long_option(path, scanner, token)
    return _process_short_option(path, scanner, token)


def _process_long_option(
    path: Path, scanner: ArgumentScanner, token: str
) -> tuple[Option, str]:
    name, separator, value = token[2:].partition("=")
    display = f"--{name}"

    option = path.find_option(name)
    if option is None:
        raise DecodeError(f"option '{display}' is not recognized")

    if option.flag:
        if separator:
            raise DecodeError(f"flag '{display}' does not accept an argument")
        _decode_value(option, display, "")
    elif separator:
        _decode_value(option, display, value)
    else:
        _decode_value(option, display, _take_argument(scanner, display))
    return option, token


def _process_short_option(
    path: Path, scanner: ArgumentScanner, token: str
) -> tuple[Option, str]:
    name, tail = token[1], token[2:]
    display = f"-{name}"

    option = path.find_option(name)
    if option is None:
        raise DecodeError(f"option '{display}' is not recognized")

    if option.flag:
        _decode_value(option, display, "")
        if tail:
            # re-scan the rest of the cluster as its own short option token
            scanner.push(f"-{tail}")
            return option, display
    elif tail:
        _decode_value(option, display, tail)
    else:
        _decode_value(option, display, _take_argument(scanner, display))
    return option, token


def _take_argument(scanner: ArgumentScanner, display: str) -> str:
    arg = scanner.take()
    if arg is None:
        raise DecodeError(f"option '{display}' requires an argument")
    return arg


def _decode_value(option: Option, display: str, arg: str) -> None:
    try:
        option.decoder.decode(arg)  # type: ignore[union-attr]
    except ValueError as error:
        raise DecodeError(f"invalid value for option '{display}': {error}") from error
