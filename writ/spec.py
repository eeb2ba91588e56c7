# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds command trees from annotated spec classes.

`new()` inspects the type hints of a spec object and turns every attribute
annotated with `option()`, `flag()` or `command()` metadata into an `Option` or
subcommand bound to that attribute. Decoding the resulting `Command` updates
the spec object's attributes in place.

Example:
    @dataclass
    class Replacer:
        input: Annotated[
            InputFile | None,
            option("i", description="Read input from FILE", default="-", placeholder="FILE"),
        ] = None
        replacements: Annotated[
            dict[str, str], option("r, replace", placeholder="ORIG=NEW")
        ] = field(default_factory=dict)
        help: Annotated[bool, flag("h, help", description="Display this help text")] = False

    spec = Replacer()
    cmd = new("replacer", spec)
    path, positional = cmd.decode(["-r", "a=b", "-i", "words.txt"])

Metadata:
- option(names, description, placeholder, default, env): an option taking an
  argument. `list` and `dict` attributes may be repeated. When both `default`
  and `env` are given, the environment variable is consulted first.
- flag(names, description): an option taking no argument. `bool` attributes are
  set to True; `int` attributes count occurrences and may be repeated.
- command(name, aliases, description): a subcommand built from the attribute's
  value, itself a spec object.

An attribute whose value already implements `OptionDecoder` is used as the
option's decoder instead of one picked from its type.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from writ.command import Command
from writ.decoders import (
    OptionDecoder,
    new_flag_accumulator,
    new_flag_decoder,
    new_option_decoder,
    strip_optional,
)
from writ.defaults import Defaulter, EnvDefaulter
from writ.exceptions import CommandSpecError, OptionSpecError
from writ.help import apply_default_help
from writ.logger import logger
from writ.option import Option
from writ.path import Path

_NAME_SEPARATORS = re.compile(r"[,\s]+")


def parse_names(*specs: str) -> list[str]:
    """Split comma- or whitespace-separated name lists into names."""
    names: list[str] = []
    for spec in specs:
        names.extend(name for name in _NAME_SEPARATORS.split(spec) if name)
    return names


@dataclass(frozen=True)
class OptionField:
    """Metadata marking an attribute as an argument-taking option."""

    names: tuple[str, ...]
    description: str = ""
    placeholder: str = ""
    default: str = ""
    env: str = ""


@dataclass(frozen=True)
class FlagField:
    """Metadata marking an attribute as a flag."""

    names: tuple[str, ...]
    description: str = ""


@dataclass(frozen=True)
class CommandField:
    """Metadata marking an attribute as a subcommand spec."""

    names: tuple[str, ...]
    aliases: tuple[str, ...] = ()
    description: str = ""


def option(
    *names: str,
    description: str = "",
    placeholder: str = "",
    default: str = "",
    env: str = "",
) -> OptionField:
    """Declare an option. Use as `Annotated[T, option("o, output")]`."""
    return OptionField(
        names=tuple(parse_names(*names)),
        description=description,
        placeholder=placeholder,
        default=default,
        env=env,
    )


def flag(*names: str, description: str = "") -> FlagField:
    """Declare a flag. Use as `Annotated[bool, flag("v, verbose")]`."""
    return FlagField(names=tuple(parse_names(*names)), description=description)


def command(
    name: str, aliases: str | list[str] | tuple[str, ...] = (), description: str = ""
) -> CommandField:
    """Declare a subcommand. Use as `Annotated[SubSpec, command("sub")]`."""
    if isinstance(aliases, str):
        aliases = (aliases,)
    return CommandField(
        names=tuple(parse_names(name)),
        aliases=tuple(parse_names(*aliases)),
        description=description,
    )


def new(name: str, spec: Any) -> Command:
    """
    Build a validated `Command` from an annotated spec object.

    Args:
        name (str): The name of the top-level command.
        spec (Any): An instance of an annotated class, usually a dataclass.

    Returns:
        Command: A command whose options are bound to `spec`'s attributes.

    Raises:
        SpecError: If the spec is not valid.
    """
    command = _parse_command_spec(name, spec, Path())
    command.validate()
    return command


def _parse_command_spec(name: str, spec: Any, path: Path) -> Command:
    if spec is None or isinstance(spec, type):
        raise CommandSpecError(
            f"command spec must be an instance of an annotated class, not {spec!r}"
        )

    cmd = Command(name=name)
    path = Path([*path, cmd])

    for attr, hint in get_type_hints(type(spec), include_extras=True).items():
        if get_origin(hint) is not Annotated:
            continue
        value_type, *metadata = get_args(hint)
        for marker in metadata:
            if isinstance(marker, CommandField):
                cmd.subcommands.append(
                    _parse_command_field(spec, attr, value_type, marker, path)
                )
            elif isinstance(marker, FlagField):
                cmd.options.append(_parse_flag_field(spec, attr, value_type, marker))
            elif isinstance(marker, OptionField):
                cmd.options.append(_parse_option_field(spec, attr, value_type, marker))
            else:
                continue
            break

    apply_default_help(cmd, str(path))
    logger.debug(
        "[%s] Built command with %d options and %d subcommands",
        path,
        len(cmd.options),
        len(cmd.subcommands),
    )
    return cmd


def _check_exported(attr: str, kind: str) -> None:
    if attr.startswith("_"):
        raise CommandSpecError(f"{kind}s must not be private (field {attr})")


def _parse_command_field(
    spec: Any, attr: str, value_type: Any, marker: CommandField, path: Path
) -> Command:
    _check_exported(attr, "command")
    if not marker.names:
        raise CommandSpecError(f"commands must have a name (field {attr})")
    if len(marker.names) != 1:
        raise CommandSpecError(f"commands must have a single name (field {attr})")

    subspec = getattr(spec, attr, None)
    if subspec is None:
        subspec = value_type()
        setattr(spec, attr, subspec)

    cmd = _parse_command_spec(marker.names[0], subspec, path)
    cmd.aliases = list(marker.aliases)
    cmd.description = marker.description
    cmd.validate()
    return cmd


def _parse_flag_field(
    spec: Any, attr: str, value_type: Any, marker: FlagField
) -> Option:
    _check_exported(attr, "flag")
    if not marker.names:
        raise CommandSpecError(
            f"at least one flag name must be specified (field {attr})"
        )

    opt = Option(names=list(marker.names), flag=True, description=marker.description)
    current = getattr(spec, attr, None)
    if isinstance(current, OptionDecoder):
        opt.decoder = current
    elif value_type is bool:
        opt.decoder = new_flag_decoder(spec, attr)
    elif value_type is int:
        opt.decoder = new_flag_accumulator(spec, attr)
        opt.plural = True
    else:
        raise CommandSpecError(
            "field type not valid as a flag -- did you mean to use 'option' "
            f"instead? (field {attr})"
        )

    opt.validate()
    return opt


def _parse_option_field(
    spec: Any, attr: str, value_type: Any, marker: OptionField
) -> Option:
    _check_exported(attr, "option")
    if not marker.names:
        raise CommandSpecError(
            f"at least one option name must be specified (field {attr})"
        )

    opt = Option(
        names=list(marker.names),
        description=marker.description,
        placeholder=marker.placeholder,
    )
    current = getattr(spec, attr, None)
    if isinstance(current, OptionDecoder):
        opt.decoder = current
    else:
        if value_type is bool:
            raise CommandSpecError(
                f"bool fields are not valid as options. Use a 'flag' instead (field {attr})"
            )
        base_type = strip_optional(value_type)
        origin = get_origin(base_type) or base_type
        if origin in (list, dict):
            opt.plural = True
        try:
            opt.decoder = new_option_decoder(spec, attr, value_type)
        except OptionSpecError as error:
            raise OptionSpecError(f"{error} (field {attr})") from error

    if marker.default:
        opt.decoder = Defaulter(opt.decoder, marker.default)
    if marker.env:
        opt.decoder = EnvDefaulter(opt.decoder, marker.env)

    opt.validate()
    return opt
