# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for writ command trees.

Builds a `Command` tree from a YAML or TOML document. Option values are bound
into plain dicts: each command's options are stored under their `dest`, and
each subcommand's values are nested under the subcommand's name.

Example (YAML):
    name: backup
    description: Back up files
    options:
      - names: v, verbose
        type: count
        description: Increase verbosity
    commands:
      - name: push
        aliases: [up]
        description: Upload a snapshot
        options:
          - names: r, remote
            default: origin
            env: BACKUP_REMOTE
            placeholder: NAME
            description: Remote to push to

    command, values = loader("backup.yaml")
    path, positional = command.decode(["-v", "push", "--remote=mirror"])
    # values == {"verbose": 1, "push": {"remote": "mirror"}}
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from writ.command import Command
from writ.decoders import new_flag_accumulator, new_flag_decoder, new_option_decoder
from writ.defaults import Defaulter, EnvDefaulter
from writ.help import apply_default_help
from writ.logger import logger
from writ.option import Option
from writ.spec import parse_names
from writ.types import (
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

OptionType = Literal[
    "string",
    "int",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "float",
    "float32",
    "float64",
    "list",
    "map",
    "input",
    "output",
    "datetime",
    "bool",
    "count",
]

VALUE_TYPES: dict[str, Any] = {
    "string": str,
    "int": int,
    "int8": int8,
    "int16": int16,
    "int32": int32,
    "int64": int64,
    "uint": uint,
    "uint8": uint8,
    "uint16": uint16,
    "uint32": uint32,
    "uint64": uint64,
    "float": float,
    "float32": float32,
    "float64": float64,
    "list": list[str],
    "map": dict[str, str],
    "input": InputFile,
    "output": OutputFile,
    "datetime": datetime,
}

FLAG_TYPES = {"bool", "count"}


def zero_value(option_type: str) -> Any:
    """Return the initial value stored for an option of the given type."""
    if option_type == "string":
        return ""
    if option_type in ("float", "float32", "float64"):
        return 0.0
    if option_type == "list":
        return []
    if option_type == "map":
        return {}
    if option_type == "bool":
        return False
    if option_type in ("input", "output", "datetime"):
        return None
    return 0


class RawOption(BaseModel):
    """Raw option model for writ configuration."""

    names: list[str]
    type: OptionType = "string"
    dest: str | None = None
    description: str = ""
    placeholder: str = ""
    default: str | None = None
    env: str | None = None
    plural: bool | None = None

    @field_validator("names", mode="before")
    @classmethod
    def split_names(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_names(value)
        return value

    @field_validator("default", mode="before")
    @classmethod
    def stringify_default(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def validate_flag_defaults(self) -> RawOption:
        if self.type in FLAG_TYPES and (self.default is not None or self.env):
            raise ValueError(f"{self.type} options do not accept 'default' or 'env'")
        return self

    def get_dest(self) -> str:
        """Return the values key, derived from the first long name if unset."""
        if self.dest:
            return self.dest
        for name in self.names:
            if len(name) > 1:
                return name.replace("-", "_")
        if not self.names:
            raise ValueError("options require at least one name")
        return self.names[0]


class RawCommand(BaseModel):
    """Raw command model for writ configuration."""

    name: str
    aliases: list[str] = Field(default_factory=list)
    description: str = ""
    usage: str = ""
    header: str = ""
    footer: str = ""
    options: list[RawOption] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    @field_validator("aliases", mode="before")
    @classmethod
    def split_aliases(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_names(value)
        return value


RawCommand.model_rebuild()


def convert_option(raw_option: RawOption, values: dict[str, Any]) -> Option:
    dest = raw_option.get_dest()
    if dest in values:
        raise ValueError(f"Duplicate value destination '{dest}'")
    values[dest] = zero_value(raw_option.type)

    option = Option(
        names=list(raw_option.names),
        description=raw_option.description,
        placeholder=raw_option.placeholder,
    )
    if raw_option.type == "bool":
        option.flag = True
        option.decoder = new_flag_decoder(values, dest)
    elif raw_option.type == "count":
        option.flag = True
        option.plural = True
        option.decoder = new_flag_accumulator(values, dest)
    else:
        option.plural = raw_option.type in ("list", "map")
        option.decoder = new_option_decoder(
            values, dest, VALUE_TYPES[raw_option.type]
        )
        if raw_option.default is not None:
            option.decoder = Defaulter(option.decoder, raw_option.default)
        if raw_option.env:
            option.decoder = EnvDefaulter(option.decoder, raw_option.env)

    if raw_option.plural is not None:
        option.plural = raw_option.plural
    return option


def convert_command(
    raw_command: RawCommand,
    values: dict[str, Any],
    parents: tuple[str, ...] = (),
) -> Command:
    invocation = (*parents, raw_command.name)
    command = Command(
        name=raw_command.name,
        aliases=list(raw_command.aliases),
        description=raw_command.description,
    )
    for raw_option in raw_command.options:
        command.options.append(convert_option(raw_option, values))
    for raw_subcommand in raw_command.commands:
        if raw_subcommand.name in values:
            raise ValueError(
                f"Subcommand '{raw_subcommand.name}' collides with an option destination"
            )
        sub_values: dict[str, Any] = {}
        values[raw_subcommand.name] = sub_values
        command.subcommands.append(
            convert_command(raw_subcommand, sub_values, invocation)
        )

    apply_default_help(command, " ".join(invocation))
    if raw_command.usage:
        command.help.usage = raw_command.usage
    command.help.header = raw_command.header
    command.help.footer = raw_command.footer
    return command


def loader(file_path: Path | str) -> tuple[Command, dict[str, Any]]:
    """
    Load a command tree from a YAML or TOML file.

    The file describes the root command. Each command may define:
    - name: the command name (defaults to the file name without suffix)
    - aliases, description, usage, header, footer
    - options: a list of option definitions
    - commands: a list of nested command definitions

    Each option defines at least `names`, plus optionally `type`, `dest`,
    `description`, `placeholder`, `default`, `env` and `plural`.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        tuple[Command, dict[str, Any]]: The validated root command and the dict
        its option values are decoded into.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or its content is invalid.
        SpecError: If the described command tree is not valid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a command definition.\n"
            "Example:\n"
            "name: 'tool'\n"
            "options:\n"
            "  - names: 'v, verbose'\n"
            "    type: 'count'"
        )

    raw_config.setdefault("name", path.stem)
    raw_command = RawCommand(**raw_config)
    values: dict[str, Any] = {}
    command = convert_command(raw_command, values)
    command.validate()
    logger.debug("Loaded command '%s' from %s", command.name, path)
    return command, values
