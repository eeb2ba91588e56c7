# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Command` dataclass, the root of a decodable command tree.

A `Command` declares a name, aliases, options and subcommands. Commands form a
tree; a command does not know its parent. Trees can be built directly, with
`writ.new()` from an annotated spec class, or with `writ.config.loader()` from a
YAML/TOML file.

`Command.decode()` validates the tree, applies option defaults, and decodes
program arguments according to GNU getopt_long conventions (see
`writ.parser.decode`).

Example:
    verbosity = {"verbose": 0}
    cmd = Command(
        name="tool",
        options=[
            Option(
                names=["v", "verbose"],
                decoder=new_flag_accumulator(verbosity, "verbose"),
                flag=True,
                plural=True,
            )
        ],
    )
    path, positional = cmd.decode(["-vv", "file.txt"])
    # verbosity == {"verbose": 2}, positional == ["file.txt"]
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import IO, Sequence

from writ.defaults import set_defaults
from writ.exceptions import CommandSpecError
from writ.help import CommandGroup, Help, OptionGroup, write_help
from writ.logger import logger
from writ.option import Option
from writ.parser import parse_args
from writ.path import Path


@dataclass(eq=False)
class Command:
    """
    Specifies program options and subcommands.

    When a Command is built directly instead of through `writ.new()`, its help
    output is empty until `help.usage` and the help groups are filled in.

    Attributes:
        name (str): The command name. Required.
        aliases (list[str]): Alternate names matched as subcommand names.
        options (list[Option]): The options declared on this command.
        subcommands (list[Command]): Nested commands.
        help (Help): Help output layout. Does not affect decoding.
        description (str): Help text. Commands without one are left out of
            generated help.
    """

    name: str
    aliases: list[str] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    subcommands: list[Command] = field(default_factory=list)
    help: Help = field(default_factory=Help)
    description: str = ""

    def decode(self, args: Sequence[str]) -> tuple[Path, list[str]]:
        """
        Decode program arguments according to GNU getopt_long conventions.

        Options are matched in short and long form and decoded with the matched
        option's decoder. Subcommand names are matched and removed from the
        start of the positional arguments. Subcommand matching stops at the
        first unmatched positional argument, and options are matched against
        the command hierarchy as it exists where the option appears. A bare
        "--" ends option parsing.

        Args:
            args (Sequence[str]): Program arguments, without the program name.

        Returns:
            tuple[Path, list[str]]: The selected command path and the
            positional arguments.

        Raises:
            SpecError: If the command tree or a static default is invalid.
            DecodeError: If the arguments cannot be decoded.
        """
        self.validate()
        self.set_defaults()
        logger.debug("[%s] Decoding arguments: %r", self.name, list(args))
        return parse_args(self, args)

    def subcommand(self, name: str) -> Command | None:
        """Return the subcommand with a matching name or alias, if any."""
        for subcommand in self.subcommands:
            if subcommand.name == name or name in subcommand.aliases:
                return subcommand
        return None

    def option(self, name: str) -> Option | None:
        """
        Return the option with a matching name, if any.

        Only this command's options are searched, not its subcommands'.
        """
        for option in self.options:
            if name in option.names:
                return option
        return None

    def group_options(self, *names: str) -> OptionGroup:
        """
        Build an `OptionGroup` from the named options, for help output.

        Raises:
            CommandSpecError: If an option is not found.
        """
        group = OptionGroup()
        for name in names:
            option = self.option(name)
            if option is None:
                raise CommandSpecError(f"Option not found: {name}")
            group.options.append(option)
        return group

    def group_commands(self, *names: str) -> CommandGroup:
        """
        Build a `CommandGroup` from the named subcommands, for help output.

        Raises:
            CommandSpecError: If a subcommand is not found.
        """
        group = CommandGroup()
        for name in names:
            subcommand = self.subcommand(name)
            if subcommand is None:
                raise CommandSpecError(f"Command not found: {name}")
            group.commands.append(subcommand)
        return group

    def write_help(self, file: IO[str] | None = None) -> None:
        """Render help output to `file` (stdout by default)."""
        write_help(self, file)

    def exit_help(self, error: BaseException | str | None = None) -> None:
        """
        Write help output and terminate the program.

        Without an error, help goes to stdout and the exit code is 0. Otherwise
        help and the error message go to stderr and the exit code is 1.
        """
        if error is None:
            self.write_help(sys.stdout)
            sys.exit(0)
        self.write_help(sys.stderr)
        print(f"\nError: {error}", file=sys.stderr)
        sys.exit(1)

    def set_defaults(self) -> None:
        """Apply option defaults across the command tree."""
        set_defaults(self)

    def validate(self) -> None:
        """
        Check the command tree's structure.

        Subcommands are validated first. Then this command's name and aliases
        are checked, then its options (each valid, names unique across the
        options), then its subcommands (names and aliases unique across the
        subcommands). Uniqueness is checked per command, not globally.

        Raises:
            CommandSpecError: If a name is invalid or duplicated.
            OptionSpecError: If an option is invalid.
        """
        for subcommand in self.subcommands:
            subcommand.validate()

        if not self.name:
            raise CommandSpecError("Command name cannot be empty")
        self._validate_name(self.name, "Command names", f"command {self.name}")
        for alias in self.aliases:
            if not alias:
                raise CommandSpecError(
                    f"Command aliases cannot be empty (command {self.name})"
                )
            self._validate_name(
                alias, "Command aliases", f"command {self.name}, alias {alias}"
            )

        seen: set[str] = set()
        for option in self.options:
            option.validate()
            for name in option.names:
                if name in seen:
                    raise CommandSpecError(
                        f"option names must be unique ({name} is specified multiple times)"
                    )
                seen.add(name)

        seen = set()
        for subcommand in self.subcommands:
            for name in [subcommand.name, *subcommand.aliases]:
                if name in seen:
                    raise CommandSpecError(
                        f"command names must be unique ({name} is specified multiple times)"
                    )
                seen.add(name)

    @staticmethod
    def _validate_name(name: str, kind: str, context: str) -> None:
        if name.startswith("-"):
            raise CommandSpecError(f"{kind} cannot begin with '-' ({context})")
        if any(char.isspace() for char in name):
            raise CommandSpecError(f"{kind} cannot have spaces ({context!r})")

    def __str__(self) -> str:
        return self.name
