# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help output for commands.

The types in this module are used for presentation only and never affect
argument decoding. Every `Command` carries a `Help` describing how its help
output is laid out; `Command.write_help()` and `Command.exit_help()` render it.

The default layout mimics `--help` output of common GNU programs:

    Usage: replacer [OPTION]...
    Perform text replacement according to the -r/--replace option

    Available Options:
      -i FILE                   Read input values from FILE (default: stdin)
      -r, --replace=ORIG=NEW    Replace occurrences of ORIG with NEW
      -h, --help                Display this help text and exit

Set `Help.template` to a callable taking the `Command` to replace the layout.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import IO, TYPE_CHECKING, Callable

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from writ.command import Command
    from writ.option import Option

HELP_WIDTH = 80
HELP_INDENT = 28


@dataclass
class OptionGroup:
    """
    Groups related options for help output.

    Attributes:
        options (list[Option]): The options to list.
        name (str): Not displayed; for matching within custom templates.
        header (str): Optional message displayed before the group.
        footer (str): Optional message displayed after the group.
    """

    options: list[Option] = field(default_factory=list)
    name: str = ""
    header: str = ""
    footer: str = ""


@dataclass
class CommandGroup:
    """
    Groups related subcommands for help output.

    Attributes:
        commands (list[Command]): The commands to list.
        name (str): Not displayed; for matching within custom templates.
        header (str): Optional message displayed before the group.
        footer (str): Optional message displayed after the group.
    """

    commands: list[Command] = field(default_factory=list)
    name: str = ""
    header: str = ""
    footer: str = ""


@dataclass
class Help:
    """
    Describes the help output of a command.

    Attributes:
        option_groups (list[OptionGroup]): Option listings, in display order.
        command_groups (list[CommandGroup]): Subcommand listings, in display order.
        template (Callable | None): Renders the command instead of the default layout.
        usage (str): Short message displayed at the top. Typically one line.
        header (str): Optional message displayed after the usage line.
        footer (str): Optional message displayed at the end.
    """

    option_groups: list[OptionGroup] = field(default_factory=list)
    command_groups: list[CommandGroup] = field(default_factory=list)
    template: Callable[[Command], str | Text] | None = None
    usage: str = ""
    header: str = ""
    footer: str = ""


def wrap_text(text: str, width: int = HELP_WIDTH, indent: int = HELP_INDENT) -> str:
    """
    Hard-wrap `text` at `width` columns.

    Continuation lines, including those started by an explicit newline in
    `text`, are indented by `indent` spaces. Lines are broken at the column
    limit, not at word boundaries.
    """
    pad = " " * indent
    step = max(width - indent, 1)
    lines: list[str] = []
    for number, segment in enumerate(text.split("\n")):
        prefix = pad if number else ""
        room = max(width - len(prefix), 1)
        lines.append(prefix + segment[:room])
        segment = segment[room:]
        while segment:
            lines.append(pad + segment[:step])
            segment = segment[step:]
    return "\n".join(lines)


def format_option(option: Option) -> str:
    """Format one help line for an option: names, placeholder and description."""
    placeholder = ""
    if not option.flag:
        placeholder = option.placeholder or "ARG"

    short = [f"-{name}" for name in option.short_names()]
    long = [f"--{name}" for name in option.long_names()]
    names = ", ".join(short + long)
    if placeholder:
        if long:
            names += f"={placeholder}"
        else:
            names += f" {placeholder}"

    return wrap_text(f"  {names:<24}  {option.description}".rstrip())


def format_command(command: Command) -> str:
    """Format one help line for a subcommand."""
    return wrap_text(f"  {command.name:<24}  {command.description}".rstrip())


def render_help(command: Command) -> Text:
    """
    Render help output for `command` as rich `Text`.

    Uses `command.help.template` when set, otherwise the default GNU-like layout.
    """
    help_spec = command.help
    if help_spec.template is not None:
        rendered = help_spec.template(command)
        return rendered if isinstance(rendered, Text) else Text(rendered)

    text = Text()
    if help_spec.usage:
        text.append(f"{help_spec.usage}\n", style="bold")
    if help_spec.header:
        text.append(f"{help_spec.header}\n")

    for option_group in help_spec.option_groups:
        text.append("\n")
        if option_group.header:
            text.append(f"{option_group.header}\n", style="bold")
        for option in option_group.options:
            text.append(f"{format_option(option)}\n")
        if option_group.footer:
            text.append(f"{option_group.footer}\n")

    for command_group in help_spec.command_groups:
        text.append("\n")
        if command_group.header:
            text.append(f"{command_group.header}\n", style="bold")
        for subcommand in command_group.commands:
            text.append(f"{format_command(subcommand)}\n")
        if command_group.footer:
            text.append(f"{command_group.footer}\n")

    if help_spec.footer:
        text.append(f"\n{help_spec.footer}\n")
    return text


def write_help(command: Command, file: IO[str] | None = None) -> None:
    """Print the help output of `command` to `file` (stdout by default)."""
    console = Console(file=file or sys.stdout, highlight=False, soft_wrap=True)
    console.print(render_help(command), end="")


def apply_default_help(command: Command, invocation: str) -> None:
    """
    Fill in the generated help layout for `command`.

    Options and subcommands with descriptions are listed under "Available
    Options:" and "Available Commands:". The usage line names `invocation`,
    the space-separated command path.
    """
    visible_options = [option for option in command.options if option.description]
    if visible_options:
        command.help.option_groups = [
            OptionGroup(options=visible_options, header="Available Options:")
        ]
    visible_commands = [sub for sub in command.subcommands if sub.description]
    if visible_commands:
        command.help.command_groups = [
            CommandGroup(commands=visible_commands, header="Available Commands:")
        ]
    command.help.usage = f"Usage: {invocation} [OPTION]... [ARG]..."
