# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Path`, the list of commands selected by a decode.

A `Path` starts at the root command where `Command.decode()` was invoked and
ends at the most specific subcommand the user named. It is built fresh for
every decode and is distinct from the static command tree.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from writ.command import Command
    from writ.option import Option


class Path(list):
    """An ordered list of commands from the root to the selected command."""

    def first(self) -> Command:
        """Return the root command."""
        return self[0]

    def last(self) -> Command:
        """Return the user-selected command."""
        return self[-1]

    def find_option(self, name: str) -> Option | None:
        """Search for the named option on the nearest command in the path."""
        for command in reversed(self):
            option = command.option(name)
            if option is not None:
                return option
        return None

    def __str__(self) -> str:
        return " ".join(command.name for command in self)

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"
