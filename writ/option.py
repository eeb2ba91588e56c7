# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, which declares one program option or flag.

An option has one or more names. Names exactly one character long are short
names (`-v`); all other names are long names (`--verbose`). The distinction is
structural and never declared.

Key Attributes:
- `names`: The option's names, without leading dashes.
- `decoder`: The `OptionDecoder` that converts and stores the argument.
- `flag`: True if the option takes no argument.
- `plural`: True if the option may be specified more than once.
- `description`: Help text. Options without one are left out of generated help.
- `placeholder`: Shown next to the option names in help output (e.g. FILE).
"""
from __future__ import annotations

from dataclasses import dataclass, field

from writ.decoders import OptionDecoder
from writ.exceptions import OptionSpecError


@dataclass(eq=False)
class Option:
    """
    Represents a program option or flag.

    Options compare by identity, so a decode can track which ones it has seen.
    """

    names: list[str] = field(default_factory=list)
    decoder: OptionDecoder | None = None
    flag: bool = False
    plural: bool = False
    description: str = ""
    placeholder: str = ""

    def short_names(self) -> list[str]:
        """Return the names that are exactly one character long."""
        return [name for name in self.names if len(name) == 1]

    def long_names(self) -> list[str]:
        """Return the names that are longer than one character."""
        return [name for name in self.names if len(name) > 1]

    def validate(self) -> None:
        """
        Check the option's structure.

        Raises:
            OptionSpecError: If there are no names, a name is blank, starts with
                '-' or contains whitespace, or the decoder is missing.
        """
        if not self.names:
            raise OptionSpecError(f"Options require at least one name: {self!r}")
        for name in self.names:
            if name == "":
                raise OptionSpecError(f"Option names cannot be blank: {self!r}")
            if name.startswith("-"):
                raise OptionSpecError(
                    f"Option names cannot begin with '-' (option {name})"
                )
            if any(char.isspace() for char in name):
                raise OptionSpecError(f"Option names cannot have spaces (option {name!r})")
        if self.decoder is None:
            raise OptionSpecError(f"Option decoder cannot be None (option {self})")

    def __str__(self) -> str:
        short = [f"-{name}" for name in self.short_names()]
        long = [f"--{name}" for name in self.long_names()]
        return "/".join(short + long)
