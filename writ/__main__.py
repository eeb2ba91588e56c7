"""
Writ Argument Decoder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser
from pathlib import Path
from typing import Any, Sequence

from rich.console import Console
from rich.pretty import Pretty
from rich.table import Table

from writ.config import loader
from writ.exceptions import DecodeError
from writ.utils import get_program_invocation, setup_logging


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=f"{get_program_invocation()}",
        description="Decode arguments against a command tree described in a config file.",
        epilog="Everything after CONFIG is decoded as program arguments.",
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Logging output mode (defaults to WRIT_LOG_MODE, then cli).",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show debug logs on the console.",
    )
    parser.add_argument("config", type=Path, help="YAML or TOML command tree")
    parser.add_argument("args", nargs=REMAINDER, help="Arguments to decode")
    return parser


def build_table(path: Any, positional: list[str], values: dict[str, Any]) -> Table:
    table = Table(title="Decoded Arguments", show_header=True, header_style="bold")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("path", str(path))
    table.add_row("positional", Pretty(positional))
    table.add_row("values", Pretty(values))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    parsed = get_parser().parse_args(argv)
    setup_logging(
        mode=parsed.log_mode,
        console_log_level=logging.DEBUG if parsed.debug else logging.WARNING,
    )

    command, values = loader(parsed.config)
    try:
        path, positional = command.decode(parsed.args)
    except DecodeError as error:
        target = error.path.last() if error.path else command
        target.exit_help(error)
        return 1

    Console(highlight=False).print(build_table(path, positional, values))
    return 0


if __name__ == "__main__":
    sys.exit(main())
