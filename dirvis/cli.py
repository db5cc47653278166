"""Command-line entry point for the directory tree viewer."""

from __future__ import annotations

import re
import sys
from typing import Sequence

from dirvis.config import Config, load_config
from dirvis.flags import Flags
from dirvis.tree import colourise, print_tree

PROG = "dirvis"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised when the command line cannot be used; the message may be empty."""


def help_text() -> str:
    """Return the help menu."""
    return (
        "---- Help Menu ----\n"
        "  --exclude (-e): exclude hidden files and directories\n"
        "  --help(-h): open the help menu"
    )


def parse_depth(value: str) -> int:
    """Parse the leading integer of ``value``; it must be positive."""
    match = _LEADING_INT.match(value)
    number = int(match.group(1)) if match else 0
    if number < 1:
        raise ValueError(f"not a positive depth: {value!r}")
    return number


def parse_flags(argv: Sequence[str], flags: Flags) -> Flags:
    """Apply the options that follow the directory in ``argv`` to ``flags``."""
    if not argv:
        flags.help = True
        raise UsageError(
            f"Usage: {PROG} <directory_path> [options]\n"
            f"Try '{PROG} --help' for more information."
        )

    options = iter(argv[1:])
    for option in options:
        if option in ("--help", "-h"):
            flags.help = True
            raise UsageError("")
        if option in ("--show-hidden", "-a"):
            flags.show_hidden = True
        elif option in ("--max-depth", "-d"):
            value = next(options, None)
            if value is None:
                raise UsageError(
                    f"Error: Flag '{option}' requires a depth value (positive integer)\n"
                    f"Example: {PROG} /path --max-depth 3"
                )
            try:
                flags.max_depth = parse_depth(value)
            except ValueError:
                raise UsageError(
                    f"Error: Invalid depth value '{value}' for flag '{option}'\n"
                    "Depth must be a positive integer (1, 2, 3, ...)"
                ) from None
        elif option in ("--no-colour", "-c"):
            flags.no_colour = True
        else:
            raise UsageError(
                f"Error: Unknown flag '{option}'\n"
                f"Try '{PROG} --help' for a list of available options."
            )
    return flags


def root_line(path: str, flags: Flags, config: Config) -> str:
    """Return the heading line naming the root directory."""
    if flags.no_colour:
        return path if path.endswith("/") else f"{path}/"
    shown = path[:-1] if path.endswith("/") else path
    return colourise(config.colour_theme.directory, shown) + "/"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    flags = Flags()
    config = load_config(flags)

    try:
        parse_flags(args, flags)
    except UsageError as error:
        if str(error):
            print(error)
        if flags.help:
            print(help_text())
        return 1

    path = args[0]
    print(root_line(path, flags, config))
    print_tree(path, flags, config, 1)
    return 0


if __name__ == "__main__":
    sys.exit(main())