"""Command-line options that control how a directory tree is shown."""

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 999


@dataclass
class Flags:
    """Options for a tree listing."""

    help: bool = False
    show_hidden: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    no_colour: bool = False