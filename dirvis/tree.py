"""Rendering a directory as a tree."""

from __future__ import annotations

import os
import stat
import sys
from typing import Iterator, TextIO

from dirvis.config import RGB, Config
from dirvis.flags import Flags

_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def colourise(rgb: RGB, name: str) -> str:
    """Wrap ``name`` in a 24-bit foreground colour escape sequence."""
    return f"\033[38;2;{rgb.r};{rgb.g};{rgb.b}m{name}\033[0m"


def build_path(directory: str, name: str) -> str:
    """Join a directory and an entry name with a single separator."""
    if directory.endswith(("/", "\\")):
        return directory + name
    return f"{directory}/{name}"


def indentation(depth: int, is_last: bool) -> str:
    """Return the tree prefix for an entry at ``depth``."""
    if depth <= 0:
        return ""
    branch = "└── " if is_last else "├── "
    return "│   " * (depth - 1) + branch


def _listing(path: str) -> list[str]:
    return os.listdir(path)


def is_hidden_folder(name: str) -> bool:
    """Whether ``name`` is a dot-entry other than ``.`` and ``..``."""
    return name.startswith(".") and name not in (".", "..")


def count_visible_entries(path: str, flags: Flags) -> int:
    """Count entries of ``path`` that will be shown; 0 if it cannot be read."""
    try:
        names = _listing(path)
    except OSError:
        return 0
    return sum(1 for name in names if flags.show_hidden or not name.startswith("."))


def _entry_label(name: str, mode: int, flags: Flags, config: Config) -> str:
    theme = config.colour_theme
    if stat.S_ISDIR(mode):
        if flags.no_colour:
            return f"{name}/"
        return colourise(theme.directory, name) + "/"
    if flags.no_colour:
        return name
    if mode & _EXECUTABLE_BITS:
        return colourise(theme.executable, name)
    if name.startswith("."):
        return colourise(theme.hidden, name)
    return colourise(theme.file, name)


def render_tree(
    path: str, flags: Flags, config: Config, depth: int = 1
) -> Iterator[str]:
    """Yield the lines of the tree below ``path``, without line endings."""
    total = count_visible_entries(path, flags)
    try:
        names = _listing(path)
    except OSError:
        yield indentation(depth, True) + "[ERROR] Could not open directory"
        return
    if depth > flags.max_depth:
        return

    shown = 0
    for name in names:
        if not flags.show_hidden and is_hidden_folder(name):
            continue
        shown += 1
        prefix = indentation(depth, shown == total)
        full_path = build_path(path, name)
        try:
            mode = os.stat(full_path).st_mode
        except OSError:
            yield f"{prefix}{name} [ERROR: cannot stat]"
            continue
        yield prefix + _entry_label(name, mode, flags, config)
        if stat.S_ISDIR(mode):
            yield from render_tree(full_path, flags, config, depth + 1)


def print_tree(
    path: str,
    flags: Flags,
    config: Config,
    depth: int = 1,
    out: TextIO | None = None,
) -> None:
    """Write the tree below ``path`` to ``out`` (standard output by default)."""
    stream = out if out is not None else sys.stdout
    for line in render_tree(path, flags, config, depth):
        stream.write(line + "\n")