"""Colour theme configuration read from an INI-style file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from dirvis.flags import Flags

CONFIG_LOCATION = "/home/dirvis.ini"

_LONG_HEX = re.compile(r"[0-9a-fA-F]{6}")
_SHORT_HEX = re.compile(r"[0-9a-fA-F]{3}")
_THEME_KEYS = ("directory", "file", "hidden", "executable")


@dataclass
class RGB:
    """A 24-bit colour."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class ColourTheme:
    """Colours used for each kind of entry."""

    directory: RGB = field(default_factory=RGB)
    file: RGB = field(default_factory=RGB)
    hidden: RGB = field(default_factory=RGB)
    executable: RGB = field(default_factory=RGB)


@dataclass
class Config:
    """Program configuration."""

    colour_theme: ColourTheme = field(default_factory=ColourTheme)


def hex_to_rgb(hex_value: str) -> RGB:
    """Parse a colour written as ``#rrggbb``, ``#rgb`` or without the ``#``."""
    digits = hex_value[1:] if hex_value.startswith("#") else hex_value
    if _LONG_HEX.fullmatch(digits):
        return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    if _SHORT_HEX.fullmatch(digits):
        r, g, b = (int(ch, 16) * 17 for ch in digits)
        return RGB(r, g, b)
    raise ValueError(f"invalid hex colour: {hex_value!r}")


def load_config(flags: Flags, path: str = CONFIG_LOCATION) -> Config:
    """Read the colour theme from ``path``.

    If the file cannot be opened, colour output is switched off in ``flags``.
    Reading stops at a line beginning with ``!``; section headers are ignored.
    """
    config = Config()
    theme = config.colour_theme
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="")
    except OSError:
        flags.no_colour = True
        return config

    with handle:
        for raw_line in handle:
            line = re.split(r"[\r\n]", raw_line, maxsplit=1)[0]
            if line.startswith("!"):
                break
            if line.startswith("["):
                continue
            stripped = line.lstrip("=")
            if not stripped:
                continue
            key, _, value = stripped.partition("=")
            if key not in _THEME_KEYS:
                continue
            try:
                colour = hex_to_rgb(value)
            except ValueError:
                continue
            setattr(theme, key, colour)
    return config