"""Print a directory as a coloured tree in the terminal."""

__version__ = "0.1.0"
__all__ = ["__version__"]