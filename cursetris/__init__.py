"""A falling-block puzzle game for the terminal: pieces, rules, curses UI and command."""

__version__ = "0.1.0"
__all__ = ["__version__"]