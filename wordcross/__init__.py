"""A terminal crossword game with a word-and-hint list, timed rounds and a score card."""

__version__ = "0.1.0"