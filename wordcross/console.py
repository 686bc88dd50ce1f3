"""Terminal colours, screen control and the game's fixed limits."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

GRID_SIZE = 22
NUM_WORDS = 6
MAX_WORD_LENGTH = 20
MAX_HINT_LENGTH = 100
MAX_NAME_LENGTH = 50
MAX_USERS = 101
ALPHABET_SIZE = 26
MAX_WORDS = 200
WORDS_FILE = "crossword_words.txt"

RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J\x1b[H"


class Color(enum.Enum):
    """Bright terminal colours used by the game."""

    RED = "91"
    GREEN = "92"
    BLUE = "94"
    GREY = "90"

    @property
    def code(self) -> str:
        """The escape sequence that switches to this colour."""
        return f"\x1b[{self.value}m"


def colored(text: str, color: Color) -> str:
    """Wrap ``text`` so that it prints in ``color`` and then resets."""
    return f"{color.code}{text}{RESET}"


def clear_screen(stream: TextIO | None = None) -> None:
    """Clear the terminal and move the cursor to the top left corner."""
    target = sys.stdout if stream is None else stream
    target.write(CLEAR_SCREEN)
    target.flush()