"""The word list: words with their hints, stored in a plain text file."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Callable, Iterator, TextIO

from wordcross.console import MAX_HINT_LENGTH, MAX_WORD_LENGTH, MAX_WORDS, clear_screen

_WORD_PATTERN = re.compile(rf"[a-z]{{2,{MAX_WORD_LENGTH - 1}}}")


class DatabaseFullError(Exception):
    """Raised when a word is added to a database that holds the maximum."""


def _read_token(input_fn: Callable[[], str]) -> str:
    """The first whitespace-separated token of the next non-blank line."""
    while True:
        parts = input_fn().split()
        if parts:
            return parts[0]


class WordDatabase:
    """Words and their hints, saved to ``path``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._entries: list[tuple[str, str]] = []

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> WordDatabase:
        """Read a database: a count line, then a word line and a hint line per entry."""
        db = cls(path)
        lines = db.path.read_text(encoding="utf-8").splitlines()
        if not lines:
            raise ValueError(f"{db.path}: missing word count")
        try:
            count = int(lines[0].strip())
        except ValueError:
            raise ValueError(f"{db.path}: bad word count {lines[0]!r}") from None
        if count > MAX_WORDS:
            raise ValueError(f"{db.path}: holds {count} words, at most {MAX_WORDS} allowed")
        body = lines[1:]
        if len(body) < 2 * max(count, 0):
            raise ValueError(f"{db.path}: expected {count} words with hints")
        db._entries = list(zip(body[0 : 2 * count : 2], body[1 : 2 * count : 2]))
        return db

    def save(self) -> None:
        """Write the database to its file."""
        with self.path.open("w", encoding="utf-8") as handle:
            handle.write(f"{len(self._entries)}\n")
            for word, hint in self._entries:
                handle.write(f"{word}\n{hint}\n")

    def add(self, word: str, hint: str) -> None:
        """Append a word with its hint and save the database."""
        if len(self._entries) >= MAX_WORDS:
            raise DatabaseFullError(f"database holds at most {MAX_WORDS} words")
        if not _WORD_PATTERN.fullmatch(word):
            raise ValueError(
                f"word must be 2 to {MAX_WORD_LENGTH - 1} lowercase letters: {word!r}"
            )
        if "\n" in hint or len(hint) > MAX_HINT_LENGTH - 1:
            raise ValueError(f"hint must be one line of at most {MAX_HINT_LENGTH - 1} characters")
        self._entries.append((word, hint))
        self.save()

    def __getitem__(self, position: int) -> tuple[str, str]:
        return self._entries[position]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._entries)


def prompt_new_word(
    db: WordDatabase,
    input_fn: Callable[[], str] = input,
    output: TextIO | None = None,
) -> bool:
    """Ask for a word and its hint and add them; return whether it was added."""
    out = sys.stdout if output is None else output
    clear_screen(out)
    out.write(f"\nEnter the new word (lowercase, max {MAX_WORD_LENGTH - 1} characters): ")
    out.flush()
    word = _read_token(input_fn)
    out.write(f"Enter the hint for '{word}' (max {MAX_HINT_LENGTH - 1} characters): ")
    out.flush()
    hint = input_fn().rstrip("\n")[: MAX_HINT_LENGTH - 1]
    try:
        db.add(word, hint)
    except DatabaseFullError:
        out.write("Database is full. Cannot add more words.\n")
        return False
    except ValueError as exc:
        out.write(f"{exc}\n")
        return False
    except OSError:
        out.write("Word and hint added successfully!\n")
        out.write("Error opening file for writing!\n")
        return True
    out.write("Word and hint added successfully!\n")
    out.write("Word database saved successfully!\n")
    return True