"""Building a crossword from the word list and playing it."""

from __future__ import annotations

import random
import string
import sys
import time
from dataclasses import dataclass
from typing import Callable, Protocol, TextIO

from wordcross.console import GRID_SIZE, MAX_NAME_LENGTH, NUM_WORDS, clear_screen
from wordcross.database import WordDatabase, _read_token
from wordcross.grid import (
    Grid,
    empty_grid,
    grids_match,
    mask_grid,
    render_grid,
    render_hints,
    reveal_word,
)
from wordcross.scores import ScoreBoard, ScoreEntry
from wordcross.trie import Trie

_MAX_ATTEMPTS = 1000


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Crossword:
    """A generated puzzle: the solved grid, its hints and its words."""

    solution: Grid
    hints: list[str]
    words: Trie


def _crossing_letter(word: str, rng: _RandomSource) -> str:
    if len(word) < 2:
        raise ValueError(f"word {word!r} is too short to cross")
    return word[rng.randrange(len(word) - 1) + 1]


def _put(grid: Grid, row: int, col: int, letter: str) -> bool:
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        return False
    grid[row][col] = letter
    return True


def _attempt(db: WordDatabase, rng: _RandomSource) -> Crossword | None:
    main = Trie()
    for word, hint in db:
        main.insert(word, hint)
    game = Trie()
    hints: list[str] = []
    grid = empty_grid(GRID_SIZE)

    word, hint = db[rng.randrange(len(db))]
    game.insert(word, hint, len(hints))
    hints.append(hint)
    crossing = _crossing_letter(word, rng)
    row = col = 0
    for offset, letter in enumerate(word):
        if letter == crossing:
            row, col = 0, offset
        if not _put(grid, 0, offset, letter):
            return None

    horizontal = False
    for _ in range(1, NUM_WORDS):
        picked = main.random_word(crossing, rng, mark_used=True)
        if picked is None:
            letter = string.ascii_lowercase[rng.randrange(26)]
            picked = main.random_word(letter, rng, mark_used=True)
            if picked is None:
                continue
        word, hint, _ = picked
        game.insert(word, hint, len(hints))
        hints.append(hint)

        start_row, start_col = row, col
        crossing = _crossing_letter(word, rng)
        for offset, letter in enumerate(word):
            if horizontal:
                if offset == 0:
                    col += 1
                    continue
                if letter == crossing:
                    col = start_col + offset
                target = (start_row, start_col + offset)
            else:
                if offset == 0:
                    row += 1
                    continue
                if letter == crossing:
                    row = start_row + offset
                target = (start_row + offset, start_col)
            if not _put(grid, *target, letter):
                return None
        horizontal = not horizontal

    return Crossword(grid, hints, game)


def generate_crossword(db: WordDatabase, rng: _RandomSource | None = None) -> Crossword:
    """Lay out up to NUM_WORDS words, each crossing the previous one.

    Layouts that run off the grid are drawn again.
    """
    if len(db) == 0:
        raise ValueError("word database is empty")
    source = random.Random() if rng is None else rng
    for _ in range(_MAX_ATTEMPTS):
        crossword = _attempt(db, source)
        if crossword is not None:
            return crossword
    raise RuntimeError("could not fit a crossword on the grid")


def play_game(
    db: WordDatabase,
    scoreboard: ScoreBoard,
    input_fn: Callable[[], str] = input,
    output: TextIO | None = None,
    clock: Callable[[], float] = time.monotonic,
    rng: _RandomSource | None = None,
) -> ScoreEntry:
    """Play one crossword until solved and record the time on the score board."""
    out = sys.stdout if output is None else output
    clear_screen(out)
    out.write("\n\nEnter User Name: ")
    out.flush()
    name = input_fn().rstrip("\n")[: MAX_NAME_LENGTH - 1]
    out.write("\n\n")

    crossword = generate_crossword(db, rng)
    display = mask_grid(crossword.solution)
    solved: set[int] = set()
    start = clock()

    while True:
        out.write(render_grid(display))
        out.write(render_hints(crossword.hints, solved))
        if grids_match(crossword.solution, display):
            break
        out.write("\nEnter Word To Fill Crossword: ")
        out.flush()
        guess = _read_token(input_fn)
        clear_screen(out)
        if guess in crossword.words:
            index = crossword.words.index_of(guess)
            if index is not None:
                solved.add(index)
            reveal_word(crossword.solution, display, guess)
        else:
            out.write("\nIncorrect\n\n")

    return scoreboard.add(name, clock() - start)