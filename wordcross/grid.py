"""The crossword grid: the solution, the player's view, and rendering."""

from __future__ import annotations

import string
from itertools import product
from typing import Collection, Sequence

from wordcross.console import GRID_SIZE, Color, colored

Grid = list[list[str]]

BLANK = " "
HIDDEN = "-"
_DIRECTIONS = ((0, 1), (1, 0))


def _is_letter(cell: str) -> bool:
    return len(cell) == 1 and cell in string.ascii_letters


def empty_grid(size: int = GRID_SIZE) -> Grid:
    """A square grid of blank cells."""
    return [[BLANK] * size for _ in range(size)]


def mask_grid(grid: Grid) -> Grid:
    """A copy of ``grid`` with every letter hidden."""
    return [[HIDDEN if _is_letter(cell) else cell for cell in row] for row in grid]


def grids_match(first: Grid, second: Grid) -> bool:
    """Whether two grids hold the same cells."""
    return first == second


def is_valid(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on a standard grid."""
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


def _inside(grid: Grid, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def _reveal_from(
    solution: Grid, display: Grid, word: str, row: int, col: int, step: tuple[int, int]
) -> bool:
    last = len(word) - 2
    cells = [(row + i * step[0], col + i * step[1]) for i in range(last + 2)]
    if not all(_inside(solution, r, c) for r, c in cells):
        return False
    if any(solution[r][c] != letter for (r, c), letter in zip(cells[:last], word)):
        return False
    if all(display[r][c] == solution[r][c] for r, c in cells[last:]):
        return False
    for r, c in cells:
        display[r][c] = solution[r][c]
    return True


def reveal_word(solution: Grid, display: Grid, word: str) -> bool:
    """Uncover the first placement of ``word`` that is not yet shown.

    Cells are scanned row by row, trying across before down at each. A
    placement needs all but the word's last two letters to match the
    solution, and at least one of its last two cells still hidden; its
    cells are then copied into ``display``. Returns whether any was found.
    """
    if len(word) < 2:
        return False
    for row, col in product(range(len(solution)), range(len(solution[0]) if solution else 0)):
        if any(_reveal_from(solution, display, word, row, col, step) for step in _DIRECTIONS):
            return True
    return False


def render_grid(grid: Grid) -> str:
    """The grid as text, letters highlighted."""
    return "".join(
        "".join(
            colored(f"{cell} ", Color.GREEN) if _is_letter(cell) else f"{cell} "
            for cell in row
        )
        + "\n"
        for row in grid
    )


def render_hints(hints: Sequence[str], solved: Collection[int]) -> str:
    """Numbered hints, the solved ones greyed out."""
    lines = [colored("HINTS : \n", Color.BLUE)]
    for number, hint in enumerate(hints, 1):
        line = f"{number}. {hint}\n"
        lines.append(colored(line, Color.GREY) if number - 1 in solved else line)
    return "".join(lines)