"""Players' finishing times and points, kept fastest first."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterator

from wordcross.console import MAX_USERS, Color, colored

FULL_POINTS = 1000
FREE_SECONDS = 60


@dataclass(frozen=True)
class ScoreEntry:
    """One finished game."""

    name: str
    seconds: float
    points: int


def points_for(seconds: float) -> int:
    """Points for a game solved in ``seconds``: two lost per second past a minute."""
    points = FULL_POINTS
    if seconds > FREE_SECONDS:
        points -= 2 * int(seconds - FREE_SECONDS)
    return max(points, 0)


class ScoreBoard:
    """Finished games ordered by time, fastest first."""

    capacity = MAX_USERS - 1

    def __init__(self) -> None:
        self._entries: list[ScoreEntry] = []

    def add(self, name: str, seconds: float) -> ScoreEntry:
        """Record a finished game and return its entry."""
        if len(self._entries) >= self.capacity:
            raise OverflowError(f"score board holds at most {self.capacity} games")
        entry = ScoreEntry(name, float(seconds), points_for(seconds))
        bisect.insort(self._entries, entry, key=lambda item: item.seconds)
        return entry

    def __iter__(self) -> Iterator[ScoreEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def render(self) -> str:
        """The score card as printable text."""
        parts = [
            colored("\n\n\t\t*SCORE CARD\t\t\n\n", Color.BLUE),
            "Names\t\tTime\t\tPoints\n\n",
        ]
        parts.extend(
            f"{entry.name}\t\t{entry.seconds:.2f} sec\t{entry.points}\n"
            for entry in self
        )
        parts.append("\n")
        return "".join(parts)