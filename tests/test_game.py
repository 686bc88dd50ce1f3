import io
import random

import pytest

from wordcross.console import GRID_SIZE, NUM_WORDS
from wordcross.database import WordDatabase
from wordcross.game import generate_crossword, play_game
from wordcross.grid import mask_grid
from wordcross.scores import ScoreBoard, points_for


class _FakeRng:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


class _Script:
    def __init__(self, lines):
        self._lines = list(lines)

    def __call__(self):
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


def _db(tmp_path, entries):
    db = WordDatabase(tmp_path / "words.txt")
    for word, hint in entries:
        db.add(word, hint)
    return db


PAIR = [("cat", "feline"), ("tap", "faucet")]
# first word, its crossing position, second word, its crossing position,
# then four random letters with no words under them
PAIR_DRAWS = [0, 1, 0, 0, 25, 25, 25, 25]


def test_generate_pinned_layout(tmp_path):
    crossword = generate_crossword(_db(tmp_path, PAIR), _FakeRng(PAIR_DRAWS))
    grid = crossword.solution
    assert grid[0][:4] == ["c", "a", "t", " "]
    assert [grid[r][2] for r in range(4)] == ["t", "a", "p", " "]
    assert crossword.hints == ["feline", "faucet"]
    assert crossword.words.index_of("cat") == 0
    assert crossword.words.index_of("tap") == 1


def test_generate_empty_database(tmp_path):
    with pytest.raises(ValueError):
        generate_crossword(WordDatabase(tmp_path / "words.txt"), random.Random(1))


WORDS = [
    ("cat", "feline"),
    ("tap", "faucet"),
    ("apple", "fruit"),
    ("tiger", "big cat"),
    ("eagle", "bird"),
    ("pear", "another fruit"),
    ("rat", "rodent"),
    ("ant", "insect"),
    ("table", "furniture"),
    ("egg", "laid by hens"),
]


@pytest.mark.parametrize("seed", range(20))
def test_generate_invariants(tmp_path, seed):
    db = _db(tmp_path, WORDS)
    hints = {hint for _, hint in WORDS}
    crossword = generate_crossword(db, random.Random(seed))
    assert len(crossword.solution) == GRID_SIZE
    assert all(len(row) == GRID_SIZE for row in crossword.solution)
    assert 1 <= len(crossword.hints) <= NUM_WORDS
    assert set(crossword.hints) <= hints
    first = "".join(crossword.solution[0]).strip()
    assert (first, crossword.hints[0]) in WORDS
    assert first in crossword.words
    assert not any(cell.isalpha() for row in mask_grid(crossword.solution) for cell in row)


def test_play_game_records_time(tmp_path):
    db = _db(tmp_path, PAIR)
    board = ScoreBoard()
    out = io.StringIO()
    times = iter([10.0, 75.5])
    entry = play_game(
        db,
        board,
        _Script(["alice", "dog", "cat", "tap"]),
        out,
        clock=lambda: next(times),
        rng=_FakeRng(PAIR_DRAWS),
    )
    assert entry.name == "alice"
    assert entry.seconds == pytest.approx(65.5)
    assert entry.points == points_for(65.5)
    assert list(board) == [entry]
    assert "Incorrect" in out.getvalue()


def test_play_game_stops_on_end_of_input(tmp_path):
    board = ScoreBoard()
    with pytest.raises(EOFError):
        play_game(
            _db(tmp_path, PAIR),
            board,
            _Script(["bob", "cat"]),
            io.StringIO(),
            rng=_FakeRng(PAIR_DRAWS),
        )
    assert len(board) == 0