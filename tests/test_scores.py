import pytest

from wordcross.scores import ScoreBoard, ScoreEntry, points_for


def test_full_points_within_a_minute():
    assert points_for(10) == 1000
    assert points_for(60) == points_for(0)


def test_points_never_negative():
    assert points_for(10_000) == 0


def test_points_do_not_increase_with_time():
    values = [points_for(seconds) for seconds in range(0, 700, 7)]
    assert values == sorted(values, reverse=True)


def test_slow_game_loses_points():
    assert points_for(90) < points_for(60)


def test_add_returns_entry():
    board = ScoreBoard()
    entry = board.add("alice", 12.5)
    assert entry == ScoreEntry("alice", 12.5, points_for(12.5))


def test_entries_are_fastest_first():
    board = ScoreBoard()
    board.add("bob", 30)
    board.add("amy", 10)
    board.add("cy", 20)
    board.add("dan", 5)
    assert [entry.name for entry in board] == ["dan", "amy", "cy", "bob"]


def test_length_counts_games():
    board = ScoreBoard()
    for number in range(5):
        board.add(f"p{number}", number)
    assert len(board) == 5


def test_board_has_fixed_capacity():
    board = ScoreBoard()
    for number in range(ScoreBoard.capacity):
        board.add(f"p{number}", number)
    with pytest.raises(OverflowError):
        board.add("late", 1.0)


def test_render_lists_rows():
    board = ScoreBoard()
    board.add("alice", 12.5)
    text = board.render()
    assert "Names\t\tTime\t\tPoints\n\n" in text
    assert "alice\t\t12.50 sec\t1000\n" in text
    assert "*SCORE CARD" in text


def test_render_orders_rows_like_iteration():
    board = ScoreBoard()
    board.add("slow", 50)
    board.add("fast", 5)
    text = board.render()
    assert text.index("fast") < text.index("slow")