# wordcross

A small crossword game for the terminal. Each round lays out up to six words
from a word list on a grid. Each new word crosses the previous one, and the
words take turns running down and across. You see the hints and a masked grid,
and you type words until every letter is shown. Your time goes on a score card.

## Installing

```
pip install .
```

## Playing

```
wordcross
wordcross --words path/to/list.txt
```

`--words` names the word list file. The default is `crossword_words.txt` in
the current directory. If the file is missing or cannot be read, the game
starts with an empty list.

The menu offers these choices:

1. **Play Game**: enter your name, then type words that match the hints. When
   a word is right, its letters appear on the grid and its hint is greyed out.
   A word that is not in the puzzle prints `Incorrect`. If the word list is
   empty, or no layout fits on the 22×22 grid, the game reports that it cannot
   start.
2. **Add New Word and Hint**: asks for the admin username (`admin`) and
   password (`password`), with three attempts. It then asks for the word and
   its hint. A word must be 2 to 19 lowercase letters. A hint must be a single
   line of at most 99 characters. The list holds at most 200 words and is
   saved as soon as a word is added.
3. **View Scores**: lists each finished game with its name, time and points,
   fastest first.
4. **Exit**: quits the game. End of input also quits it.

## Scoring

A round finished within 60 seconds is worth 1000 points. Each whole second
after that costs 2 points, and the score never drops below zero. The score
card holds at most 100 games.

## Word list format

The first line holds the number of entries. After it, each entry takes two
lines: the word, then its hint.

```
2
apple
A common fruit with a red or green skin.
banana
A yellow fruit that is peeled before eating.
```

## Using it from Python

- `wordcross.database.WordDatabase`: `load(path)`, `add(word, hint)` and
  `save()`. It can be iterated as `(word, hint)` pairs. `add` raises
  `DatabaseFullError` when the list is full and `ValueError` when the word or
  the hint is invalid.
- `wordcross.game.generate_crossword(db, rng)`: returns a `Crossword` with the
  solved `solution` grid, the `hints` in order, and the puzzle's `words` as a
  `wordcross.trie.Trie`.
- `wordcross.game.play_game(...)`: plays one round and returns its
  `ScoreEntry`.
- `wordcross.grid`: `empty_grid`, `mask_grid`, `reveal_word`, `grids_match`,
  `render_grid` and `render_hints`.
- `wordcross.scores.ScoreBoard` and `points_for(seconds)`.
- `wordcross.cli.run(db, scoreboard, input_fn, output)`: drives the menu with
  any input function and output stream.

```python
import random

from wordcross.database import WordDatabase
from wordcross.game import generate_crossword

db = WordDatabase.load("crossword_words.txt")
puzzle = generate_crossword(db, random.Random(7))
print(puzzle.hints)
```

## What it does not do

Scores are kept in memory only and are gone when the program exits. The game
ships without a word list, so you need to supply one or add words from the
menu. The admin credentials are fixed in the code.

## Running the tests

```
pip install .[test]
pytest
```