"""The interactive menu loop and the command that starts it."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence, TextIO

from wordcross.admin import verify_admin_credentials
from wordcross.console import WORDS_FILE, clear_screen
from wordcross.database import WordDatabase, _read_token, prompt_new_word
from wordcross.game import play_game
from wordcross.menu import render_menu
from wordcross.scores import ScoreBoard


def run(
    db: WordDatabase,
    scoreboard: ScoreBoard,
    input_fn: Callable[[], str] = input,
    output: TextIO | None = None,
) -> int:
    """Show the menu and act on choices until the player exits; return the exit code."""
    out = sys.stdout if output is None else output
    try:
        while True:
            out.write(render_menu())
            out.flush()
            try:
                choice = int(_read_token(input_fn))
            except ValueError:
                choice = 0
            if choice == 1:
                try:
                    play_game(db, scoreboard, input_fn, out)
                except (ValueError, RuntimeError) as exc:
                    out.write(f"\nCannot start a game: {exc}\n")
                except OverflowError as exc:
                    out.write(f"\nScore not recorded: {exc}\n")
            elif choice == 2:
                if verify_admin_credentials(input_fn, out):
                    prompt_new_word(db, input_fn, out)
            elif choice == 3:
                clear_screen(out)
                out.write(scoreboard.render())
            elif choice == 4:
                out.write("\nThank you for playing!\n")
                return 0
            else:
                out.write("\nInvalid choice. Please try again.\n")
    except EOFError:
        out.write("\n")
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Load the word list and run the game menu."""
    parser = argparse.ArgumentParser(prog="wordcross", description="Crossword puzzle game.")
    parser.add_argument("--words", default=WORDS_FILE, help="word list file")
    args = parser.parse_args(argv)
    try:
        db = WordDatabase.load(args.words)
        print("Word database loaded successfully!")
    except FileNotFoundError:
        print(f"No word database at {args.words}; starting with an empty one.")
        db = WordDatabase(args.words)
    except ValueError as exc:
        print(f"Could not read word database: {exc}")
        db = WordDatabase(args.words)
    return run(db, ScoreBoard(), input, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())