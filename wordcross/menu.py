"""The main menu."""

from __future__ import annotations

from wordcross.console import Color, colored


def render_menu() -> str:
    """The main menu with its prompt, as printable text."""
    title = colored(
        "\n\n\t\tCROSSWORD PUZZLE GAME\n\t\t=====================\n\n", Color.RED
    )
    return (
        title
        + "1. Play Game\n"
        + "2. Add New Word and Hint\n"
        + "3. View Scores\n"
        + "4. Exit\n\n"
        + "Enter your choice: "
    )