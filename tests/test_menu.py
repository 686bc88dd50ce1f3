from wordcross.console import Color, colored
from wordcross.menu import render_menu

_TITLE = "\n\n\t\tCROSSWORD PUZZLE GAME\n\t\t=====================\n\n"


def test_menu_lists_choices_in_order():
    text = render_menu()
    positions = [
        text.index(option)
        for option in (
            "1. Play Game",
            "2. Add New Word and Hint",
            "3. View Scores",
            "4. Exit",
        )
    ]
    assert positions == sorted(positions)
    assert text.endswith("Enter your choice: ")


def test_menu_title_is_red():
    text = render_menu()
    assert text.startswith(colored(_TITLE, Color.RED))