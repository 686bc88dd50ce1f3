"""Checking the administrator's credentials before the word list is edited."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from wordcross.console import clear_screen
from wordcross.database import _read_token

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "password"
MAX_ATTEMPTS = 3


def verify_admin_credentials(
    input_fn: Callable[[], str] = input, output: TextIO | None = None
) -> bool:
    """Ask for the administrator's name and password, allowing three tries."""
    out = sys.stdout if output is None else output
    for attempt in range(1, MAX_ATTEMPTS + 1):
        clear_screen(out)
        out.write("\nAdmin Authentication Required\n")
        out.write("==========================\n")
        out.write("Username: ")
        out.flush()
        username = _read_token(input_fn)
        out.write("Password: ")
        out.flush()
        given = _read_token(input_fn)
        if username == ADMIN_USERNAME and given == ADMIN_PASSWORD:
            out.write("\nAuthentication successful!\n")
            return True
        out.write(f"\nInvalid credentials. {MAX_ATTEMPTS - attempt} attempts remaining.\n")
        out.flush()
        input_fn()
    out.write("\nToo many failed attempts. Access denied.\n")
    return False