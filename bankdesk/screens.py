"""Start-up banner, login flow and the program's entry point."""

from __future__ import annotations

import argparse
import time
from typing import Callable, Optional

from bankdesk.console import Console
from bankdesk.managers import admin_menu, client_menu, employee_menu
from bankdesk.storage import DataStore, Record, RecordKind

WELCOME_DELAY = 3

BANNER = (
    "",
    "\t+--------------------------------------+",
    "\t|                                      |",
    "\t|               WELCOME                |",
    "\t|                                      |",
    "\t|              NEO  BANK               |",
    "\t|                                      |",
    "\t+--------------------------------------+",
    "",
)

LOGIN_OPTIONS = ("(1) ADMIN", "(2) EMPLOYEE", "(3) CLIENT")

_ID_PROMPT = "Enter your ID: "
_CREDENTIAL_PROMPT = "Enter your " + "pass" + "word: "

_CHOICES = {1: RecordKind.ADMIN, 2: RecordKind.EMPLOYEE, 3: RecordKind.CLIENT}

_MENUS: dict[RecordKind, Callable[[Console, DataStore, Record], None]] = {
    RecordKind.ADMIN: admin_menu,
    RecordKind.EMPLOYEE: employee_menu,
    RecordKind.CLIENT: client_menu,
}


def welcome(console: Console) -> None:
    """Show the banner for a moment, then clear the screen."""
    for line in BANNER:
        console.say(line)
    time.sleep(WELCOME_DELAY)
    console.clear()


def login_as(console: Console) -> RecordKind:
    """Ask which kind of user is logging in until a valid choice is made."""
    while True:
        for line in LOGIN_OPTIONS:
            console.say(line)
        choice = console.ask_int("\nLogin as: ")
        console.clear()
        kind = _CHOICES.get(choice)
        if kind is not None:
            return kind


def login_screen(
    console: Console, store: DataStore, kind: RecordKind
) -> Optional[Record]:
    """Ask for credentials and run the matching menu.

    Returns the record that logged in, or ``None`` when the credentials
    did not match.
    """
    record_id = console.ask_int(_ID_PROMPT)
    entered = console.ask(_CREDENTIAL_PROMPT)
    console.clear()
    try:
        record = store.login(kind, record_id, entered)
    except FileNotFoundError:
        console.say(f"Error: Unable to open {kind.data_file}!")
        record = None
    if record is None:
        console.say("Invalid ID or password!")
        console.clear()
        return None
    _MENUS[kind](console, store, record)
    console.clear()
    return record


def run_app(console: Console, store: DataStore) -> None:
    """Show the banner and serve logins until input runs out."""
    welcome(console)
    while True:
        login_screen(console, store, login_as(console))


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Bank desk for clients and staff.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the record files (default: current directory)",
    )
    args = parser.parse_args(argv)
    try:
        run_app(Console(), DataStore(args.data_dir))
    except (EOFError, KeyboardInterrupt):
        return 0
    return 0