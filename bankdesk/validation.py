"""Rules for names, passwords and amounts, and prompts that enforce them."""

from __future__ import annotations

from bankdesk.console import Console

NAME_MIN_LENGTH = 5
NAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20
MIN_BALANCE = 1500.0
MIN_SALARY = 5000.0

_LOGIN_PROMPT = "enter your password: "
_BLANK_PROMPT = ""


def valid_name(name: str) -> bool:
    """A name is 5 to 20 ASCII letters."""
    return (
        NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH
        and name.isascii()
        and name.isalpha()
    )


def valid_password(password: str) -> bool:
    """A password is 8 to 20 characters long."""
    return PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH


def enter_name(console: Console) -> str:
    """Ask for a name until a valid one is entered."""
    name = console.ask("enter your name: ")
    while not valid_name(name):
        console.say("Name must be 5 to 20 alphabetic characters")
        console.say("enter your name")
        name = console.ask(_BLANK_PROMPT)
    return name


def enter_password(console: Console) -> str:
    """Ask for a password until a valid one is entered."""
    password = console.ask(_LOGIN_PROMPT)
    while not valid_password(password):
        console.say("Password must be 8 to 20 characters")
        console.say("enter your password")
        password = console.ask(_BLANK_PROMPT)
    return password


def enter_balance(console: Console) -> float:
    """Ask for an opening balance of at least 1500."""
    balance = console.ask_float("enter your balance: ")
    while balance < MIN_BALANCE:
        console.say("Balance must be at least 1500")
        balance = console.ask_float("enter your balance: ")
    return balance


def enter_salary(console: Console) -> float:
    """Ask for a salary of at least 5000."""
    salary = console.ask_float("enter your salary: ")
    while salary < MIN_SALARY:
        console.say("Salary must be at least 5000")
        salary = console.ask_float("enter your salary: ")
    return salary