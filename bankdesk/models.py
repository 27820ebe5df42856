"""People known to the bank: clients, employees and admins."""

from __future__ import annotations

from dataclasses import dataclass

_SPACE = " "


class InvalidAmountError(ValueError):
    """Raised when a money operation is given an unusable amount."""


def format_amount(value: float) -> str:
    """Format a number with six significant digits, as stored and shown."""
    return f"{value:g}"


@dataclass
class Person:
    id: int = 1
    name: str = _SPACE
    password: str = _SPACE

    def to_string(self) -> str:
        """Return ``id&name&password``."""
        return f"{self.id}&{self.name}&{self.password}"

    def display_info(self) -> str:
        """Return a printable summary."""
        return "\n".join(
            [f"Id: {self.id}", f"Name: {self.name}", f"Password: {self.password}"]
        )


@dataclass
class Client(Person):
    balance: float = 0.0

    def deposit(self, amount: float) -> float:
        """Add a positive amount and return the new balance."""
        if amount <= 0:
            raise InvalidAmountError("Invalid deposit amount!")
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take out a positive amount no larger than the balance."""
        if not 0 < amount <= self.balance:
            raise InvalidAmountError(
                "Invalid withdrawal amount or insufficient balance!"
            )
        self.balance -= amount
        return self.balance

    def transfer_to(self, amount: float, recipient: Client) -> float:
        """Move money to ``recipient`` and return this client's new balance."""
        if not 0 < amount <= self.balance:
            raise InvalidAmountError(
                "Invalid transfer amount or insufficient balance!"
            )
        self.balance -= amount
        recipient.balance += amount
        return self.balance

    def display_info(self) -> str:
        return f"{super().display_info()}\nBalance: {format_amount(self.balance)}$"


@dataclass
class Employee(Person):
    salary: float = 0.0

    def display_info(self) -> str:
        return f"{super().display_info()}\nSalary: {format_amount(self.salary)}$"


@dataclass
class Admin(Employee):
    def display_info(self) -> str:
        return f"Admin Information:\n{super().display_info()}"