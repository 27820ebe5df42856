"""Conversion between ``id&name&password&amount`` lines and records."""

from __future__ import annotations

import re
from typing import Union

from bankdesk.models import Admin, Client, Employee, format_amount

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

Record = Union[Client, Employee]


def split(line: str) -> list[str]:
    """Split a line on ``&``; a trailing empty field is dropped."""
    parts = line.split("&")
    if parts[-1] == "":
        parts.pop()
    return parts


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group())


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


def _fields(line: str) -> tuple[int, str, str, float]:
    parts = split(line.rstrip("\r\n"))
    if len(parts) < 4:
        raise ValueError(f"expected 4 fields, got {len(parts)}: {line!r}")
    return _leading_int(parts[0]), parts[1], parts[2], _leading_float(parts[3])


def parse_client(line: str) -> Client:
    """Build a client from a stored line."""
    record_id, name, password, balance = _fields(line)
    return Client(id=record_id, name=name, password=password, balance=balance)


def parse_employee(line: str) -> Employee:
    """Build an employee from a stored line."""
    record_id, name, password, salary = _fields(line)
    return Employee(id=record_id, name=name, password=password, salary=salary)


def parse_admin(line: str) -> Admin:
    """Build an admin from a stored line."""
    record_id, name, password, salary = _fields(line)
    return Admin(id=record_id, name=name, password=password, salary=salary)


def format_record(record: Record) -> str:
    """Render a record as a stored line, without the line ending."""
    if isinstance(record, Client):
        amount = record.balance
    elif isinstance(record, Employee):
        amount = record.salary
    else:
        raise TypeError(f"cannot format {type(record).__name__}")
    return f"{record.to_string()}&{format_amount(amount)}"