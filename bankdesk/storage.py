"""Flat-file storage of clients, employees and admins with running ID counters."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from bankdesk.models import Admin, Client, Employee, format_amount
from bankdesk.parser import format_record, parse_admin, parse_client, parse_employee

Record = Union[Client, Employee]


class RecordKind(Enum):
    """The three kinds of people the bank keeps on file."""

    CLIENT = "client"
    EMPLOYEE = "employee"
    ADMIN = "admin"

    @property
    def data_file(self) -> str:
        """Name of the file holding this kind's records."""
        return _DATA_FILES[self]

    @property
    def last_id_file(self) -> str:
        """Name of the file holding the last ID handed out for this kind."""
        return _LAST_ID_FILES[self]


_DATA_FILES = {
    RecordKind.CLIENT: "Client.txt",
    RecordKind.EMPLOYEE: "Employee.txt",
    RecordKind.ADMIN: "Admin.txt",
}

_LAST_ID_FILES = {
    RecordKind.CLIENT: "LastClientID.txt",
    RecordKind.EMPLOYEE: "LastEmployeeID.txt",
    RecordKind.ADMIN: "LastAdminID.txt",
}

_PARSERS: dict[RecordKind, Callable[[str], Record]] = {
    RecordKind.CLIENT: parse_client,
    RecordKind.EMPLOYEE: parse_employee,
    RecordKind.ADMIN: parse_admin,
}


def _kind_of(record: Record) -> RecordKind:
    if isinstance(record, Client):
        return RecordKind.CLIENT
    if isinstance(record, Admin):
        return RecordKind.ADMIN
    if isinstance(record, Employee):
        return RecordKind.EMPLOYEE
    raise TypeError(f"cannot store {type(record).__name__}")


class DataStore:
    """Record files and ID counters kept in one directory."""

    def __init__(self, directory: Union[str, os.PathLike[str]] = ".") -> None:
        self.directory = Path(directory)

    def _path(self, file_name: str) -> Path:
        return self.directory / file_name

    def save_last(self, file_name: str, record_id: int) -> None:
        """Overwrite ``file_name`` with ``record_id``."""
        self._path(file_name).write_text(f"{record_id}\n", encoding="utf-8")

    def get_last(self, file_name: str) -> Optional[int]:
        """Return the last whole number in ``file_name``.

        Reading stops at the first token that is not a whole number. Returns
        ``None`` when the file is missing or holds no number.
        """
        try:
            text = self._path(file_name).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        last: Optional[int] = None
        for token in text.split():
            try:
                last = int(token)
            except ValueError:
                break
        return last

    def next_id(self, kind: RecordKind) -> int:
        """Return the ID the next new record of ``kind`` should get."""
        last = self.get_last(kind.last_id_file)
        return 1 if last is None else last + 1

    def append(self, record: Record) -> None:
        """Add ``record`` to its file and remember its ID as the last one."""
        kind = _kind_of(record)
        with self._path(kind.data_file).open("a", encoding="utf-8", newline="\n") as file:
            file.write(format_record(record) + "\n")
        self.save_last(kind.last_id_file, record.id)

    def load(self, kind: RecordKind) -> list[Record]:
        """Return every record of ``kind`` in file order.

        Raises ``FileNotFoundError`` when the file does not exist.
        """
        text = self._path(kind.data_file).read_text(encoding="utf-8")
        parse = _PARSERS[kind]
        return [parse(line) for line in text.splitlines() if line.strip()]

    def find(self, kind: RecordKind, record_id: int) -> Optional[Record]:
        """Return the first record of ``kind`` with ``record_id``, or ``None``."""
        return next((r for r in self.load(kind) if r.id == record_id), None)

    def update(self, record: Record) -> None:
        """Replace every stored record with the same kind and ID as ``record``.

        Raises ``KeyError`` when no such record is stored; the file is then
        left untouched.
        """
        kind = _kind_of(record)
        records = self.load(kind)
        if not any(r.id == record.id for r in records):
            raise KeyError(record.id)
        updated = [record if r.id == record.id else r for r in records]
        self._write_all(kind, updated)

    def _write_all(self, kind: RecordKind, records: Iterable[Record]) -> None:
        lines = "".join(format_record(r) + "\n" for r in records)
        self._path(kind.data_file).write_text(lines, encoding="utf-8", newline="\n")

    def clear(self, kind: RecordKind) -> None:
        """Remove every record of ``kind`` and reset its ID counter to 0."""
        self._path(kind.data_file).write_text("", encoding="utf-8")
        self._path(kind.last_id_file).write_text("0", encoding="utf-8")

    def login(
        self, kind: RecordKind, record_id: int, password: str
    ) -> Optional[Record]:
        """Return the record whose ID and password both match, or ``None``."""
        return next(
            (
                r
                for r in self.load(kind)
                if r.id == record_id and r.password == password
            ),
            None,
        )


def format_records(kind: RecordKind, records: Iterable[Record]) -> str:
    """Render a listing of ``records`` for display."""
    records = list(records)
    lines: list[str] = []
    if kind is RecordKind.ADMIN:
        for admin in records:
            lines += [
                f"ID: {admin.id}",
                f"Name: {admin.name}",
                f"Password: {admin.password}",
                f"Salary: {format_amount(admin.salary)}",
                "-------------------------",
            ]
        return "\n".join(lines)

    if kind is RecordKind.CLIENT:
        if not records:
            return "No clients found."
        lines.append("-------- Client List --------")
        for client in records:
            lines += [
                f"ID: {client.id}",
                f"Name: {client.name}",
                f"Balance: {format_amount(client.balance)}",
                f"Password: {client.password}",
                "---------------------",
            ]
        return "\n".join(lines)

    if not records:
        return "No employees found."
    lines.append("-------- Employee List --------")
    for employee in records:
        lines += [
            f"ID: {employee.id}",
            f"Name: {employee.name}",
            f"Salary: {format_amount(employee.salary)}",
            f"Password: {employee.password}",
            "---------------------",
        ]
    return "\n".join(lines)