"""Interactive menus for clients, employees and admins."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from bankdesk.console import Console
from bankdesk.models import (
    Admin,
    Client,
    Employee,
    InvalidAmountError,
    Person,
    format_amount,
)
from bankdesk.storage import DataStore, Record, RecordKind, format_records
from bankdesk.validation import (
    enter_balance,
    enter_name,
    enter_password,
    enter_salary,
)

SEPARATOR = "=============================="

CLIENT_MENU = (
    "Login successful!",
    "1. Update Password",
    "2. Deposit Money",
    "3. Withdraw Money",
    "4. Check Balance",
    "5. Transfer To",
    "6. Exit",
    SEPARATOR,
)

EMPLOYEE_MENU = (
    "Login successful!",
    "1. Update Password",
    "2. View All Clients",
    "3. Add New Client",
    "4. Edit Client",
    "5. Search for client",
    "6. Exit",
    SEPARATOR,
)

ADMIN_MENU = (
    "1. View All Clients",
    "2. Update Password",
    "3. Add New Client",
    "4. Edit Client",
    "5. Search for client",
    "6. View All Employees",
    "7. Add New Employee",
    "8. Edit Employee",
    "9. Exit",
    SEPARATOR,
)


def _choose(console: Console, menu: Sequence[str]) -> int:
    for line in menu:
        console.say(line)
    return console.ask_int("Enter your choice: ")


def update_password(console: Console, person: Person) -> str:
    """Ask for a new valid password and set it on ``person``."""
    person.password = enter_password(console)
    console.say("Password updated successfully!")
    return person.password


def add_client(console: Console, store: DataStore) -> Client:
    """Ask for a new client's details and store the client."""
    client = Client(
        id=store.next_id(RecordKind.CLIENT),
        name=enter_name(console),
        password=enter_password(console),
        balance=enter_balance(console),
    )
    store.append(client)
    console.say("Client added successfully!")
    return client


def add_employee(console: Console, store: DataStore) -> Employee:
    """Ask for a new employee's details and store the employee."""
    employee = Employee(
        id=store.next_id(RecordKind.EMPLOYEE),
        name=enter_name(console),
        password=enter_password(console),
        salary=enter_salary(console),
    )
    store.append(employee)
    console.say("Employee added successfully!")
    return employee


def add_admin(console: Console, store: DataStore) -> Admin:
    """Ask for a new admin's details and store the admin."""
    admin = Admin(
        id=store.next_id(RecordKind.ADMIN),
        name=enter_name(console),
        password=enter_password(console),
        salary=enter_salary(console),
    )
    store.append(admin)
    console.say("Admin added successfully!")
    return admin


def _edit(
    console: Console,
    store: DataStore,
    kind: RecordKind,
    label: str,
    enter_amount: Callable[[Console], float],
    amount_field: str,
) -> Optional[Record]:
    try:
        records = store.load(kind)
    except FileNotFoundError:
        console.say(f"Error: Unable to open {kind.data_file} for reading!")
        return None
    record_id = console.ask_int("Enter your ID to update: ")
    record = next((r for r in records if r.id == record_id), None)
    if record is None:
        console.say(f"Error: {label} with ID {record_id} not found!")
        return None
    console.say(f"{label} found. Enter new details:")
    record.name = enter_name(console)
    record.password = enter_password(console)
    setattr(record, amount_field, enter_amount(console))
    store.update(record)
    console.say(f"{label} updated successfully!")
    return record


def edit_client(console: Console, store: DataStore) -> Optional[Client]:
    """Ask for a client ID and replace that client's details."""
    return _edit(console, store, RecordKind.CLIENT, "Client", enter_balance, "balance")


def edit_employee(console: Console, store: DataStore) -> Optional[Employee]:
    """Ask for an employee ID and replace that employee's details."""
    return _edit(
        console, store, RecordKind.EMPLOYEE, "Employee", enter_salary, "salary"
    )


def _lookup_client(
    console: Console, store: DataStore, client_id: int
) -> Optional[Client]:
    try:
        client = store.find(RecordKind.CLIENT, client_id)
    except FileNotFoundError:
        console.say("Error: Unable to open clients file!")
        return None
    if client is not None:
        console.say(" Client Found!")
        console.say(f" ID: {client.id}")
        console.say(f" Name: {client.name}")
        console.say(f" Balance: {format_amount(client.balance)}")
    return client


def search_client(console: Console, store: DataStore) -> Optional[Client]:
    """Ask for a client ID and show that client if stored."""
    client_id = console.ask_int("Enter Client ID to search: ")
    client = _lookup_client(console, store, client_id)
    if client is None:
        console.say("Client not found!")
    return client


def list_records(console: Console, store: DataStore, kind: RecordKind) -> list:
    """Show every stored record of ``kind`` and return them."""
    try:
        records = store.load(kind)
    except FileNotFoundError:
        console.say(f"Error: Unable to open {kind.data_file} for reading!")
        return []
    listing = format_records(kind, records)
    if listing:
        console.say(listing)
    return records


def _money(
    console: Console, operation: Callable[[float], float], amount: float, done: str
) -> None:
    try:
        balance = operation(amount)
    except InvalidAmountError as exc:
        console.say(str(exc))
        return
    console.say(f"{done}. Your balance now = {format_amount(balance)}$")


def client_menu(console: Console, store: DataStore, client: Client) -> None:
    """Run the client's menu until the client logs out."""
    while True:
        choice = _choose(console, CLIENT_MENU)
        if choice == 1:
            console.clear()
            update_password(console, client)
        elif choice == 2:
            console.clear()
            amount = console.ask_float("Enter amount to deposit: ")
            _money(console, client.deposit, amount, "Deposit successful")
        elif choice == 3:
            console.clear()
            amount = console.ask_float("Enter amount to withdraw: ")
            _money(console, client.withdraw, amount, "Withdrawal successful")
        elif choice == 4:
            console.clear()
            console.say(f"Your Balance = {format_amount(client.balance)}$")
        elif choice == 5:
            console.clear()
            recipient_id = console.ask_int("Enter id to transfer to: ")
            recipient = _lookup_client(console, store, recipient_id)
            while recipient is None:
                recipient_id = console.ask_int("Incorrect ID! Enter a valid ID: ")
                recipient = _lookup_client(console, store, recipient_id)
            amount = console.ask_float("Enter amount to transfer: ")
            _money(
                console,
                lambda value: client.transfer_to(value, recipient),
                amount,
                "Transfer successful",
            )
        elif choice == 6:
            console.clear()
            console.say("Logging out...")
            return
        else:
            console.say("Invalid choice! Please try again.")


def employee_menu(console: Console, store: DataStore, employee: Employee) -> None:
    """Run the employee's menu until the employee logs out."""
    actions: dict[int, Callable[[], object]] = {
        1: lambda: update_password(console, employee),
        2: lambda: list_records(console, store, RecordKind.CLIENT),
        3: lambda: add_client(console, store),
        4: lambda: edit_client(console, store),
        5: lambda: search_client(console, store),
    }
    while True:
        choice = _choose(console, EMPLOYEE_MENU)
        console.clear()
        if choice == 6:
            console.say("Logging out")
            return
        action = actions.get(choice)
        if action is None:
            console.say("Invalid choice! Please try again.")
            continue
        action()
        console.pause()


def admin_menu(console: Console, store: DataStore, admin: Admin) -> None:
    """Run the admin's menu until the admin logs out."""
    actions: dict[int, Callable[[], object]] = {
        1: lambda: list_records(console, store, RecordKind.CLIENT),
        2: lambda: update_password(console, admin),
        3: lambda: add_client(console, store),
        4: lambda: edit_client(console, store),
        5: lambda: search_client(console, store),
        6: lambda: list_records(console, store, RecordKind.EMPLOYEE),
        7: lambda: add_employee(console, store),
        8: lambda: edit_employee(console, store),
    }
    while True:
        choice = _choose(console, ADMIN_MENU)
        console.clear()
        if choice == 9:
            console.say("Logging out")
            return
        action = actions.get(choice)
        if action is None:
            console.say("Invalid choice! Please try again.")
            continue
        action()
        console.pause()
        console.clear()