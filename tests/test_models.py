import pytest

from bankdesk.models import (
    Admin,
    Client,
    Employee,
    InvalidAmountError,
    Person,
    format_amount,
)

PASSWORD = "password"


def make_client(balance=1500.0):
    return Client(id=3, name="alice", password=PASSWORD, balance=balance)


def test_person_defaults_and_to_string():
    person = Person()
    assert person.id == 1
    assert person.to_string() == "1& & "


def test_to_string_joins_fields():
    assert make_client().to_string() == "3&alice&password"


def test_deposit_adds_amount():
    client = make_client()
    assert client.deposit(500) == 2000
    assert client.balance == 2000


@pytest.mark.parametrize("amount", [0, -10])
def test_deposit_rejects_non_positive(amount):
    client = make_client()
    with pytest.raises(InvalidAmountError):
        client.deposit(amount)
    assert client.balance == 1500


def test_withdraw_whole_balance():
    client = make_client()
    assert client.withdraw(1500) == 0


def test_withdraw_more_than_balance_fails():
    client = make_client()
    with pytest.raises(InvalidAmountError):
        client.withdraw(1500.01)
    assert client.balance == 1500


def test_transfer_conserves_total():
    sender = make_client(2000)
    recipient = Client(id=4, name="bobby", password=PASSWORD, balance=1500)
    sender.transfer_to(750, recipient)
    assert sender.balance + recipient.balance == 3500
    assert recipient.balance == 2250


def test_transfer_rejects_overdraft():
    sender = make_client()
    recipient = make_client()
    with pytest.raises(InvalidAmountError):
        sender.transfer_to(5000, recipient)
    assert recipient.balance == 1500


def test_client_display_info():
    lines = make_client().display_info().splitlines()
    assert lines == ["Id: 3", "Name: alice", "Password: password", "Balance: 1500$"]


def test_employee_and_admin_display_info():
    employee = Employee(id=2, name="carol", password=PASSWORD, salary=5000)
    admin = Admin(id=1, name="daves", password=PASSWORD, salary=5000)
    assert employee.display_info().endswith("Salary: 5000$")
    assert admin.display_info().startswith("Admin Information:\nId: 1")


def test_admin_is_not_equal_to_employee_with_same_fields():
    employee = Employee(id=2, name="carol", password=PASSWORD, salary=5000)
    admin = Admin(id=2, name="carol", password=PASSWORD, salary=5000)
    assert employee != admin
    assert isinstance(admin, Employee)


def test_format_amount_uses_six_significant_digits():
    assert format_amount(1500.0) == "1500"
    assert format_amount(1234567.0) == "1.23457e+06"