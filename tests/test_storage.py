import pytest

from bankdesk.models import Admin, Client, Employee
from bankdesk.storage import DataStore, RecordKind, format_records

PASSWORD = "password"


@pytest.fixture
def store(tmp_path):
    return DataStore(tmp_path)


def make_client(record_id=1, name="Alice", balance=2000.0):
    return Client(id=record_id, name=name, password=PASSWORD, balance=balance)


def make_employee(record_id=1, name="Bobby", salary=6000.0):
    return Employee(id=record_id, name=name, password=PASSWORD, salary=salary)


def make_admin(record_id=1, name="Carol", salary=9000.0):
    return Admin(id=record_id, name=name, password=PASSWORD, salary=salary)


def test_append_uses_kind_file_names(store, tmp_path):
    store.append(make_client(1))
    store.append(make_employee(2))
    store.append(make_admin(3))
    assert (tmp_path / "Client.txt").read_text() == "1&Alice&password&2000\n"
    assert (tmp_path / "Employee.txt").read_text() == "2&Bobby&password&6000\n"
    assert (tmp_path / "Admin.txt").read_text() == "3&Carol&password&9000\n"
    assert store.get_last("LastEmployeeID.txt") == 2


def test_save_and_get_last_round_trip(store):
    store.save_last("LastClientID.txt", 42)
    assert store.get_last("LastClientID.txt") == 42


def test_get_last_missing_file(store):
    assert store.get_last("LastClientID.txt") is None


def test_get_last_returns_last_number(store, tmp_path):
    (tmp_path / "ids.txt").write_text("3\n7\n9\n")
    assert store.get_last("ids.txt") == 9


def test_get_last_stops_at_garbage(store, tmp_path):
    (tmp_path / "ids.txt").write_text("3 4 x 8")
    assert store.get_last("ids.txt") == 4


def test_next_id_starts_at_one(store):
    assert store.next_id(RecordKind.CLIENT) == 1


def test_append_writes_line_and_counter(store, tmp_path):
    store.append(make_client(5))
    assert (tmp_path / "Client.txt").read_text() == "5&Alice&password&2000\n"
    assert store.get_last("LastClientID.txt") == 5
    assert store.next_id(RecordKind.CLIENT) == 6


def test_load_round_trip(store):
    clients = [make_client(1, "Alice"), make_client(2, "Daniel", 1750.5)]
    for client in clients:
        store.append(client)
    assert store.load(RecordKind.CLIENT) == clients


def test_admins_and_employees_kept_apart(store):
    store.append(make_employee(1))
    store.append(make_admin(1))
    admins = store.load(RecordKind.ADMIN)
    employees = store.load(RecordKind.EMPLOYEE)
    assert admins == [make_admin(1)]
    assert isinstance(admins[0], Admin)
    assert employees == [make_employee(1)]
    assert not isinstance(employees[0], Admin)


def test_load_skips_blank_lines(store, tmp_path):
    (tmp_path / "Employee.txt").write_text("1&Bobby&password&6000\n\n")
    assert store.load(RecordKind.EMPLOYEE) == [make_employee(1)]


def test_load_missing_file_raises(store):
    with pytest.raises(FileNotFoundError):
        store.load(RecordKind.CLIENT)


def test_find(store):
    store.append(make_client(1, "Alice"))
    store.append(make_client(2, "Daniel"))
    assert store.find(RecordKind.CLIENT, 2) == make_client(2, "Daniel")
    assert store.find(RecordKind.CLIENT, 3) is None


def test_update_replaces_record(store):
    store.append(make_client(1, "Alice"))
    store.append(make_client(2, "Daniel"))
    changed = make_client(2, "Edward", 3000.0)
    store.update(changed)
    assert store.load(RecordKind.CLIENT) == [make_client(1, "Alice"), changed]


def test_update_missing_raises_and_keeps_file(store, tmp_path):
    store.append(make_client(1))
    before = (tmp_path / "Client.txt").read_text()
    with pytest.raises(KeyError):
        store.update(make_client(9))
    assert (tmp_path / "Client.txt").read_text() == before


def test_clear_resets(store, tmp_path):
    store.append(make_admin(1))
    store.append(make_admin(2))
    store.clear(RecordKind.ADMIN)
    assert store.load(RecordKind.ADMIN) == []
    assert (tmp_path / "LastAdminID.txt").read_text() == "0"
    assert store.next_id(RecordKind.ADMIN) == 1


def test_login(store):
    store.append(make_employee(3))
    assert store.login(RecordKind.EMPLOYEE, 3, PASSWORD) == make_employee(3)
    assert store.login(RecordKind.EMPLOYEE, 3, "secret") is None
    assert store.login(RecordKind.EMPLOYEE, 4, PASSWORD) is None


def test_append_rejects_person(store):
    with pytest.raises(TypeError):
        store.append("not a record")


def test_format_records_empty_clients():
    assert format_records(RecordKind.CLIENT, []) == "No clients found."
    assert format_records(RecordKind.EMPLOYEE, []) == "No employees found."


def test_format_records_clients():
    text = format_records(RecordKind.CLIENT, [make_client(1), make_client(2)])
    lines = text.splitlines()
    assert lines[0] == "-------- Client List --------"
    assert "ID: 1" in lines
    assert "Name: Alice" in lines
    assert "Balance: 2000" in lines
    assert lines.count("---------------------") == 2


def test_format_records_admins():
    lines = format_records(RecordKind.ADMIN, [make_admin(7)]).splitlines()
    assert lines[0] == "ID: 7"
    assert "Salary: 9000" in lines
    assert lines[-1] == "-------------------------"