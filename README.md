# bankdesk

A console banking desk with three kinds of user:

- **Clients** can change their password, deposit, withdraw, check their
  balance and transfer money to another client.
- **Employees** can change their password, list clients, add new clients,
  edit a client and search for a client by ID.
- **Admins** can list clients, change their password, add, edit and search
  for clients, and also list, add and edit employees.

Records are kept as plain text files, one record per line in the form
`id&name&password&amount`:

| Kind     | Records        | Last ID issued       |
|----------|----------------|----------------------|
| client   | `Client.txt`   | `LastClientID.txt`   |
| employee | `Employee.txt` | `LastEmployeeID.txt` |
| admin    | `Admin.txt`    | `LastAdminID.txt`    |

A new record gets the number after the last ID issued for its kind, or 1 when
none has been issued. Amounts are written and shown with six significant
digits.

## Installing

```
pip install .
```

## Running

```
bankdesk
bankdesk --data-dir path/to/records
```

`--data-dir` names the directory holding the record files; it defaults to the
current directory.

The program shows a welcome banner for three seconds, then asks whether you
log in as an admin (1), an employee (2) or a client (3), followed by your ID
and password. A wrong ID or password, or a missing record file, brings you
back to that choice. After logging out you are asked again. The program ends
when input runs out or on Ctrl-C.

## Rules for new and edited records

- Names are 5 to 20 ASCII letters, with no digits, spaces or punctuation.
- Passwords are 8 to 20 characters.
- A client's opening balance is at least 1500.
- An employee's or admin's salary is at least 5000.

The prompts repeat until a valid value is entered. Deposits must be positive;
withdrawals and transfers must be positive and no larger than the balance.

## Using it from Python

- `bankdesk.models` holds the `Person`, `Client`, `Employee` and `Admin`
  records. `Client.deposit`, `Client.withdraw` and `Client.transfer_to`
  return the new balance and raise `InvalidAmountError` for an unusable
  amount.
- `bankdesk.parser` reads single record lines (`parse_client`,
  `parse_employee`, `parse_admin`) and writes them (`format_record`).
- `bankdesk.storage.DataStore` reads and writes the record files in a chosen
  directory: `load`, `find`, `append`, `update`, `clear`, `login` and
  `next_id`, each taking a `RecordKind`. `format_records` renders a listing.
- `bankdesk.validation` holds the rules above (`valid_name`,
  `valid_password`) and the prompts that enforce them.
- `bankdesk.managers` holds the menus (`client_menu`, `employee_menu`,
  `admin_menu`) and the actions behind them, including `add_admin`.
- `bankdesk.screens.run_app` runs the whole interactive session with a
  `bankdesk.console.Console` and a `DataStore`.

`Console` takes an optional input function and output function, so a session
can be driven from a script or a test.

## What it does not do

- No menu creates an admin. The first admin has to be added from Python with
  `bankdesk.managers.add_admin` or written into `Admin.txt` by hand.
- No menu removes records; `DataStore.clear` is only reachable from Python.
- Password changes and the results of deposits, withdrawals and transfers
  made from the client menu are kept for the session only and are not
  written back to the record files.
- Passwords are stored and listed in plain text.

## Running the tests

```
pip install .[test]
pytest
```