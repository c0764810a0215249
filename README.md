# tx2acc

`tx2acc` reads a CSV file of client transactions, applies them in order and
prints each client's final balances as CSV.

## Installation

```
pip install .
```

## Usage

```
tx2acc transactions.csv > accounts.csv
```

The input file has a header row with the columns `type`, `client`, `tx` and
`amount`. Whitespace around column names and values is ignored, and blank
lines are skipped. Supported transaction types:

| type         | effect                                                        |
|--------------|---------------------------------------------------------------|
| `deposit`    | adds `amount` to the client's available and total funds       |
| `withdrawal` | removes `amount` if enough funds are available                |
| `dispute`    | moves the amount of transaction `tx` from available to held   |
| `resolve`    | releases a disputed amount back to available                  |
| `chargeback` | removes a disputed amount from held and total, locks account  |

Disputes, resolves and chargebacks refer to an earlier deposit or withdrawal by
its `tx` id and leave `amount` empty. They only apply to transactions that
belong to the same client. A transaction can be disputed only while it has not
been disputed before; resolves and chargebacks apply only to a transaction
under dispute. A locked account rejects every further operation. A repeated
`tx` id is applied to the balance but not recorded a second time, so later
disputes refer to the first transaction with that id.

Amounts are kept as integers in units of 1/10,000, so balances have four
decimal places of precision; input amounts are rounded to that precision with
ties away from zero. `client` must fit in 16 bits and `tx` in 32 bits.

Example input:

```
type, client, tx, amount
deposit, 1, 1, 1.0
deposit, 2, 2, 2.0
deposit, 1, 3, 2.0
withdrawal, 1, 4, 1.5
withdrawal, 2, 5, 3.0
```

Output:

```
client,available,held,total,locked
1,1.5000,0.0000,1.5000,false
2,2.0000,0.0000,2.0000,false
```

Clients are listed in the order in which they first appear in the input.

Progress and problems are logged on standard error. Rows that cannot be parsed
(unknown type, bad number, wrong number of fields) and operations that are
rejected are reported there and skipped; processing continues with the next
row. A deposit or withdrawal row with an empty `amount` is not skipped: it
raises `ValueError` and stops the run.

If the input file does not exist, an error is logged, no report is written and
the exit status is 0. If the file exists but cannot be opened, the exit status
is 1.

## Library use

The pieces behind the command can be used directly:

```python
from tx2acc.cli import read_transactions, process_transactions, format_report

with open("transactions.csv", newline="") as stream:
    clients = process_transactions(read_transactions(stream))

print(format_report(clients), end="")
```

- `tx2acc.cli.read_transactions(stream)` yields `RawTransaction` objects,
  skipping rows that do not parse.
- `tx2acc.cli.process_transactions(raw_transactions)` returns a dict of
  `Client` accounts keyed by client id.
- `tx2acc.cli.format_report(clients)` renders the CSV report as a string.
- `tx2acc.transactions.parse_raw_transaction(row)` builds a `RawTransaction`
  from a mapping of column names to strings and raises
  `TransactionParseError` (a `ValueError`) on bad input.
- `tx2acc.handlers.handle_transaction(raw_tx, transactions, clients)` applies
  a single `RawTransaction` to mappings of `ProcessedTransaction` records and
  `Client` accounts. The per-type handlers are in `tx2acc.funds` and
  `tx2acc.disputes`.
- `tx2acc.client.Client` raises `AccountLockedError` or
  `InsufficientFundsError`, both subclasses of `ClientError`, when an
  operation is refused.
- `tx2acc.convert.fractional_to_number` and `number_to_fractional` convert
  between amounts and the fixed-point integers used for balances.

## What it does not do

Accounts are not stored anywhere: every run starts with no clients and no
transactions, and the only output is the report on standard output.

## Running the tests

```
pip install .[test]
pytest
```