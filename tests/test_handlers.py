from tx2acc.client import Client
from tx2acc.handlers import handle_transaction
from tx2acc.transactions import (
    DisputeStatus,
    RawTransaction,
    RawTransactionType as T,
)


def _tx(kind, client, tx, amount=None):
    return RawTransaction(
        transaction_type=kind, client_id=client, transaction_id=tx, amount=amount
    )


def _run(raw_transactions, transactions=None, clients=None):
    transactions = {} if transactions is None else transactions
    clients = {} if clients is None else clients
    for raw_tx in raw_transactions:
        handle_transaction(raw_tx, transactions, clients)
    return transactions, clients


def test_handle_transaction_with_simple_data():
    transactions, clients = _run(
        [
            _tx(T.DEPOSIT, 1, 1, 1.0),
            _tx(T.DEPOSIT, 2, 2, 5.0),
            _tx(T.DEPOSIT, 1, 3, 2.0),
            _tx(T.WITHDRAWAL, 1, 4, 1.5),
            _tx(T.WITHDRAWAL, 2, 5, 3.0),
        ]
    )

    assert sorted(clients) == [1, 2]

    client1 = clients[1]
    assert client1.available == 15000
    assert client1.held == 0
    assert client1.total == 15000
    assert client1.locked is False

    client2 = clients[2]
    assert client2.available == 20000
    assert client2.held == 0
    assert client2.total == 20000
    assert client2.locked is False

    assert sorted(transactions) == [1, 2, 3, 4, 5]


def test_handle_transaction_complex_data():
    transactions, clients = _run(
        [
            _tx(T.DEPOSIT, 1, 1, 1000.0),
            _tx(T.DEPOSIT, 2, 4, 800.0),
            _tx(T.DEPOSIT, 3, 7, 600.0),
            _tx(T.DEPOSIT, 1, 2, 500.0),
            _tx(T.DEPOSIT, 2, 5, 400.0),
            _tx(T.DEPOSIT, 3, 8, 300.0),
            _tx(T.WITHDRAWAL, 1, 3, 200.0),
            _tx(T.WITHDRAWAL, 2, 6, 100.0),
            _tx(T.WITHDRAWAL, 3, 9, 150.0),
            _tx(T.DISPUTE, 1, 1),
            _tx(T.DISPUTE, 2, 4),
            _tx(T.DISPUTE, 3, 7),
            _tx(T.DISPUTE, 1, 2),
            _tx(T.DISPUTE, 3, 8),
            _tx(T.RESOLVE, 1, 2),
            _tx(T.RESOLVE, 3, 7),
            _tx(T.CHARGEBACK, 2, 4),
        ]
    )

    assert sorted(clients) == [1, 2, 3]

    client1 = clients[1]
    assert client1.available == 3000000
    assert client1.held == 10000000
    assert client1.total == 13000000
    assert client1.locked is False

    client2 = clients[2]
    assert client2.available == 3000000
    assert client2.held == 0
    assert client2.total == 3000000
    assert client2.locked is True

    client3 = clients[3]
    assert client3.available == 4500000
    assert client3.held == 3000000
    assert client3.total == 7500000
    assert client3.locked is False

    assert len(transactions) == 9
    assert transactions[4].dispute_status is DisputeStatus.CHARGED_BACK
    assert transactions[2].dispute_status is DisputeStatus.RESOLVED
    assert transactions[1].dispute_status is DisputeStatus.DISPUTED


def test_locked_account_rejects_operations():
    transactions, clients = _run(
        [
            _tx(T.DEPOSIT, 1, 1, 1000.0),
            _tx(T.DISPUTE, 1, 1),
            _tx(T.CHARGEBACK, 1, 1),
        ]
    )
    client = clients[1]
    assert client.locked is True

    before = (client.available, client.held, client.total)
    tx_count_before = len(transactions)

    _run(
        [
            _tx(T.DEPOSIT, 1, 2, 500.0),
            _tx(T.WITHDRAWAL, 1, 3, 100.0),
            _tx(T.DISPUTE, 1, 1),
            _tx(T.RESOLVE, 1, 1),
        ],
        transactions,
        clients,
    )

    after = clients[1]
    assert (after.available, after.held, after.total) == before
    assert after.locked is True
    assert len(transactions) == tx_count_before


def test_cross_client_effects():
    transactions, clients = _run(
        [_tx(T.DEPOSIT, 1, 1, 100.0), _tx(T.DEPOSIT, 2, 2, 50.0)]
    )
    c1 = (clients[1].available, clients[1].held)
    c2 = (clients[2].available, clients[2].held)

    handle_transaction(_tx(T.DISPUTE, 2, 1), transactions, clients)

    assert (clients[1].available, clients[1].held) == c1
    assert clients[1].total == c1[0]
    assert (clients[2].available, clients[2].held) == c2
    assert transactions[1].dispute_status is DisputeStatus.VALID


def test_dispatch_uses_existing_mappings():
    transactions = {}
    clients = {3: Client(3)}
    handle_transaction(_tx(T.DEPOSIT, 3, 7, 2.5), transactions, clients)
    assert clients[3].available == 25000
    assert transactions[7].amount == 25000


def test_duplicate_deposit_applies_funds_but_keeps_first_record():
    transactions, clients = _run(
        [_tx(T.DEPOSIT, 1, 1, 1.0), _tx(T.DEPOSIT, 1, 1, 2.0)]
    )
    assert clients[1].total == 30000
    assert transactions[1].amount == 10000