"""Handlers for transactions that move funds: deposits and withdrawals."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping

from .client import Client, ClientError
from .convert import fractional_to_number
from .transactions import (
    ProcessedTransaction,
    ProcessedTransactionType,
    RawTransaction,
    RawTransactionType,
)

logger = logging.getLogger(__name__)

Transactions = MutableMapping[int, ProcessedTransaction]
Clients = MutableMapping[int, Client]


def _require_type(raw_tx: RawTransaction, expected: RawTransactionType) -> None:
    if raw_tx.transaction_type is not expected:
        raise ValueError(
            f"expected a {expected.value} transaction, "
            f"got {raw_tx.transaction_type.value}"
        )


def _require_amount(raw_tx: RawTransaction) -> int:
    if raw_tx.amount is None:
        raise ValueError("Deposit/Withdrawal must have amount")
    return fractional_to_number(raw_tx.amount)


def _record(
    raw_tx: RawTransaction,
    amount: int,
    kind: ProcessedTransactionType,
    transactions: Transactions,
) -> None:
    if raw_tx.transaction_id in transactions:
        # Overwriting would lose the dispute state of the earlier transaction.
        logger.warning("Ignoring duplicate transaction ID %s", raw_tx.transaction_id)
        return
    transactions[raw_tx.transaction_id] = ProcessedTransaction(
        transaction_id=raw_tx.transaction_id,
        client_id=raw_tx.client_id,
        amount=amount,
        transaction_type=kind,
    )


def handle_deposit(
    raw_tx: RawTransaction, transactions: Transactions, clients: Clients
) -> None:
    """Apply a deposit to its client's account and record it.

    A rejected deposit is logged and leaves both mappings unchanged, except
    that the client's account is opened if it did not exist.
    """
    _require_type(raw_tx, RawTransactionType.DEPOSIT)
    logger.info("Found a deposit with ID %s.", raw_tx.transaction_id)

    amount = _require_amount(raw_tx)
    client = clients.setdefault(raw_tx.client_id, Client(raw_tx.client_id))

    try:
        client.deposit(amount)
    except ClientError as error:
        logger.warning(
            "Error depositing amount %s for client %s: %s",
            amount,
            raw_tx.client_id,
            error,
        )
        return

    _record(raw_tx, amount, ProcessedTransactionType.DEPOSIT, transactions)


def handle_withdrawal(
    raw_tx: RawTransaction, transactions: Transactions, clients: Clients
) -> None:
    """Apply a withdrawal to its client's account and record it.

    A rejected withdrawal is logged and leaves both mappings unchanged, except
    that the client's account is opened if it did not exist.
    """
    _require_type(raw_tx, RawTransactionType.WITHDRAWAL)
    logger.info("Found a withdrawal with ID %s.", raw_tx.transaction_id)

    amount = _require_amount(raw_tx)
    client = clients.setdefault(raw_tx.client_id, Client(raw_tx.client_id))

    try:
        client.withdraw(amount)
    except ClientError as error:
        logger.warning(
            "Error withdrawing from client %s with amount %s: %s",
            raw_tx.client_id,
            amount,
            error,
        )
        return

    _record(raw_tx, amount, ProcessedTransactionType.WITHDRAWAL, transactions)