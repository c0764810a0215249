"""Dispatch of raw transactions to the handler for their type."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping

from .client import Client
from .disputes import handle_chargeback, handle_dispute, handle_resolve
from .funds import handle_deposit, handle_withdrawal
from .transactions import ProcessedTransaction, RawTransaction, RawTransactionType

Transactions = MutableMapping[int, ProcessedTransaction]
Clients = MutableMapping[int, Client]

_Handler = Callable[[RawTransaction, Transactions, Clients], None]

_HANDLERS: dict[RawTransactionType, _Handler] = {
    RawTransactionType.DEPOSIT: handle_deposit,
    RawTransactionType.WITHDRAWAL: handle_withdrawal,
    RawTransactionType.DISPUTE: handle_dispute,
    RawTransactionType.RESOLVE: handle_resolve,
    RawTransactionType.CHARGEBACK: handle_chargeback,
}


def handle_transaction(
    raw_tx: RawTransaction, transactions: Transactions, clients: Clients
) -> None:
    """Apply one raw transaction, updating the transaction and client mappings."""
    _HANDLERS[raw_tx.transaction_type](raw_tx, transactions, clients)