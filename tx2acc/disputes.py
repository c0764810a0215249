"""Handlers for transactions that act on earlier ones: disputes, resolves and chargebacks."""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableMapping
from typing import Optional

from .client import Client, ClientError
from .transactions import (
    DisputeStatus,
    ProcessedTransaction,
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


def _find_target(
    raw_tx: RawTransaction,
    transactions: Transactions,
    clients: Clients,
    verb: str,
) -> Optional[ProcessedTransaction]:
    """Return the transaction an effect refers to, or None if it cannot apply."""
    if raw_tx.client_id not in clients:
        # Input is chronological, so a client with no account has no
        # transaction for the effect to apply to.
        logger.warning(
            "Client with ID %s not found while handling effect for tx %s.",
            raw_tx.client_id,
            raw_tx.transaction_id,
        )
        return None

    tx = transactions.get(raw_tx.transaction_id)
    if tx is None:
        logger.warning(
            "Transaction with ID %s not found while handling effect for tx %s.",
            raw_tx.transaction_id,
            raw_tx.transaction_id,
        )
        return None

    if tx.client_id != raw_tx.client_id:
        logger.warning(
            "Client %s cannot %s transaction %s which belongs to client %s",
            raw_tx.client_id,
            verb,
            raw_tx.transaction_id,
            tx.client_id,
        )
        return None

    return tx


def _apply_effect(
    raw_tx: RawTransaction,
    transactions: Transactions,
    clients: Clients,
    *,
    verb: str,
    required: DisputeStatus,
    status_problem: str,
    operation: Callable[[Client, int], None],
    failure: str,
    outcome: DisputeStatus,
) -> None:
    tx = _find_target(raw_tx, transactions, clients, verb)
    if tx is None:
        return

    if tx.dispute_status is not required:
        logger.warning(
            "Failed to %s transaction with ID %s because it is %s.",
            verb,
            raw_tx.transaction_id,
            status_problem,
        )
        return

    client = clients[tx.client_id]
    try:
        operation(client, tx.amount)
    except ClientError as error:
        logger.warning(
            "%s transaction with ID %s for client %s: %s",
            failure,
            raw_tx.transaction_id,
            raw_tx.client_id,
            error,
        )
        return

    tx.dispute_status = outcome


def handle_dispute(
    raw_tx: RawTransaction, transactions: Transactions, clients: Clients
) -> None:
    """Hold the funds of a valid transaction while it is disputed.

    Disputes of unknown clients or transactions, of another client's
    transaction, of a transaction that is not valid, or on a locked account
    are logged and change nothing.
    """
    _require_type(raw_tx, RawTransactionType.DISPUTE)
    logger.info("Found a dispute for transaction with ID %s.", raw_tx.transaction_id)
    _apply_effect(
        raw_tx,
        transactions,
        clients,
        verb="dispute",
        required=DisputeStatus.VALID,
        status_problem="not valid",
        operation=Client.apply_dispute,
        failure="Failed to dispute",
        outcome=DisputeStatus.DISPUTED,
    )


def handle_resolve(
    raw_tx: RawTransaction, transactions: Transactions, clients: Clients
) -> None:
    """Release the held funds of a disputed transaction.

    Only a disputed transaction of the same client can be resolved; anything
    else is logged and changes nothing.
    """
    _require_type(raw_tx, RawTransactionType.RESOLVE)
    logger.info("Found a resolve for transaction with ID %s.", raw_tx.transaction_id)
    _apply_effect(
        raw_tx,
        transactions,
        clients,
        verb="resolve",
        required=DisputeStatus.DISPUTED,
        status_problem="not disputed",
        operation=Client.apply_resolve,
        failure="Error resolving",
        outcome=DisputeStatus.RESOLVED,
    )


def handle_chargeback(
    raw_tx: RawTransaction, transactions: Transactions, clients: Clients
) -> None:
    """Withdraw the held funds of a disputed transaction and lock the account.

    Only a disputed transaction of the same client can be charged back;
    anything else is logged and changes nothing.
    """
    _require_type(raw_tx, RawTransactionType.CHARGEBACK)
    logger.info(
        "Found a chargeback for transaction with ID %s.", raw_tx.transaction_id
    )
    _apply_effect(
        raw_tx,
        transactions,
        clients,
        verb="chargeback",
        required=DisputeStatus.DISPUTED,
        status_problem="not disputed",
        operation=Client.apply_chargeback,
        failure="Error charging back",
        outcome=DisputeStatus.CHARGED_BACK,
    )