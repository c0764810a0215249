"""Client accounts and the balance operations applied to them."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Base class for errors raised by account operations."""


class AccountLockedError(ClientError):
    """The account is locked and rejects every operation."""

    def __init__(self) -> None:
        super().__init__("Account is locked")


class InsufficientFundsError(ClientError):
    """The available balance does not cover a withdrawal."""

    def __init__(self) -> None:
        super().__init__("Insufficient funds available")


@dataclass
class Client:
    """A client account with fixed-point balances."""

    client_id: int
    available: int = 0
    held: int = 0
    total: int = 0
    locked: bool = False

    def _ensure_unlocked(self, action: str) -> None:
        if self.locked:
            logger.warning("Client %s is locked and cannot %s", self.client_id, action)
            raise AccountLockedError()

    def _log_balances(self, message: str, amount: int) -> None:
        logger.info(
            "Client %s %s %s and now has these balances: "
            "available=%s, held=%s, total=%s, locked=%s",
            self.client_id,
            message,
            amount,
            self.available,
            self.held,
            self.total,
            self.locked,
        )

    def deposit(self, amount: int) -> None:
        """Add funds to the available and total balances."""
        self._ensure_unlocked("deposit")
        self.available += amount
        self.total += amount
        self._log_balances("deposited", amount)

    def withdraw(self, amount: int) -> None:
        """Remove funds from the available and total balances."""
        self._ensure_unlocked("withdraw")
        if self.available < amount:
            logger.warning("User is trying to withdraw more than they have.")
            raise InsufficientFundsError()
        self.available -= amount
        self.total -= amount
        self._log_balances("withdrew", amount)

    def apply_dispute(self, amount: int) -> None:
        """Move funds from available to held."""
        self._ensure_unlocked("apply dispute")
        self.available -= amount
        self.held += amount
        self._log_balances("applied dispute for", amount)

    def apply_resolve(self, amount: int) -> None:
        """Move funds from held back to available."""
        self._ensure_unlocked("apply resolve")
        self.available += amount
        self.held -= amount
        self._log_balances("resolved dispute for", amount)

    def apply_chargeback(self, amount: int) -> None:
        """Remove held funds from the account and lock it."""
        self._ensure_unlocked("apply chargeback")
        self.held -= amount
        self.total -= amount
        self.locked = True
        self._log_balances("had chargeback for", amount)