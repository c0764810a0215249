"""Transaction records: rows as read from input and transactions as stored."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class ProcessedTransactionType(Enum):
    """Kinds of transaction that move funds and are kept for later disputes."""

    DEPOSIT = auto()
    WITHDRAWAL = auto()


class DisputeStatus(Enum):
    """Where a stored transaction stands in the dispute process."""

    VALID = auto()
    DISPUTED = auto()
    RESOLVED = auto()
    CHARGED_BACK = auto()


@dataclass
class ProcessedTransaction:
    """A deposit or withdrawal that has been applied to an account."""

    transaction_id: int
    client_id: int
    amount: int
    transaction_type: ProcessedTransactionType
    dispute_status: DisputeStatus = DisputeStatus.VALID


class RawTransactionType(str, Enum):
    """The transaction types accepted in the input's ``type`` column."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


@dataclass(frozen=True)
class RawTransaction:
    """One input row, typed but not yet applied."""

    transaction_type: RawTransactionType
    client_id: int
    transaction_id: int
    amount: Optional[float] = None


class TransactionParseError(ValueError):
    """An input row could not be turned into a transaction."""


_UNSIGNED = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

_U16_MAX = 2**16 - 1
_U32_MAX = 2**32 - 1


def _field(row: Mapping[str, Optional[str]], name: str) -> Optional[str]:
    for key, value in row.items():
        if key is not None and key.strip() == name:
            return None if value is None else value.strip()
    return None


def _required(row: Mapping[str, Optional[str]], name: str) -> str:
    value = _field(row, name)
    if value is None:
        raise TransactionParseError(f"missing field `{name}`")
    return value


def _parse_unsigned(text: str, name: str, limit: int) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise TransactionParseError(f"field `{name}`: invalid integer {text!r}")
    number = int(text)
    if number > limit:
        raise TransactionParseError(f"field `{name}`: number too large: {text}")
    return number


def parse_raw_transaction(row: Mapping[str, Optional[str]]) -> RawTransaction:
    """Build a raw transaction from a row keyed by the input's column names.

    Keys and values are trimmed. ``amount`` may be absent or empty.
    """
    type_text = _required(row, "type")
    try:
        transaction_type = RawTransactionType(type_text)
    except ValueError:
        raise TransactionParseError(
            f"field `type`: unknown transaction type {type_text!r}"
        ) from None

    client_id = _parse_unsigned(_required(row, "client"), "client", _U16_MAX)
    transaction_id = _parse_unsigned(_required(row, "tx"), "tx", _U32_MAX)

    amount_text = _field(row, "amount")
    amount: Optional[float]
    if amount_text is None or amount_text == "":
        amount = None
    elif _FLOAT.fullmatch(amount_text):
        amount = float(amount_text)
    else:
        raise TransactionParseError(f"field `amount`: invalid float {amount_text!r}")

    return RawTransaction(
        transaction_type=transaction_type,
        client_id=client_id,
        transaction_id=transaction_id,
        amount=amount,
    )