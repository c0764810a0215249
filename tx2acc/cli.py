"""Command line entry point: read a transactions CSV and print account balances."""

from __future__ import annotations

import csv
import logging
import sys
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Optional, TextIO

from .client import Client
from .convert import number_to_fractional
from .handlers import handle_transaction
from .transactions import (
    ProcessedTransaction,
    RawTransaction,
    TransactionParseError,
    parse_raw_transaction,
)

logger = logging.getLogger(__name__)

HEADER = "client,available,held,total,locked"


def read_transactions(stream: TextIO) -> Iterator[RawTransaction]:
    """Yield the transactions in a CSV stream, skipping rows that do not parse.

    The first row holds the column names. Blank lines are ignored.
    """
    rows = (row for row in csv.reader(stream) if row)
    header = next(rows, None)
    if header is None:
        return
    header = [name.strip() for name in header]

    for number, row in enumerate(rows, start=1):
        if len(row) != len(header):
            logger.error(
                "Error parsing row: found record with %s fields, "
                "but the previous record has %s fields",
                len(row),
                len(header),
            )
            continue
        try:
            raw_tx = parse_raw_transaction(dict(zip(header, row)))
        except TransactionParseError as error:
            logger.error("Error parsing row: %s", error)
            continue
        logger.info("CSV Row %s, %r", number, raw_tx)
        yield raw_tx


def process_transactions(raw_transactions: Iterable[RawTransaction]) -> dict[int, Client]:
    """Apply transactions in order and return the resulting accounts by client ID."""
    transactions: dict[int, ProcessedTransaction] = {}
    clients: dict[int, Client] = {}
    for raw_tx in raw_transactions:
        handle_transaction(raw_tx, transactions, clients)
    return clients


def format_report(clients: Mapping[int, Client]) -> str:
    """Render account balances as CSV with four decimal places."""
    lines = [HEADER]
    for client_id, client in clients.items():
        available = number_to_fractional(client.available)
        held = number_to_fractional(client.held)
        total = number_to_fractional(client.total)
        locked = "true" if client.locked else "false"
        lines.append(f"{client_id},{available:.4f},{held:.4f},{total:.4f},{locked}")
    return "\n".join(lines) + "\n"


def main(argv: Optional[list[str]] = None) -> int:
    """Process the CSV file named by the first argument and print the balances."""
    if argv is None:
        argv = sys.argv[1:]
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(message)s")

    input_file = argv[0] if argv else "unknown"
    logger.info("input = %s", input_file)

    path = Path(input_file)
    if not path.exists():
        logger.error("Error: File '%s' not found", input_file)
        return 0

    try:
        with path.open(newline="", encoding="utf-8", errors="replace") as stream:
            clients = process_transactions(read_transactions(stream))
    except OSError as error:
        logger.error("Error: %s", error)
        return 1

    sys.stdout.write(format_report(clients))
    return 0


if __name__ == "__main__":
    sys.exit(main())