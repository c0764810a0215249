"""Replay client transactions from CSV and report account balances."""

__version__ = "0.1.0"

__all__ = ["__version__"]