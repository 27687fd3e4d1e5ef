"""Terminal account ledger for bank customer records."""

__version__ = "0.1.0"
