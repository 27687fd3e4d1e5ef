"""In-memory record store for the ledger."""

from bank_ledger.store.ledger import LedgerStore, find_by_account_number, next_account_number

__all__ = ["LedgerStore", "find_by_account_number", "next_account_number"]
