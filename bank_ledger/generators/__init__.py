"""Sample data generators."""

from bank_ledger.generators.accounts import AccountGenerator

__all__ = ["AccountGenerator"]
