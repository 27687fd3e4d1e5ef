"""Domain models for the account ledger."""

from bank_ledger.models.customer import CustomerRecord
from bank_ledger.models.enums import AccountType

__all__ = ["AccountType", "CustomerRecord"]
