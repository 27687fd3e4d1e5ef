"""Customer record model."""

from dataclasses import dataclass
from decimal import Decimal

from bank_ledger.models.enums import AccountType


@dataclass
class CustomerRecord:
    """Bank customer account held in the ledger.

    ``account_type`` is fixed once the account is opened; ``name`` and
    ``balance`` change in place through the account operations.
    """

    account_number: int
    name: str
    account_type: AccountType
    balance: Decimal
