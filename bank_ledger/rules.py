"""Balance policy and amount checks for account operations.

All functions are pure: they read their arguments and either return or
raise a :class:`~bank_ledger.exceptions.ValidationError` subclass.
"""

from decimal import Decimal

from bank_ledger.exceptions import (
    InsufficientDepositError,
    InvalidAmountError,
    InvalidNameError,
    MinimumBalanceError,
)
from bank_ledger.models import AccountType, CustomerRecord

MINIMUM_BALANCES: dict[AccountType, Decimal] = {
    AccountType.SAVING: Decimal("5000.00"),
    AccountType.CURRENT: Decimal("10000.00"),
}


def minimum_balance(account_type: AccountType) -> Decimal:
    """Return the balance floor for an account type."""
    return MINIMUM_BALANCES[account_type]


def check_name(name: str) -> str:
    """Return the trimmed name, rejecting blank input."""
    cleaned = name.strip()
    if not cleaned:
        raise InvalidNameError("Name must not be blank.")
    return cleaned


def check_opening_deposit(account_type: AccountType, amount: Decimal) -> None:
    """Reject an opening deposit below the account type minimum."""
    if amount < minimum_balance(account_type):
        raise InsufficientDepositError("Insufficient amount to open account.")


def check_deposit(amount: Decimal) -> None:
    if amount <= 0:
        raise InvalidAmountError("Amount must be positive.")


def check_withdrawal(record: CustomerRecord, amount: Decimal) -> None:
    """Reject a withdrawal that is not positive or breaches the minimum.

    Parameters
    ----------
    record : CustomerRecord
        Account being debited.
    amount : Decimal
        Requested withdrawal.
    """
    if amount <= 0:
        raise InvalidAmountError("Amount must be positive.")
    floor = minimum_balance(record.account_type)
    if record.balance - amount < floor:
        raise MinimumBalanceError(
            f"Insufficient funds to maintain minimum balance ({floor:.0f})."
        )
