"""Custom exception hierarchy for bank-ledger."""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class AccountNotFoundError(LedgerError):
    """Raised when an account number does not match any record."""

    def __init__(self, account_number: int) -> None:
        super().__init__("Invalid account number.")
        self.account_number = account_number


class ValidationError(LedgerError):
    """Raised when an operation breaks a ledger rule."""


class InvalidAmountError(ValidationError):
    """Raised when a deposit or withdrawal amount is not positive."""


class InsufficientDepositError(ValidationError):
    """Raised when an opening deposit is below the account type minimum."""


class MinimumBalanceError(ValidationError):
    """Raised when a withdrawal would leave less than the minimum balance."""


class InvalidNameError(ValidationError):
    """Raised when a customer name is blank."""


class RecordDecodeError(LedgerError):
    """Raised when a stored entry does not match the record schema."""


class StorageError(LedgerError):
    """Raised when the ledger file cannot be read or written."""


class AuthenticationError(LedgerError):
    """Raised when the shared secret does not match."""


class ConsoleUnavailableError(LedgerError):
    """Raised when no terminal is available for hidden input."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
