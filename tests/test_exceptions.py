"""Tests for custom exception hierarchy."""

from bank_ledger.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    ConfigurationError,
    ConsoleUnavailableError,
    InsufficientDepositError,
    InvalidAmountError,
    InvalidNameError,
    LedgerError,
    MinimumBalanceError,
    RecordDecodeError,
    StorageError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_ledger_error_is_exception(self) -> None:
        assert isinstance(LedgerError("test"), Exception)

    def test_account_not_found_is_ledger_error(self) -> None:
        assert isinstance(AccountNotFoundError(7), LedgerError)

    def test_validation_errors(self) -> None:
        for cls in (InvalidAmountError, InsufficientDepositError, MinimumBalanceError, InvalidNameError):
            err = cls("test")
            assert isinstance(err, ValidationError)
            assert isinstance(err, LedgerError)

    def test_other_errors_are_ledger_errors(self) -> None:
        for cls in (
            RecordDecodeError,
            StorageError,
            AuthenticationError,
            ConsoleUnavailableError,
            ConfigurationError,
        ):
            assert isinstance(cls("test"), LedgerError)

    def test_account_not_found_message(self) -> None:
        err = AccountNotFoundError(42)
        assert str(err) == "Invalid account number."
        assert err.account_number == 42
