"""Interactive menu shell for the account ledger."""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Callable

from bank_ledger.console import Console
from bank_ledger.exceptions import (
    AuthenticationError,
    ConsoleUnavailableError,
    LedgerError,
    StorageError,
)
from bank_ledger.models import AccountType, CustomerRecord
from bank_ledger.operations import AccountService
from bank_ledger.rules import minimum_balance
from bank_ledger.storage import JsonFileStorage
from bank_ledger.store import LedgerStore

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
EXIT_CHOICE = 8

MENU = (
    "1. Open New Account",
    "2. Deposit",
    "3. Withdraw",
    "4. Show Balance",
    "5. Show All",
    "6. Modify Account",
    "7. Close Account",
    "8. Exit",
)


class Shell:
    """Authenticate once, then serve the numbered menu until Exit.

    Parameters
    ----------
    console : Console
        Prompt/response channel; tests pass a scripted one.
    storage : JsonFileStorage
        Ledger file the session loads from and writes to.
    secret : str
        Shared secret compared against the trimmed password input.
    """

    def __init__(self, console: Console, storage: JsonFileStorage, secret: str) -> None:
        self.console = console
        self.storage = storage
        self.secret = secret
        self.service: AccountService | None = None
        self._actions: dict[int, Callable[[], None]] = {
            1: self.open_account,
            2: self.deposit,
            3: self.withdraw,
            4: self.show_balance,
            5: self.show_all,
            6: self.modify_account,
            7: self.close_account,
        }

    def run(self) -> bool:
        """Run one session. Returns False when authentication failed."""
        self.console.write("\n*** WELCOME TO THE BANKING MANAGEMENT SYSTEM ***\n")
        try:
            self.authenticate()
        except ConsoleUnavailableError as e:
            logger.warning("Refusing to read password: %s", e)
            self.console.write(str(e))
            self.console.write("You are not an authorized user.")
            return False
        except AuthenticationError:
            logger.warning("Authentication failed")
            self.console.write("You are not an authorized user.")
            return False

        self.console.write("\n                   Welcome to Bank Management System\n")
        store = LedgerStore.open(self.storage)
        self.service = AccountService(store, on_save_error=self._report_save_error)

        try:
            self._loop()
        except EOFError:
            logger.debug("Input closed, ending session")
            self.console.write("\nGoodbye!")
        return True

    def authenticate(self) -> None:
        """Read the password without echo and compare it to the secret."""
        try:
            entered = self.console.read_secret("Enter your password: ")
        except EOFError as e:
            raise AuthenticationError("no password entered") from e
        if entered.strip() != self.secret:
            raise AuthenticationError("password mismatch")

    def _loop(self) -> None:
        while True:
            self.console.write("\nMenu")
            for line in MENU:
                self.console.write(line)
            text = self.console.read_line("Enter your choice: ")
            try:
                choice = int(text.strip())
            except ValueError:
                self.console.write("Incorrect input.")
                continue

            if choice == EXIT_CHOICE:
                self.console.write("Goodbye!")
                return

            action = self._actions.get(choice)
            if action is None:
                self.console.write("Incorrect input.")
            else:
                try:
                    action()
                except LedgerError as e:
                    self.console.write(str(e))
            self._pause()

    # Actions

    def open_account(self) -> None:
        self._header("Open New Account")
        name = self._read_name("Enter name: ")
        account_type = self._read_account_type()
        floor = minimum_balance(account_type)
        amount = self._read_amount(f"Enter initial deposit (min {floor:.0f}): ")
        record = self.service.open_account(name, account_type, amount)
        self.console.write(f"Account created. Your account number is {record.account_number}")

    def deposit(self) -> None:
        self._header("Deposit")
        account_number = self._read_account_number()
        self.service.get_account(account_number)
        amount = self._read_amount("Enter amount to deposit: ")
        record = self.service.deposit(account_number, amount)
        self.console.write(f"Deposited. New balance: {record.balance:.2f}")

    def withdraw(self) -> None:
        self._header("Withdraw")
        account_number = self._read_account_number()
        self.service.get_account(account_number)
        amount = self._read_amount("Enter amount to withdraw: ")
        record = self.service.withdraw(account_number, amount)
        self.console.write(f"Withdrawn. New balance: {record.balance:.2f}")

    def show_balance(self) -> None:
        self._header("Show Balance")
        record = self.service.get_account(self._read_account_number())
        self.console.write(
            f"Balance for A/C {record.account_number} ({record.name}): {record.balance:.2f}"
        )

    def show_all(self) -> None:
        self._header("All Accounts")
        records = self.service.list_accounts()
        if not records:
            self.console.write("No accounts found.")
            return
        self.console.write(f"{'Acno':<6} {'Name':<20} {'T':<1} {'Balance':>10}")
        for record in records:
            self.console.write(format_row(record))

    def modify_account(self) -> None:
        self._header("Modify Account")
        account_number = self._read_account_number()
        record = self.service.get_account(account_number)
        new_name = self.console.read_line(
            f"Enter new name (leave blank to keep '{record.name}'): "
        )
        self.service.modify_account(account_number, new_name)
        self.console.write("Account updated.")

    def close_account(self) -> None:
        self._header("Close Account")
        self.service.close_account(self._read_account_number())
        self.console.write("Account closed successfully.")

    # Prompts

    def _read_int(self, prompt: str) -> int:
        while True:
            text = self.console.read_line(prompt).strip()
            try:
                return int(text)
            except ValueError:
                self.console.write("Enter a valid integer.")

    def _read_account_number(self) -> int:
        return self._read_int("Enter account number: ")

    def _read_amount(self, prompt: str) -> Decimal:
        """Prompt until the input parses as a finite amount, rounded to cents."""
        while True:
            text = self.console.read_line(prompt).strip()
            try:
                amount = Decimal(text).quantize(CENTS, rounding=ROUND_HALF_UP)
            except InvalidOperation:
                amount = None
            if amount is not None and amount.is_finite():
                return amount
            self.console.write("Enter a valid number.")

    def _read_name(self, prompt: str) -> str:
        while True:
            name = self.console.read_line(prompt).strip()
            if name:
                return name
            self.console.write("Name must not be blank.")

    def _read_account_type(self) -> AccountType:
        while True:
            text = self.console.read_line("Enter S for Saving or C for Current: ")
            try:
                return AccountType(text.strip().upper())
            except ValueError:
                self.console.write("Invalid input. Try again.")

    # Output helpers

    def _header(self, title: str) -> None:
        self.console.write(f"\n==================== {title} ====================")

    def _pause(self) -> None:
        self.console.write("\nPress ENTER to continue...")
        self.console.read_line()

    def _report_save_error(self, error: StorageError) -> None:
        self.console.write(f"Data save error: {error}")


def format_row(record: CustomerRecord) -> str:
    """Format one record as a fixed-width table row."""
    return (
        f"{record.account_number:<6d} {record.name:<20} "
        f"{record.account_type.value:<1} {record.balance:>10.2f}"
    )
