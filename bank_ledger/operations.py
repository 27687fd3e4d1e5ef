"""Account operations over the ledger store.

Every mutating operation follows the same cycle: look up the record,
apply the rules, change exactly one record and write the whole
collection. A rule violation raises before anything is changed.
"""

import logging
from decimal import Decimal
from typing import Callable

from bank_ledger import rules
from bank_ledger.exceptions import StorageError
from bank_ledger.models import AccountType, CustomerRecord
from bank_ledger.store import LedgerStore

logger = logging.getLogger(__name__)

SaveErrorHandler = Callable[[StorageError], None]


class AccountService:
    """Open, update, inspect and close accounts in a :class:`LedgerStore`.

    Parameters
    ----------
    store : LedgerStore
        Loaded record store.
    on_save_error : SaveErrorHandler | None
        Called when persisting fails. The in-memory change is kept either
        way and the next successful save writes it out.
    """

    def __init__(
        self,
        store: LedgerStore,
        on_save_error: SaveErrorHandler | None = None,
    ) -> None:
        self.store = store
        self.on_save_error = on_save_error

    def open_account(
        self, name: str, account_type: AccountType, initial_deposit: Decimal
    ) -> CustomerRecord:
        """Create a record with the next account number."""
        name = rules.check_name(name)
        rules.check_opening_deposit(account_type, initial_deposit)

        record = CustomerRecord(
            account_number=self.store.next_account_number(),
            name=name,
            account_type=account_type,
            balance=initial_deposit,
        )
        self.store.add(record)
        logger.info("Opened account %d (%s)", record.account_number, account_type.label)
        self._commit()
        return record

    def deposit(self, account_number: int, amount: Decimal) -> CustomerRecord:
        record = self.store.get(account_number)
        rules.check_deposit(amount)
        record.balance += amount
        logger.info("Deposited %s to account %d", amount, account_number)
        self._commit()
        return record

    def withdraw(self, account_number: int, amount: Decimal) -> CustomerRecord:
        record = self.store.get(account_number)
        rules.check_withdrawal(record, amount)
        record.balance -= amount
        logger.info("Withdrew %s from account %d", amount, account_number)
        self._commit()
        return record

    def get_account(self, account_number: int) -> CustomerRecord:
        return self.store.get(account_number)

    def list_accounts(self) -> list[CustomerRecord]:
        return list(self.store)

    def modify_account(self, account_number: int, new_name: str = "") -> CustomerRecord:
        """Replace the name when ``new_name`` is not blank.

        The collection is written even when the name is kept.
        """
        record = self.store.get(account_number)
        new_name = new_name.strip()
        if new_name:
            record.name = new_name
            logger.info("Renamed account %d", account_number)
        self._commit()
        return record

    def close_account(self, account_number: int) -> CustomerRecord:
        record = self.store.get(account_number)
        self.store.remove(record)
        logger.info("Closed account %d", account_number)
        self._commit()
        return record

    def _commit(self) -> None:
        try:
            self.store.save()
        except StorageError as e:
            logger.error("Data save error: %s", e)
            if self.on_save_error is not None:
                self.on_save_error(e)
