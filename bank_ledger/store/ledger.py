"""In-memory record store backed by the ledger file."""

from dataclasses import dataclass, field
from typing import Iterator

from bank_ledger.exceptions import AccountNotFoundError
from bank_ledger.models import CustomerRecord
from bank_ledger.storage import JsonFileStorage


def find_by_account_number(
    records: list[CustomerRecord], account_number: int
) -> CustomerRecord | None:
    """Return the first record with the given number, or None."""
    for record in records:
        if record.account_number == account_number:
            return record
    return None


def next_account_number(records: list[CustomerRecord], floor: int = 0) -> int:
    """Return one more than the highest number in use, or than ``floor``."""
    highest = max((record.account_number for record in records), default=0)
    return max(highest, floor) + 1


@dataclass
class LedgerStore:
    """Ordered record collection plus its durable file.

    ``last_account_number`` is the highest number ever assigned. It is
    persisted with the records so numbers of closed accounts are not
    handed out again.
    """

    storage: JsonFileStorage
    records: list[CustomerRecord] = field(default_factory=list)
    last_account_number: int = 0

    @classmethod
    def open(cls, storage: JsonFileStorage) -> "LedgerStore":
        """Create a store and load its records from ``storage``."""
        store = cls(storage=storage)
        store.load()
        return store

    def load(self) -> list[CustomerRecord]:
        """Replace the in-memory collection with the file contents."""
        ledger = self.storage.load()
        self.records = ledger.records
        self.last_account_number = max(
            ledger.last_account_number,
            max((r.account_number for r in self.records), default=0),
        )
        return self.records

    def save(self) -> None:
        """Write the whole collection. Raises StorageError on failure."""
        self.storage.save(self.records, self.last_account_number)

    def find(self, account_number: int) -> CustomerRecord | None:
        return find_by_account_number(self.records, account_number)

    def get(self, account_number: int) -> CustomerRecord:
        """Return the record with the given number.

        Raises
        ------
        AccountNotFoundError
            If no record has that number.
        """
        record = self.find(account_number)
        if record is None:
            raise AccountNotFoundError(account_number)
        return record

    def next_account_number(self) -> int:
        return next_account_number(self.records, self.last_account_number)

    def add(self, record: CustomerRecord) -> None:
        """Append a record, keeping numbers unique."""
        if self.find(record.account_number) is not None:
            raise ValueError(f"Account {record.account_number} already exists")
        self.records.append(record)
        self.last_account_number = max(self.last_account_number, record.account_number)

    def remove(self, record: CustomerRecord) -> None:
        self.records.remove(record)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[CustomerRecord]:
        return iter(self.records)
