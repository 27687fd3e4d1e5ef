"""Sample account generator for seeding a ledger file."""

import random
from decimal import Decimal
from typing import Iterator

from faker import Faker

from bank_ledger.models import AccountType, CustomerRecord
from bank_ledger.rules import minimum_balance


class AccountGenerator:
    """Generate valid customer records with realistic names.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.65, 0.35]

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    def generate(self, account_number: int) -> CustomerRecord:
        """Generate one record that satisfies its type's minimum balance."""
        account_type = self.random.choices(
            self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
        )[0]

        # Most balances sit a little above the floor, a few far above it
        extra = Decimal(str(round(self.random.lognormvariate(8, 1.2), 2)))
        balance = minimum_balance(account_type) + extra

        return CustomerRecord(
            account_number=account_number,
            name=self.fake.name(),
            account_type=account_type,
            balance=balance.quantize(Decimal("0.01")),
        )

    def generate_batch(self, count: int, start: int = 1) -> Iterator[CustomerRecord]:
        """Generate ``count`` records numbered from ``start``."""
        for offset in range(count):
            yield self.generate(start + offset)
