"""Enumeration types for ledger entities."""

from enum import Enum


class AccountType(str, Enum):
    SAVING = "S"
    CURRENT = "C"

    @property
    def label(self) -> str:
        return self.name.capitalize()
