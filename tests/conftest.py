"""Pytest configuration and fixtures."""

from collections import deque
from pathlib import Path

import pytest
from faker import Faker

from bank_ledger.exceptions import ConsoleUnavailableError
from bank_ledger.operations import AccountService
from bank_ledger.storage import JsonFileStorage
from bank_ledger.store import LedgerStore


class ScriptedConsole:
    """Console that replays scripted input and records output."""

    def __init__(self, lines: list[str] | None = None, secret: str | None = "matrix") -> None:
        self.lines = deque(lines or [])
        self.secret = secret
        self.output: list[str] = []
        self.prompts: list[str] = []

    def write(self, text: str = "") -> None:
        self.output.append(text)

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.popleft()

    def read_secret(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if self.secret is None:
            raise ConsoleUnavailableError(
                "No console available. Please run from a system terminal."
            )
        return self.secret

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fake(seed: int) -> Faker:
    """Seeded Faker for customer names."""
    faker = Faker("en_US")
    faker.seed_instance(seed)
    return faker


@pytest.fixture
def ledger_path(tmp_path: Path) -> Path:
    """Ledger file location inside a per-test directory."""
    return tmp_path / "bank.json"


@pytest.fixture
def storage(ledger_path: Path) -> JsonFileStorage:
    return JsonFileStorage(ledger_path)


@pytest.fixture
def store(storage: JsonFileStorage) -> LedgerStore:
    """Empty store backed by the per-test ledger file."""
    return LedgerStore.open(storage)


@pytest.fixture
def service(store: LedgerStore) -> AccountService:
    return AccountService(store)


@pytest.fixture
def scripted_console() -> type[ScriptedConsole]:
    """Factory for consoles replaying the given input lines."""
    return ScriptedConsole
