"""Tests for JSON file storage."""

import json
import logging
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest

from bank_ledger.exceptions import StorageError
from bank_ledger.models import AccountType, CustomerRecord
from bank_ledger.storage import JsonFileStorage


@pytest.fixture
def records() -> list[CustomerRecord]:
    return [
        CustomerRecord(1, "Alice", AccountType.SAVING, Decimal("5000.00")),
        CustomerRecord(3, "Bob", AccountType.CURRENT, Decimal("10250.75")),
        CustomerRecord(2, "Zoë", AccountType.SAVING, Decimal("8000.10")),
    ]


class TestLoad:
    """Tests for JsonFileStorage.load."""

    def test_missing_file(self, ledger_path: Path) -> None:
        ledger = JsonFileStorage(ledger_path).load()
        assert ledger.records == []
        assert ledger.last_account_number == 0

    def test_empty_file(self, ledger_path: Path) -> None:
        ledger_path.write_text("", encoding="utf-8")
        assert JsonFileStorage(ledger_path).load().records == []

    def test_whitespace_file(self, ledger_path: Path) -> None:
        ledger_path.write_text("\n  \n", encoding="utf-8")
        assert JsonFileStorage(ledger_path).load().records == []

    def test_invalid_json_logged(self, ledger_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        ledger_path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.ERROR, logger="bank_ledger"):
            ledger = JsonFileStorage(ledger_path).load()
        assert ledger.records == []
        assert "Data load error" in caplog.text

    def test_foreign_payload_logged(self, ledger_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        ledger_path.write_text(json.dumps({"hello": "world"}), encoding="utf-8")
        with caplog.at_level(logging.ERROR, logger="bank_ledger"):
            ledger = JsonFileStorage(ledger_path).load()
        assert ledger.records == []
        assert "schema_version" in caplog.text

    def test_binary_garbage(self, ledger_path: Path) -> None:
        ledger_path.write_bytes(b"\xac\xed\x00\x05sr\x00\x13java.util.ArrayList")
        assert JsonFileStorage(ledger_path).load().records == []

    def test_unreadable_path(self, tmp_path: Path) -> None:
        # A directory exists but cannot be read as a file
        assert JsonFileStorage(tmp_path).load().records == []

    def test_drops_malformed_entries(self, ledger_path: Path) -> None:
        ledger_path.write_text(
            json.dumps(
                [
                    {"accountNumber": 1, "name": "Alice", "accountType": "S", "balance": 5000},
                    {"accountNumber": 2, "name": "Bad", "accountType": "Q", "balance": 5000},
                ]
            ),
            encoding="utf-8",
        )
        ledger = JsonFileStorage(ledger_path).load()
        assert [r.name for r in ledger.records] == ["Alice"]
        assert ledger.dropped == 1


class TestSave:
    """Tests for JsonFileStorage.save."""

    def test_round_trip(self, ledger_path: Path, records: list[CustomerRecord]) -> None:
        storage = JsonFileStorage(ledger_path)
        storage.save(records, last_account_number=5)

        ledger = JsonFileStorage(ledger_path).load()
        assert ledger.records == records
        assert ledger.last_account_number == 5

    def test_overwrites_previous_contents(
        self, ledger_path: Path, records: list[CustomerRecord]
    ) -> None:
        storage = JsonFileStorage(ledger_path)
        storage.save(records)
        storage.save(records[:1])
        assert storage.load().records == records[:1]

    def test_writes_versioned_document(self, ledger_path: Path, records: list[CustomerRecord]) -> None:
        JsonFileStorage(ledger_path).save(records, last_account_number=3)
        data = json.loads(ledger_path.read_text(encoding="utf-8"))
        assert data["schema_version"] == 1
        assert data["records"][1] == {
            "accountNumber": 3,
            "name": "Bob",
            "accountType": "C",
            "balance": "10250.75",
        }

    def test_pretty(self, ledger_path: Path, records: list[CustomerRecord]) -> None:
        JsonFileStorage(ledger_path, pretty=True).save(records)
        assert "\n  " in ledger_path.read_text(encoding="utf-8")

    def test_creates_parent_directory(self, tmp_path: Path, records: list[CustomerRecord]) -> None:
        path = tmp_path / "nested" / "dir" / "bank.json"
        JsonFileStorage(path).save(records)
        assert path.exists()

    def test_no_temp_files_left(self, ledger_path: Path, records: list[CustomerRecord]) -> None:
        JsonFileStorage(ledger_path).save(records)
        assert sorted(p.name for p in ledger_path.parent.iterdir()) == ["bank.json"]

    def test_failure_raises_storage_error(
        self, ledger_path: Path, records: list[CustomerRecord]
    ) -> None:
        storage = JsonFileStorage(ledger_path)
        storage.save(records)

        with patch("bank_ledger.storage.json_file.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(StorageError, match="disk full"):
                storage.save(records[:1])

        # Previous contents survive and the temp file is cleaned up
        assert storage.load().records == records
        assert [p.name for p in ledger_path.parent.iterdir()] == ["bank.json"]

    def test_unwritable_target(self, tmp_path: Path, records: list[CustomerRecord]) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonFileStorage(blocker / "bank.json").save(records)
