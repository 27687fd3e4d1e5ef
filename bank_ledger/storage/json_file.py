"""JSON file storage for the ledger."""

import json
import logging
import os
import tempfile
from pathlib import Path

from bank_ledger.exceptions import RecordDecodeError, StorageError
from bank_ledger.models import CustomerRecord
from bank_ledger.storage.serialization import DecodedLedger, decode_ledger, encode_ledger

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """Read and write the full record collection as one JSON document."""

    def __init__(self, path: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file storage.

        Parameters
        ----------
        path : str | Path
            Ledger file. Need not exist yet.
        pretty : bool
            Pretty-print JSON output.
        """
        self.path = Path(path)
        self.pretty = pretty

    def load(self) -> DecodedLedger:
        """Read the ledger file.

        A missing, empty, unreadable or undecodable file yields an empty
        ledger; the cause is logged and nothing is raised.
        """
        if not self.path.exists():
            logger.debug("Ledger file %s not found, starting empty", self.path)
            return DecodedLedger()

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Data load error: cannot read %s: %s", self.path, e)
            return DecodedLedger()

        if not text.strip():
            logger.info("Ledger file %s is empty, starting empty", self.path)
            return DecodedLedger()

        try:
            ledger = decode_ledger(json.loads(text))
        except json.JSONDecodeError as e:
            logger.error("Data load error: %s is not valid JSON: %s", self.path, e)
            return DecodedLedger()
        except RecordDecodeError as e:
            logger.error("Data load error: %s: %s", self.path, e)
            return DecodedLedger()

        logger.info(
            "Loaded %d records from %s (%d dropped)",
            len(ledger.records),
            self.path,
            ledger.dropped,
        )
        return ledger

    def save(self, records: list[CustomerRecord], last_account_number: int = 0) -> None:
        """Replace the ledger file with the given collection.

        The document is written to a temporary file in the same directory
        and renamed over the target.

        Raises
        ------
        StorageError
            If the file cannot be written.
        """
        data = encode_ledger(records, last_account_number)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"cannot write {self.path}: {e}") from e

        logger.debug("Saved %d records to %s", len(records), self.path)
