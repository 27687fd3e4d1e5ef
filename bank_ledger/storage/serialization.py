"""Versioned record schema for the ledger file."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from bank_ledger.exceptions import RecordDecodeError
from bank_ledger.models import AccountType, CustomerRecord

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Python attribute -> stored key
FIELD_NAMES = {
    "account_number": "accountNumber",
    "name": "name",
    "account_type": "accountType",
    "balance": "balance",
}


@dataclass
class DecodedLedger:
    """Result of decoding a ledger payload."""

    records: list[CustomerRecord] = field(default_factory=list)
    last_account_number: int = 0
    dropped: int = 0


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    return value


def encode_record(record: CustomerRecord) -> dict[str, Any]:
    """Convert a record to its stored mapping."""
    return {
        key: serialize_value(getattr(record, attr))
        for attr, key in FIELD_NAMES.items()
    }


def encode_ledger(records: list[CustomerRecord], last_account_number: int = 0) -> dict[str, Any]:
    """Build the versioned envelope for a full record collection."""
    return {
        "schema_version": SCHEMA_VERSION,
        "lastAccountNumber": last_account_number,
        "records": [encode_record(record) for record in records],
    }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_balance(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise RecordDecodeError(f"balance has unsupported type {type(value).__name__}")
    try:
        balance = Decimal(str(value))
    except InvalidOperation as e:
        raise RecordDecodeError(f"balance {value!r} is not a number") from e
    if not balance.is_finite():
        raise RecordDecodeError(f"balance {value!r} is not finite")
    if balance < 0:
        raise RecordDecodeError(f"balance {value!r} is negative")
    return balance


def decode_record(entry: Any) -> CustomerRecord:
    """Decode one stored mapping into a record.

    Parameters
    ----------
    entry : Any
        A decoded JSON value expected to be a record mapping. Unknown keys
        are ignored.

    Returns
    -------
    CustomerRecord
        The validated record.

    Raises
    ------
    RecordDecodeError
        If any field is missing or does not match the schema.
    """
    if not isinstance(entry, dict):
        raise RecordDecodeError(f"entry is {type(entry).__name__}, not an object")

    missing = [key for key in FIELD_NAMES.values() if key not in entry]
    if missing:
        raise RecordDecodeError(f"missing fields: {', '.join(missing)}")

    account_number = entry["accountNumber"]
    if not _is_int(account_number) or account_number <= 0:
        raise RecordDecodeError(f"accountNumber {account_number!r} is not a positive integer")

    name = entry["name"]
    if not isinstance(name, str) or not name.strip():
        raise RecordDecodeError(f"name {name!r} is not a non-empty string")

    try:
        account_type = AccountType(entry["accountType"])
    except ValueError as e:
        raise RecordDecodeError(f"accountType {entry['accountType']!r} is not S or C") from e

    return CustomerRecord(
        account_number=account_number,
        name=name,
        account_type=account_type,
        balance=_decode_balance(entry["balance"]),
    )


def decode_ledger(payload: Any) -> DecodedLedger:
    """Decode a full ledger payload, dropping entries that fail the schema.

    Accepts the versioned envelope or a bare list of record mappings.
    Each dropped entry is logged with its position and reason.

    Raises
    ------
    RecordDecodeError
        If the payload as a whole is not a ledger.
    """
    result = DecodedLedger()

    if isinstance(payload, list):
        entries = payload
    elif isinstance(payload, dict):
        version = payload.get("schema_version")
        if version != SCHEMA_VERSION:
            raise RecordDecodeError(f"unsupported schema_version {version!r}")
        entries = payload.get("records")
        if not isinstance(entries, list):
            raise RecordDecodeError("records is not a list")
        last = payload.get("lastAccountNumber", 0)
        if _is_int(last) and last >= 0:
            result.last_account_number = last
        else:
            logger.warning("Ignoring invalid lastAccountNumber %r", last)
    else:
        raise RecordDecodeError(f"payload is {type(payload).__name__}, not a ledger")

    seen: set[int] = set()
    for index, entry in enumerate(entries):
        try:
            record = decode_record(entry)
        except RecordDecodeError as e:
            logger.warning("Dropping ledger entry %d: %s", index, e)
            result.dropped += 1
            continue
        if record.account_number in seen:
            logger.warning(
                "Dropping ledger entry %d: duplicate accountNumber %d",
                index,
                record.account_number,
            )
            result.dropped += 1
            continue
        seen.add(record.account_number)
        result.records.append(record)

    return result
