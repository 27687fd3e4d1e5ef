"""Persistent storage for the record collection."""

from bank_ledger.storage.json_file import JsonFileStorage
from bank_ledger.storage.serialization import DecodedLedger, decode_ledger, encode_ledger

__all__ = ["DecodedLedger", "JsonFileStorage", "decode_ledger", "encode_ledger"]
