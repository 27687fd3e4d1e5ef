#!/usr/bin/env python3
"""Generate a sample ledger file.

Writes N random accounts with valid balances, numbered from 1, so the
shell can be tried against a populated ledger.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.exceptions import StorageError
from bank_ledger.generators import AccountGenerator
from bank_ledger.logging import setup_logging
from bank_ledger.storage import JsonFileStorage

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a sample ledger file")
    parser.add_argument("--output", type=Path, default=Path("bank.json"), help="Ledger file to write")
    parser.add_argument("--count", type=int, default=25, help="Number of accounts")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--locale", default="en_US", help="Faker locale for names")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    args = parser.parse_args()

    setup_logging(level="INFO")

    if args.count < 0:
        parser.error("--count must not be negative")

    gen = AccountGenerator(seed=args.seed, locale=args.locale)
    records = list(gen.generate_batch(args.count))

    storage = JsonFileStorage(args.output, pretty=args.pretty)
    try:
        storage.save(records, last_account_number=len(records))
    except StorageError as e:
        logger.error("%s", e)
        return 1

    logger.info("Saved %d accounts to %s", len(records), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
