"""Command-line entry point for bank-ledger."""

import argparse
from pathlib import Path

from bank_ledger import __version__
from bank_ledger.config import LOG_FORMATS, LedgerConfig
from bank_ledger.console import Console, TerminalConsole
from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.shell import Shell
from bank_ledger.storage import JsonFileStorage

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-ledger",
        description="Terminal ledger for bank customer accounts.",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Ledger file (default: $BANK_LEDGER_DATA_FILE or bank.json)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: $LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log line format (default: $LOG_FORMAT or standard)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Parse arguments, configure logging and run one shell session."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = LedgerConfig.from_env()
    except ConfigurationError as e:
        parser.error(str(e))

    if args.data_file is not None:
        config.storage.data_file = args.data_file
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format

    setup_logging(level=config.log_level, format_type=config.log_format)
    logger.debug("Using ledger file %s", config.storage.data_file)

    shell = Shell(
        console=console if console is not None else TerminalConsole(),
        storage=JsonFileStorage(config.storage.data_file, pretty=config.storage.pretty_json),
        secret=config.auth.secret,
    )
    shell.run()
    return 0
